# backend/app/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

Los esquemas definen la estructura de datos que fluye a través de la API:
- Validación automática de tipos de datos
- Serialización/deserialización JSON
- Documentación automática en OpenAPI/Swagger
- Separación entre modelo de almacenamiento y API

Patrón de esquemas utilizado:
- CategoryBase: Propiedades comunes compartidas
- CategoryCreate: Para crear nuevas categorías (POST)
- CategoryUpdate: Para actualizar categorías existentes (PUT)
- CategoryResponse: Para respuestas de la API (GET)

Los campos opcionales de CategoryCreate que no se envían se completan en el
servicio con los valores por defecto (descripción "Sin descripción", activa).
"""

from typing import Optional
from pydantic import Field, StrictInt

from .base_schema import CamelModel

# ========================================
# ESQUEMA BASE
# ========================================

class CategoryBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de categoría."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    active: Optional[bool] = None


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class CategoryCreate(CategoryBase):
    """Esquema para crear una nueva categoría. El ID es opcional (se asigna si falta)."""
    id: Optional[StrictInt] = Field(default=None, gt=0)


class CategoryUpdate(CategoryBase):
    """Esquema para actualizar una categoría. Todos los campos son opcionales."""
    name: Optional[str] = Field(default=None, min_length=1)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class CategoryResponse(CamelModel):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int
    name: str
    description: str
    active: bool
