# backend/app/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

Un producto siempre pertenece a una categoría y a una marca existentes
(categoryId / brandId). La existencia de esas referencias no se comprueba
aquí sino en el servicio, que tiene acceso al almacén.
"""

from typing import Optional
from pydantic import Field, StrictInt

from .base_schema import CamelModel

# ========================================
# ESQUEMA BASE
# ========================================

class ProductBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de producto."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = None
    category_id: StrictInt = Field(..., gt=0)
    brand_id: StrictInt = Field(..., gt=0)
    active: Optional[bool] = None


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ProductCreate(ProductBase):
    """Esquema para crear un nuevo producto. categoryId y brandId son obligatorios."""
    id: Optional[StrictInt] = Field(default=None, gt=0)


class ProductUpdate(ProductBase):
    """
    Esquema para actualizar un producto. Todos los campos son opcionales.

    Solo se validan las referencias (categoryId, brandId) que vengan en el cuerpo.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    category_id: Optional[StrictInt] = Field(default=None, gt=0)
    brand_id: Optional[StrictInt] = Field(default=None, gt=0)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ProductResponse(CamelModel):
    """Esquema de respuesta para un producto."""
    id: int
    name: str
    description: str
    price: float
    stock: int
    image: str
    category_id: int
    brand_id: int
    active: bool
