# backend/app/schemas/brand_schema.py

"""
Esquemas Pydantic para el modelo Brand.

Mismo patrón que las categorías (Base / Create / Update / Response), con el
país de origen como campo adicional.
"""

from typing import Optional
from pydantic import Field, StrictInt

from .base_schema import CamelModel


class BrandBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de marca."""
    name: str = Field(..., min_length=1)
    country: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None


class BrandCreate(BrandBase):
    """Esquema para crear una nueva marca."""
    id: Optional[StrictInt] = Field(default=None, gt=0)


class BrandUpdate(BrandBase):
    """Esquema para actualizar una marca. Todos los campos son opcionales."""
    name: Optional[str] = Field(default=None, min_length=1)


class BrandResponse(CamelModel):
    id: int
    name: str
    country: str
    description: str
    active: bool
