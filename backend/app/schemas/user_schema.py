# backend/app/schemas/user_schema.py
"""
Esquemas Pydantic para el modelo User.

La contraseña solo se acepta en la entrada; UserResponse no la expone.
"""

from typing import Optional
from pydantic import Field, StrictInt

from .base_schema import CamelModel


class UserBase(CamelModel):
    name: str = Field(..., min_length=1)
    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    avatar: Optional[str] = None


class UserCreate(UserBase):
    """Esquema para crear un usuario. username y email se derivan del nombre si faltan."""
    id: Optional[StrictInt] = Field(default=None, gt=0)
    password: str = Field(..., min_length=1)


class UserUpdate(UserBase):
    """Esquema para actualizar un usuario. Todos los campos son opcionales."""
    name: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)


class UserResponse(CamelModel):
    id: int
    name: str
    username: str
    email: str
    avatar: str
