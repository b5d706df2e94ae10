"""
Endpoints REST para operaciones CRUD de categorías.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from app.api import deps
from app.schemas import category_schema
from app.services.category_service import CategoryService

router = APIRouter()

@router.get("", response_model=List[category_schema.CategoryResponse])
async def read_categories(
    service: CategoryService = Depends(deps.get_category_service),
) -> List[category_schema.CategoryResponse]:
    """Obtiene todas las categorías."""
    return await service.get_all()

@router.get("/{category_id}", response_model=category_schema.CategoryResponse)
async def read_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: deps.EntityId,
) -> category_schema.CategoryResponse:
    """Obtiene los detalles de una categoría específica por su ID."""
    return await service.get_by_id(category_id)

@router.post("", response_model=category_schema.CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_in: category_schema.CategoryCreate,
) -> category_schema.CategoryResponse:
    """Crea una nueva categoría en el sistema."""
    return await service.create(category_in)

@router.put("/{category_id}", response_model=category_schema.CategoryResponse)
async def update_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: deps.EntityId,
    category_in: category_schema.CategoryUpdate,
) -> category_schema.CategoryResponse:
    """Actualiza una categoría existente (fusión parcial)."""
    return await service.update(category_id, category_in)

@router.delete("/{category_id}", response_model=category_schema.CategoryResponse)
async def delete_category(
    *,
    service: CategoryService = Depends(deps.get_category_service),
    category_id: deps.EntityId,
) -> category_schema.CategoryResponse:
    """Elimina una categoría. Se rechaza (409) si tiene productos asociados."""
    return await service.delete(category_id)
