"""
Endpoints REST para operaciones CRUD de marcas.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from app.api import deps
from app.schemas import brand_schema
from app.services.brand_service import BrandService

router = APIRouter()

@router.get("", response_model=List[brand_schema.BrandResponse])
async def read_brands(
    service: BrandService = Depends(deps.get_brand_service),
) -> List[brand_schema.BrandResponse]:
    """Obtiene todas las marcas."""
    return await service.get_all()

@router.get("/{brand_id}", response_model=brand_schema.BrandResponse)
async def read_brand(
    *,
    service: BrandService = Depends(deps.get_brand_service),
    brand_id: deps.EntityId,
) -> brand_schema.BrandResponse:
    """Obtiene una marca por su ID."""
    return await service.get_by_id(brand_id)

@router.post("", response_model=brand_schema.BrandResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    *,
    service: BrandService = Depends(deps.get_brand_service),
    brand_in: brand_schema.BrandCreate,
) -> brand_schema.BrandResponse:
    """Crea una nueva marca."""
    return await service.create(brand_in)

@router.put("/{brand_id}", response_model=brand_schema.BrandResponse)
async def update_brand(
    *,
    service: BrandService = Depends(deps.get_brand_service),
    brand_id: deps.EntityId,
    brand_in: brand_schema.BrandUpdate,
) -> brand_schema.BrandResponse:
    """Actualiza una marca existente."""
    return await service.update(brand_id, brand_in)

@router.delete("/{brand_id}", response_model=brand_schema.BrandResponse)
async def delete_brand(
    *,
    service: BrandService = Depends(deps.get_brand_service),
    brand_id: deps.EntityId,
) -> brand_schema.BrandResponse:
    """Elimina una marca sin productos asociados."""
    return await service.delete(brand_id)
