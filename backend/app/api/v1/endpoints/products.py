# backend/app/api/v1/endpoints/products.py

"""
Endpoints REST para operaciones CRUD de productos.
"""

from fastapi import APIRouter, Depends, status
from typing import List
import logging

from app.api import deps
from app.schemas import product_schema
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[product_schema.ProductResponse])
async def read_products(
    service: ProductService = Depends(deps.get_product_service),
) -> List[product_schema.ProductResponse]:
    """Obtiene todos los productos."""
    products = await service.get_all()
    logger.debug(f"📋 PRODUCTOS: Encontrados {len(products)} resultados")
    return products


@router.get("/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(
    *,
    service: ProductService = Depends(deps.get_product_service),
    product_id: deps.EntityId,
) -> product_schema.ProductResponse:
    """Obtiene los detalles de un producto por ID."""
    logger.debug(f"🔍 PRODUCTO: Buscando producto ID {product_id}")
    return await service.get_by_id(product_id)


@router.post("", response_model=product_schema.ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    *,
    service: ProductService = Depends(deps.get_product_service),
    product_in: product_schema.ProductCreate,
) -> product_schema.ProductResponse:
    """Crea un nuevo producto. La categoría y la marca deben existir."""
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.name}'")
    return await service.create(product_in)


@router.put("/{product_id}", response_model=product_schema.ProductResponse)
async def update_product(
    *,
    service: ProductService = Depends(deps.get_product_service),
    product_id: deps.EntityId,
    product_in: product_schema.ProductUpdate,
) -> product_schema.ProductResponse:
    """Actualiza un producto existente (fusión parcial)."""
    return await service.update(product_id, product_in)


@router.delete("/{product_id}", response_model=product_schema.ProductResponse)
async def delete_product(
    *,
    service: ProductService = Depends(deps.get_product_service),
    product_id: deps.EntityId,
) -> product_schema.ProductResponse:
    """Elimina un producto del sistema."""
    return await service.delete(product_id)
