# backend/app/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

# Importación de routers especializados por recurso
from app.api.v1.endpoints import (
    users,
    categories,
    brands,
    products,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL V1
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR RECURSO
# ========================================

api_router_v1.include_router(
    users.router,
    prefix="/users",                # Prefijo: /api/v1/users
    tags=["Users"]
)

api_router_v1.include_router(
    categories.router,
    prefix="/categories",
    tags=["Categories"]
)

api_router_v1.include_router(
    brands.router,
    prefix="/brands",
    tags=["Brands"]
)

# Productos: create/update validan categoryId y brandId
api_router_v1.include_router(
    products.router,
    prefix="/products",
    tags=["Products"]
)
