# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que pueden ser inyectadas en los
endpoints de la API. Los servicios viven en el ServiceContainer que la
aplicación guarda en app.state al arrancar; en los tests basta con sustituir
ese contenedor por otro construido sobre un almacén en memoria.
"""

import re
from typing import Annotated, Any

from fastapi import Path, Request
from pydantic import BeforeValidator

from app.core.config import settings
from app.services.container import ServiceContainer
from app.services.user_service import UserService
from app.services.category_service import CategoryService
from app.services.brand_service import BrandService
from app.services.product_service import ProductService


def parse_path_id(value: Any) -> Any:
    """
    Acepta solo dígitos en el identificador de la ruta.

    '12' -> 12. '1.0', '+1', ' 1' o 'true' se rechazan con 422 en lugar de
    convertirse silenciosamente en un entero.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and re.fullmatch(r"[0-9]+", value):
        return int(value)
    raise ValueError("Identifier must be a positive integer")


EntityId = Annotated[int, BeforeValidator(parse_path_id), Path(gt=0)]


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_user_service(request: Request) -> UserService:
    return get_services(request).users


def get_category_service(request: Request) -> CategoryService:
    return get_services(request).categories


def get_brand_service(request: Request) -> BrandService:
    return get_services(request).brands


def get_product_service(request: Request) -> ProductService:
    return get_services(request).products


def get_settings():
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return settings
