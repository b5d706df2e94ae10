# backend/app/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo la configuración de rutas, manejo de errores, documentación
automática, y el ciclo de vida de la aplicación.

Características principales:
- Configuración centralizada de la aplicación
- Raíz de composición: el almacén (memoria o base de datos) y los servicios
  se crean al arrancar y se guardan en app.state
- Registro de routers de la API con prefijos
- Documentación automática (OpenAPI/Swagger en /docs)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends

from app.core.config import settings  # Configuración centralizada de la aplicación
from app.core.logging_config import configure_logging
from app.core.exceptions import AppException, app_exception_handler, generic_exception_handler
from app.api import deps
from app.api.v1.api_router import api_router_v1  # Router principal de la API v1
from app.crud.catalog_store import CatalogStore
from app.db.database import build_engine, build_session_factory, init_models
from app.db.seed import seed_store
from app.services.container import ServiceContainer

logger = logging.getLogger(__name__)

# ========================================
# CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Construye el almacén y los servicios al arrancar y libera la conexión
    a la base de datos al cerrar.
    """
    configure_logging()
    engine = None

    if settings.use_database:
        engine = build_engine(settings.DATABASE_URL)
        await init_models(engine)
        store = CatalogStore.with_database(build_session_factory(engine))
        logger.info("✅ Almacén SQL inicializado")
    else:
        store = CatalogStore.in_memory()
        logger.info("ℹ️  Usando almacén en memoria")

    if settings.SEED_ON_STARTUP:
        await seed_store(store, seed=settings.SEED_VALUE)

    app.state.services = ServiceContainer(store)
    logger.info("Rutas cargadas: /users, /categories, /brands, /products")
    try:
        yield
    finally:
        if engine is not None:
            await engine.dispose()

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API REST de Users, Categories, Brands y Products con validación de relaciones",
    lifespan=lifespan,
)

# Errores de dominio -> 4xx con contexto; cualquier otro fallo -> 500 genérico
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router_v1, prefix=settings.API_V1_STR)


@app.get("/", tags=["Root"])
async def read_root(current_settings=Depends(deps.get_settings)):
    """
    Endpoint raíz para verificación básica del estado de la API.

    Returns:
        dict: Mensaje de bienvenida con el nombre y la versión del proyecto,
        y la ruta de la documentación

    Example:
        GET /
        Response: {"message": "Bienvenido a Catálogo API v1.0.1", "docs": "/docs"}
    """
    return {
        "message": f"Bienvenido a {current_settings.PROJECT_NAME} v{current_settings.PROJECT_VERSION}",
        "docs": app.docs_url,
    }
