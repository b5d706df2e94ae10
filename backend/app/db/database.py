# backend/app/db/database.py

"""
Configuración de la base de datos para el backend "database".

Este módulo define los componentes básicos que usa el almacén SQL:
- Clase base para modelos (Base)
- Construcción del motor asíncrono (engine) a partir de una URL
- Fábrica de sesiones asíncronas
- Creación de tablas al arrancar

El motor no se crea al importar: lo crea la raíz de composición (lifespan en main.py) solo cuando
STORAGE_BACKEND=database, y lo libera al cerrar la aplicación.
"""

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import declarative_base

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def build_engine(database_url: str) -> AsyncEngine:
    """Crea el motor asíncrono para la URL dada (postgresql+asyncpg, sqlite+aiosqlite...)."""
    return create_async_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False es importante para que los objetos sigan siendo utilizables
    # después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Crea las tablas que no existan todavía."""
    # Importar los modelos registra sus tablas en Base.metadata
    from app.db.models import user_model, category_model, brand_model, product_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
