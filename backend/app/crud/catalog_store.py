# backend/app/crud/catalog_store.py

"""
Agrupa las cuatro colecciones del catálogo y sus cerrojos de escritura.

La comprobación de referencias y la escritura que protege deben ejecutarse
como un único paso: nadie puede borrar una categoría entre el "existe" del
validador y el INSERT del producto. Para ello cada colección tiene su propio
asyncio.Lock y las operaciones que tocan varias colecciones los adquieren
siempre en el mismo orden (COLLECTIONS), lo que evita interbloqueos.

Las lecturas no toman ningún cerrojo.
"""

import asyncio
from contextlib import asynccontextmanager, AsyncExitStack
from typing import AsyncIterator, Dict, Union

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.crud.memory_crud import MemoryEntityStore
from app.crud.sql_crud import SqlEntityStore

EntityStore = Union[MemoryEntityStore, SqlEntityStore]

# Orden canónico de adquisición de cerrojos
COLLECTIONS = ("users", "categories", "brands", "products")

# Nombre de la entidad (para mensajes de error) y campos únicos por colección
ENTITY_NAMES = {
    "users": "user",
    "categories": "category",
    "brands": "brand",
    "products": "product",
}
UNIQUE_FIELDS = {
    "users": ("username", "email"),
}


class CatalogStore:
    """Contenedor de las colecciones Users, Categories, Brands y Products."""

    def __init__(
        self,
        users: EntityStore,
        categories: EntityStore,
        brands: EntityStore,
        products: EntityStore,
    ):
        self.users = users
        self.categories = categories
        self.brands = brands
        self.products = products
        self._locks: Dict[str, asyncio.Lock] = {name: asyncio.Lock() for name in COLLECTIONS}

    def collection(self, name: str) -> EntityStore:
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection '{name}'")
        return getattr(self, name)

    @asynccontextmanager
    async def locked(self, *names: str) -> AsyncIterator[None]:
        """Serializa las escrituras sobre las colecciones indicadas."""
        async with AsyncExitStack() as stack:
            for name in COLLECTIONS:
                if name in names:
                    await stack.enter_async_context(self._locks[name])
            yield

    # ========================================
    # CONSTRUCTORES POR BACKEND
    # ========================================

    @classmethod
    def in_memory(cls) -> "CatalogStore":
        return cls(**{
            name: MemoryEntityStore(ENTITY_NAMES[name], UNIQUE_FIELDS.get(name, ()))
            for name in COLLECTIONS
        })

    @classmethod
    def with_database(cls, session_factory: async_sessionmaker) -> "CatalogStore":
        from app.db.models.user_model import User
        from app.db.models.category_model import Category
        from app.db.models.brand_model import Brand
        from app.db.models.product_model import Product

        models = {"users": User, "categories": Category, "brands": Brand, "products": Product}
        return cls(**{
            name: SqlEntityStore(models[name], session_factory, ENTITY_NAMES[name], UNIQUE_FIELDS.get(name, ()))
            for name in COLLECTIONS
        })
