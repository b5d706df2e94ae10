# backend/app/db/seed.py
"""
Generador de datos de ejemplo para el catálogo.

Crea 10 categorías, 10 marcas, 100 usuarios y 100 productos. Cada producto
referencia una categoría y una marca generadas antes, así que los datos
cumplen siempre las reglas de integridad. El generador usa un
random.Random con semilla fija para que los datos sean reproducibles.

Se ejecuta al arrancar si SEED_ON_STARTUP=true y el almacén está vacío,
o manualmente contra la base de datos configurada:

    python -m app.db.seed
"""

import asyncio
import logging
import random

from app.core.config import settings
from app.crud.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

CATEGORY_NAMES = [
    "Herramientas", "Electrónica", "Hogar", "Jardín", "Deportes",
    "Juguetes", "Ropa", "Alimentación", "Automoción", "Oficina",
]
BRAND_DATA = [
    ("Acme", "Estados Unidos"), ("Bosch", "Alemania"), ("Makita", "Japón"),
    ("Truper", "México"), ("Philips", "Países Bajos"), ("Samsung", "Corea del Sur"),
    ("Decathlon", "Francia"), ("Lego", "Dinamarca"), ("Zara", "España"),
    ("Tramontina", "Brasil"),
]
FIRST_NAMES = ["Ana", "Luis", "María", "Carlos", "Lucía", "Jorge", "Elena", "Pablo", "Sofía", "Diego"]
LAST_NAMES = ["García", "López", "Martínez", "Sánchez", "Pérez", "Gómez", "Díaz", "Torres", "Ruiz", "Vargas"]
ADJECTIVES = ["Compacto", "Profesional", "Ergonómico", "Clásico", "Inteligente", "Resistente", "Ligero"]
NOUNS = ["Martillo", "Taladro", "Lámpara", "Silla", "Balón", "Cafetera", "Mochila", "Reloj", "Teclado", "Manta"]


async def seed_store(store: CatalogStore, seed: int = 712) -> bool:
    """
    Rellena el almacén con datos de ejemplo.

    Returns:
        False si ya había datos (no se toca nada), True si se insertaron
    """
    if await store.products.count() or await store.categories.count():
        logger.info("El almacén ya contiene datos, no se generan datos de ejemplo")
        return False

    rng = random.Random(seed)

    for i, name in enumerate(CATEGORY_NAMES, start=1):
        await store.categories.insert({
            "id": i,
            "name": name,
            "description": f"Productos de la sección {name.lower()}",
            "active": rng.random() > 0.2,
        })

    for i, (name, country) in enumerate(BRAND_DATA, start=1):
        await store.brands.insert({
            "id": i,
            "name": name,
            "country": country,
            "description": f"Marca {name} de {country}",
            "active": rng.random() > 0.2,
        })

    for i in range(1, 101):
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        username = f"{first.lower()}.{last.lower()}{i}"
        await store.users.insert({
            "id": i,
            "name": f"{first} {last}",
            "username": username,
            "email": f"{username}@example.com",
            "avatar": f"https://placehold.co/200x200?text={first[0]}{last[0]}",
            "password": "".join(rng.choices("abcdefghijkmnpqrstuvwxyz23456789", k=10)),
        })

    for i in range(1, 101):
        name = f"{rng.choice(NOUNS)} {rng.choice(ADJECTIVES)}"
        await store.products.insert({
            "id": i,
            "name": name,
            "description": f"{name} de uso diario",
            "price": round(rng.uniform(50, 5000), 2),
            "stock": rng.randint(0, 100),
            "image": f"https://placehold.co/400x300?text=Producto+{i}",
            "category_id": rng.randint(1, len(CATEGORY_NAMES)),
            "brand_id": rng.randint(1, len(BRAND_DATA)),
            "active": rng.random() > 0.2,
        })

    logger.info("Datos de ejemplo generados: 10 categorías, 10 marcas, 100 usuarios, 100 productos")
    return True


async def main() -> None:
    from app.core.logging_config import configure_logging
    from app.db.database import build_engine, build_session_factory, init_models

    configure_logging()
    engine = build_engine(settings.DATABASE_URL)
    try:
        await init_models(engine)
        store = CatalogStore.with_database(build_session_factory(engine))
        await seed_store(store, seed=settings.SEED_VALUE)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
