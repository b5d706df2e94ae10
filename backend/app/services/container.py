# backend/app/services/container.py
"""
Contenedor de dependencias de la aplicación.

Crea una única instancia de cada servicio sobre el mismo CatalogStore, de modo
que todos trabajan sobre las mismas colecciones sin estado global de módulo.
La raíz de composición (lifespan en main.py) construye el contenedor y lo
guarda en app.state; los endpoints lo obtienen a través de app/api/deps.py.

Uso:
    container = ServiceContainer(CatalogStore.in_memory())
    await container.products.create(product_in)
"""

from app.crud.catalog_store import CatalogStore
from app.services.relationship_validator import RelationshipValidator
from app.services.user_service import UserService
from app.services.category_service import CategoryService
from app.services.brand_service import BrandService
from app.services.product_service import ProductService


class ServiceContainer:
    def __init__(self, store: CatalogStore):
        self.store = store
        self.validator = RelationshipValidator(store)

        self.users = UserService(store, self.validator)
        self.categories = CategoryService(store, self.validator)
        self.brands = BrandService(store, self.validator)
        self.products = ProductService(store, self.validator)
