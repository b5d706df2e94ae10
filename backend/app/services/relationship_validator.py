# backend/app/services/relationship_validator.py
"""
Validación de integridad referencial entre productos, categorías y marcas.

Reglas:
1. Un producto solo puede apuntar a una categoría y a una marca existentes.
   Si fallan ambas, se informa primero de la categoría.
2. Una categoría o marca no puede eliminarse mientras algún producto la
   referencie. No hay borrado en cascada: se rechaza la operación.

El validador no modifica nada; solo lee las colecciones del almacén. Quien lo
invoque debe mantener los cerrojos de escritura correspondientes mientras
dure la comprobación y la escritura que protege (ver CatalogStore.locked).
"""

import logging
from typing import Optional

from app.core.exceptions import DanglingReferenceError, DependentsExistError
from app.crud.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

# Campo de Product que referencia a cada tipo de entidad
DEPENDENT_FIELDS = {
    "category": "category_id",
    "brand": "brand_id",
}


class RelationshipValidator:
    """Comprueba referencias de productos y dependientes de categorías/marcas."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def validate_product_references(
        self,
        category_id: Optional[int] = None,
        brand_id: Optional[int] = None,
    ) -> None:
        """
        Verifica que la categoría y la marca referenciadas existan.

        Un argumento None significa que el campo no viene en la petición
        (actualización parcial) y no se comprueba.

        Raises:
            DanglingReferenceError: con field="categoryId" o field="brandId"
        """
        if category_id is not None and await self.store.categories.get(category_id) is None:
            logger.warning(f"Referencia rota: la categoría {category_id} no existe")
            raise DanglingReferenceError("categoryId", category_id)

        if brand_id is not None and await self.store.brands.get(brand_id) is None:
            logger.warning(f"Referencia rota: la marca {brand_id} no existe")
            raise DanglingReferenceError("brandId", brand_id)

    async def validate_no_dependents(self, entity: str, entity_id: int) -> None:
        """
        Verifica que ningún producto referencie la categoría o marca indicada.

        La comparación es estrictamente numérica.

        Raises:
            DependentsExistError: con el número de productos que la referencian
        """
        field = DEPENDENT_FIELDS[entity]
        dependents = await self.store.products.find_by(field, int(entity_id))
        if dependents:
            logger.warning(
                f"No se puede eliminar {entity} {entity_id}: {len(dependents)} producto(s) asociados"
            )
            raise DependentsExistError(entity, entity_id, len(dependents))
