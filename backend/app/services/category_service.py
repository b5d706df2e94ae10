# backend/app/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.

Además del CRUD común, impide eliminar una categoría mientras algún producto
la tenga asignada (integridad referencial sin borrado en cascada).
"""

from app.services.base_service import ResourceService, Record

DEFAULT_DESCRIPTION = "Sin descripción"


class CategoryService(ResourceService):
    """
    Servicio para operaciones de negocio relacionadas con categorías.

    Características:
    - Valores por defecto: descripción "Sin descripción" y activa
    - Rechazo del borrado si existen productos asociados (DependentsExistError)
    """

    entity = "category"
    collection = "categories"

    # El borrado lee productos: ninguna alta de producto puede colarse entre
    # la comprobación y la eliminación
    delete_locks = ("categories", "products")

    def apply_defaults(self, data: Record) -> Record:
        data.setdefault("description", DEFAULT_DESCRIPTION)
        data.setdefault("active", True)
        return data

    async def validate_delete(self, entity_id: int) -> None:
        await self.validator.validate_no_dependents(self.entity, entity_id)
