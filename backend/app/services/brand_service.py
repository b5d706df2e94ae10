# backend/app/services/brand_service.py
"""
Servicio para operaciones de negocio relacionadas con marcas.
"""

from app.services.base_service import ResourceService, Record

DEFAULT_COUNTRY = "Desconocido"
DEFAULT_DESCRIPTION = "Sin descripción"


class BrandService(ResourceService):
    """Marcas: mismo flujo que las categorías, con país de origen."""

    entity = "brand"
    collection = "brands"
    delete_locks = ("brands", "products")

    def apply_defaults(self, data: Record) -> Record:
        data.setdefault("country", DEFAULT_COUNTRY)
        data.setdefault("description", DEFAULT_DESCRIPTION)
        data.setdefault("active", True)
        return data

    async def validate_delete(self, entity_id: int) -> None:
        await self.validator.validate_no_dependents(self.entity, entity_id)
