# backend/app/services/base_service.py
"""
Servicio base para los recursos del catálogo.

Los cuatro recursos (usuarios, categorías, marcas y productos) siguen el mismo
patrón: listar, obtener, crear, actualizar y eliminar. Esta clase implementa
ese flujo común y deja puntos de extensión para lo que cambia entre ellos:

- apply_defaults():    valores por defecto de los campos opcionales
- validate_create():   reglas de negocio antes del INSERT
- validate_update():   reglas de negocio antes de la fusión parcial
- validate_delete():   reglas de negocio antes del borrado
- *_locks:             colecciones que deben serializarse en cada escritura
"""

import logging
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel

from app.core.exceptions import NotFoundError
from app.crud.catalog_store import CatalogStore, EntityStore
from app.services.relationship_validator import RelationshipValidator

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class ResourceService:
    """Flujo CRUD común; las subclases fijan entity, collection y las reglas."""

    entity: str = ""
    collection: str = ""

    create_locks: Tuple[str, ...] = ()
    update_locks: Tuple[str, ...] = ()
    delete_locks: Tuple[str, ...] = ()

    def __init__(self, store: CatalogStore, validator: RelationshipValidator):
        self.store = store
        self.validator = validator

    @property
    def records(self) -> EntityStore:
        return self.store.collection(self.collection)

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_all(self) -> List[Record]:
        return await self.records.list()

    async def get_by_id(self, entity_id: int) -> Record:
        record = await self.records.get(entity_id)
        if record is None:
            raise NotFoundError(self.entity, entity_id)
        return record

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create(self, entity_in: BaseModel) -> Record:
        data = self.apply_defaults(entity_in.model_dump(exclude_none=True))
        async with self.store.locked(*(self.create_locks or (self.collection,))):
            await self.validate_create(data)
            created = await self.records.insert(data)
        logger.info(f"✅ {self.entity} {created['id']} creado")
        return created

    async def update(self, entity_id: int, entity_in: BaseModel) -> Record:
        # Un null explícito equivale a "sin cambios"
        changes = entity_in.model_dump(exclude_unset=True, exclude_none=True)
        async with self.store.locked(*(self.update_locks or (self.collection,))):
            await self.get_by_id(entity_id)
            await self.validate_update(entity_id, changes)
            updated = await self.records.update(entity_id, changes)
        if changes:
            logger.info(f"🔄 {self.entity} {entity_id} actualizado: {sorted(changes)}")
        return updated

    async def delete(self, entity_id: int) -> Record:
        async with self.store.locked(*(self.delete_locks or (self.collection,))):
            await self.get_by_id(entity_id)
            await self.validate_delete(entity_id)
            deleted = await self.records.delete(entity_id)
        logger.info(f"🗑️ {self.entity} {entity_id} eliminado")
        return deleted

    # ========================================
    # PUNTOS DE EXTENSIÓN
    # ========================================

    def apply_defaults(self, data: Record) -> Record:
        return data

    async def validate_create(self, data: Record) -> None:
        pass

    async def validate_update(self, entity_id: int, changes: Record) -> None:
        pass

    async def validate_delete(self, entity_id: int) -> None:
        pass
