# backend/app/crud/sql_crud.py

"""
Almacén de entidades respaldado por SQLAlchemy (sesiones asíncronas).

Ofrece el mismo contrato que MemoryEntityStore, pero persiste cada colección
en su tabla correspondiente (ver app/db/models). Cada operación abre su propia
sesión a partir de la fábrica recibida y confirma la transacción al terminar.

Notas:
- Los IDs se asignan de forma explícita (máximo + 1) para que ambos backends
  se comporten igual; las tablas no usan auto-incremento.
- Las colisiones de campos únicos se detectan antes del INSERT/UPDATE para
  poder informar del campo concreto.
"""

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select, func, inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import NotFoundError, DuplicateIdentifierError, DuplicateKeyError

import logging

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class SqlEntityStore:
    """Colección de una entidad persistida en una tabla SQL."""

    def __init__(self, model, session_factory: async_sessionmaker, entity: str, unique_fields: Iterable[str] = ()):
        self.model = model
        self.session_factory = session_factory
        self.entity = entity
        self.unique_fields = tuple(unique_fields)

    # ========================================
    # OPERACIONES DE LECTURA (READ)
    # ========================================

    async def list(self) -> List[Record]:
        async with self.session_factory() as session:
            result = await session.execute(select(self.model).order_by(self.model.id))
            return [self._to_dict(obj) for obj in result.scalars().all()]

    async def get(self, entity_id: int) -> Optional[Record]:
        async with self.session_factory() as session:
            obj = await session.get(self.model, entity_id)
            return self._to_dict(obj) if obj is not None else None

    async def find_by(self, field: str, value: Any) -> List[Record]:
        column = getattr(self.model, field)
        async with self.session_factory() as session:
            result = await session.execute(
                select(self.model).filter(column == value).order_by(self.model.id)
            )
            return [self._to_dict(obj) for obj in result.scalars().all()]

    async def count(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count(self.model.id)))
            return result.scalar_one()

    # ========================================
    # OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
    # ========================================

    async def insert(self, record: Record) -> Record:
        data = dict(record)
        async with self.session_factory() as session:
            if data.get("id") is None:
                result = await session.execute(select(func.max(self.model.id)))
                data["id"] = (result.scalar() or 0) + 1
            elif await session.get(self.model, data["id"]) is not None:
                raise DuplicateIdentifierError(self.entity, data["id"])

            await self._check_unique(session, data, exclude_id=None)

            obj = self.model(**data)
            session.add(obj)
            await session.commit()
            await session.refresh(obj)
            logger.debug(f"{self.entity} {obj.id} insertado en '{self.model.__tablename__}'")
            return self._to_dict(obj)

    async def update(self, entity_id: int, changes: Record) -> Record:
        async with self.session_factory() as session:
            obj = await session.get(self.model, entity_id)
            if obj is None:
                raise NotFoundError(self.entity, entity_id)

            changes = {k: v for k, v in changes.items() if k != "id"}
            if not changes:
                return self._to_dict(obj)

            await self._check_unique(session, changes, exclude_id=entity_id)
            for key, value in changes.items():
                setattr(obj, key, value)

            session.add(obj)
            await session.commit()
            await session.refresh(obj)
            return self._to_dict(obj)

    async def delete(self, entity_id: int) -> Record:
        async with self.session_factory() as session:
            obj = await session.get(self.model, entity_id)
            if obj is None:
                raise NotFoundError(self.entity, entity_id)
            record = self._to_dict(obj)
            await session.delete(obj)
            await session.commit()
            return record

    # ========================================
    # FUNCIONES AUXILIARES
    # ========================================

    async def _check_unique(self, session: AsyncSession, data: Record, exclude_id: Optional[int]) -> None:
        for field in self.unique_fields:
            if field not in data:
                continue
            query = select(self.model.id).filter(getattr(self.model, field) == data[field])
            if exclude_id is not None:
                query = query.filter(self.model.id != exclude_id)
            result = await session.execute(query.limit(1))
            if result.scalar() is not None:
                raise DuplicateKeyError(self.entity, field, data[field])

    @staticmethod
    def _to_dict(obj) -> Record:
        """Convierte una fila ORM en un diccionario plano."""
        return {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}
