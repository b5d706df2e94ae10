# backend/app/crud/memory_crud.py

"""
Almacén de entidades en memoria.

Implementa las operaciones CRUD básicas de una colección (usuarios, categorías,
marcas o productos) sobre un diccionario ordenado por inserción. Es el backend
por defecto de la aplicación y el que utilizan los datos de ejemplo y los tests.

Contrato común con SqlEntityStore:
- list():            todos los registros, en orden de inserción
- get(id):           el registro o None (nunca lanza por un ID inexistente)
- insert(record):    asigna ID si falta; DuplicateIdentifierError si ya existe
- update(id, campos): fusión parcial; NotFoundError si no existe
- delete(id):        elimina y devuelve; NotFoundError si no existe
- find_by(campo, v): registros cuyo campo es igual a v (comparación estricta)

Los registros entran y salen como diccionarios planos. Siempre se devuelven
copias para que nadie pueda modificar la colección sin pasar por el almacén.
"""

from typing import Any, Dict, Iterable, List, Optional

from app.core.exceptions import NotFoundError, DuplicateIdentifierError, DuplicateKeyError

Record = Dict[str, Any]


class MemoryEntityStore:
    """Colección en memoria de una entidad, indexada por ID numérico."""

    def __init__(self, entity: str, unique_fields: Iterable[str] = ()):
        self.entity = entity
        self.unique_fields = tuple(unique_fields)
        self._records: Dict[int, Record] = {}

    # ========================================
    # OPERACIONES DE LECTURA (READ)
    # ========================================

    async def list(self) -> List[Record]:
        return [dict(record) for record in self._records.values()]

    async def get(self, entity_id: int) -> Optional[Record]:
        record = self._records.get(entity_id)
        return dict(record) if record is not None else None

    async def find_by(self, field: str, value: Any) -> List[Record]:
        return [dict(r) for r in self._records.values() if r.get(field) == value]

    async def count(self) -> int:
        return len(self._records)

    # ========================================
    # OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
    # ========================================

    async def insert(self, record: Record) -> Record:
        """
        Guarda un registro nuevo.

        Si el registro no trae ID se asigna el siguiente correlativo
        (máximo actual + 1, empezando en 1). Un ID explícito que ya exista
        se rechaza con DuplicateIdentifierError.
        """
        data = dict(record)
        entity_id = data.get("id")
        if entity_id is None:
            entity_id = max(self._records, default=0) + 1
            data["id"] = entity_id
        elif entity_id in self._records:
            raise DuplicateIdentifierError(self.entity, entity_id)

        self._check_unique(data, exclude_id=None)
        self._records[entity_id] = data
        return dict(data)

    async def update(self, entity_id: int, changes: Record) -> Record:
        """Fusiona `changes` en el registro; los campos ausentes no se tocan."""
        current = self._records.get(entity_id)
        if current is None:
            raise NotFoundError(self.entity, entity_id)

        changes = {k: v for k, v in changes.items() if k != "id"}
        self._check_unique(changes, exclude_id=entity_id)
        current.update(changes)
        return dict(current)

    async def delete(self, entity_id: int) -> Record:
        record = self._records.pop(entity_id, None)
        if record is None:
            raise NotFoundError(self.entity, entity_id)
        return record

    def _check_unique(self, data: Record, exclude_id: Optional[int]) -> None:
        for field in self.unique_fields:
            if field not in data:
                continue
            for other_id, other in self._records.items():
                if other_id != exclude_id and other.get(field) == data[field]:
                    raise DuplicateKeyError(self.entity, field, data[field])
