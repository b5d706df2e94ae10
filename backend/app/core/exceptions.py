# backend/app/core/exceptions.py
"""
Excepciones de dominio del catálogo y sus manejadores HTTP.

Cada excepción lleva un ErrorType que la identifica sin necesidad de
comparar mensajes, y el contexto necesario para actuar sobre el rechazo
(identificador afectado, campo inválido, número de dependientes).
"""

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.errors import ErrorType, ERROR_STATUS_MAP

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Excepción base que pueden lanzar los servicios y almacenes."""

    def __init__(self, error_type: ErrorType, message: str, **context: Any):
        self.error_type = error_type
        self.message = message
        self.context = context
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_MAP.get(self.error_type, 500)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "error": self.error_type.value, **self.context}


class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            ErrorType.NOT_FOUND,
            f"{entity.capitalize()} with ID {entity_id} not found.",
            entity=entity,
            id=entity_id,
        )


class DanglingReferenceError(AppException):
    """Un producto apunta a una categoría o marca inexistente."""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(
            ErrorType.DANGLING_REFERENCE,
            f"Referenced {field} {value} does not exist.",
            field=field,
            value=value,
        )


class DependentsExistError(AppException):
    """Una categoría o marca sigue referenciada por productos."""

    def __init__(self, entity: str, entity_id: int, count: int):
        self.entity = entity
        self.entity_id = entity_id
        self.count = count
        super().__init__(
            ErrorType.DEPENDENTS_EXIST,
            f"Cannot delete {entity} {entity_id}: {count} product(s) still reference it.",
            entity=entity,
            id=entity_id,
            count=count,
        )


class DuplicateIdentifierError(AppException):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            ErrorType.DUPLICATE_IDENTIFIER,
            f"{entity.capitalize()} with ID {entity_id} already exists.",
            entity=entity,
            id=entity_id,
        )


class DuplicateKeyError(AppException):
    """Violación de un campo único (username, email)."""

    def __init__(self, entity: str, field: str, value: Any):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(
            ErrorType.DUPLICATE_KEY,
            f"{entity.capitalize()} with {field} '{value}' already exists.",
            entity=entity,
            field=field,
            value=value,
        )


async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
    """Convierte una AppException en la respuesta HTTP correspondiente."""
    logger.info(f"Petición rechazada ({exc.error_type.value}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Fallos inesperados (p. ej. base de datos caída): 500 genérico."""
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": ErrorType.INTERNAL_ERROR.value},
    )
