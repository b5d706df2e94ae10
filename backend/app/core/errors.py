# backend/app/core/errors.py
from enum import Enum


class ErrorType(Enum):
    NOT_FOUND = "not_found"
    DANGLING_REFERENCE = "dangling_reference"
    DEPENDENTS_EXIST = "dependents_exist"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    DUPLICATE_KEY = "duplicate_key"
    INTERNAL_ERROR = "internal_error"


# Códigos HTTP asociados a cada tipo de error
ERROR_STATUS_MAP = {
    ErrorType.NOT_FOUND: 404,
    ErrorType.DANGLING_REFERENCE: 400,
    ErrorType.DEPENDENTS_EXIST: 409,
    ErrorType.DUPLICATE_IDENTIFIER: 409,
    ErrorType.DUPLICATE_KEY: 409,
    ErrorType.INTERNAL_ERROR: 500,
}
