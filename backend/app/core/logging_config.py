# backend/app/core/logging_config.py
import logging
from typing import Optional

from app.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configura el logging raíz a partir de settings.LOG_LEVEL / LOG_FORMAT."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
