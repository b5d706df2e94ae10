# backend/app/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables desde el entorno o .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Catálogo API"
    PROJECT_VERSION: str = "1.0.1"

    # Almacenamiento: "memory" (colecciones en memoria) o "database" (SQLAlchemy)
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite+aiosqlite:///./catalogo.db"

    # Datos de ejemplo generados al arrancar (solo si el almacén está vacío)
    SEED_ON_STARTUP: bool = False
    SEED_VALUE: int = 712

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @property
    def use_database(self) -> bool:
        """Indica si el backend configurado es la base de datos."""
        return self.STORAGE_BACKEND.lower() == "database"

# Instancia global de la configuración
settings = Settings()
