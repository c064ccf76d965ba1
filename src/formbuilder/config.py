"""Configuración de FormBuilder (modelo Pydantic leído desde el entorno)."""

import getpass
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_db_path() -> Path:
    return Path.home() / ".formbuilder" / "formbuilder.db"


def _default_user() -> Optional[str]:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return None


class Settings(BaseModel):
    """Configuración del proceso."""
    db_path: Path = Field(default_factory=_default_db_path, description="Archivo SQLite")
    user_id: Optional[str] = Field(default_factory=_default_user, description="Usuario diseñador")
    share_base_url: str = Field(default="formbuilder://submit/", description="Prefijo de enlaces públicos")
    log_level: str = Field(default="WARNING", description="Nivel de logging")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Nivel de log inválido: {v}")
        return level

    def share_link(self, token: str) -> str:
        """Enlace público completo de un formulario."""
        return f"{self.share_base_url}{token}"

    def share_token(self, link: str) -> str:
        """Extrae el token de un enlace (acepta también el token solo)."""
        link = link.strip()
        if link.startswith(self.share_base_url):
            return link[len(self.share_base_url):]
        return link.rstrip("/").rsplit("/", 1)[-1]

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Construye la configuración a partir de variables de entorno.

        Variables reconocidas:
        - FORMBUILDER_DB: ruta a la base de datos
        - FORMBUILDER_USER: identificador del usuario actual
        - FORMBUILDER_SHARE_URL: prefijo para enlaces públicos
        - FORMBUILDER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
        """
        values = {}
        if os.getenv("FORMBUILDER_DB"):
            values["db_path"] = Path(os.environ["FORMBUILDER_DB"]).expanduser()
        if os.getenv("FORMBUILDER_USER"):
            values["user_id"] = os.environ["FORMBUILDER_USER"]
        if os.getenv("FORMBUILDER_SHARE_URL"):
            values["share_base_url"] = os.environ["FORMBUILDER_SHARE_URL"]
        if os.getenv("FORMBUILDER_LOG_LEVEL"):
            values["log_level"] = os.environ["FORMBUILDER_LOG_LEVEL"]
        return cls(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Obtiene la configuración global (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Descarta la configuración cacheada (se relee del entorno)."""
    global _settings
    _settings = None
