"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que la CLI y los servicios lean los defaults de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "protocol-basics"
MAX_ROLLS = 10_000

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Carpeta de configuración del usuario para la plataforma actual.

    Windows usa %APPDATA%, macOS `Application Support` y el resto XDG.
    Se resuelve en cada llamada para respetar cambios de entorno.
    """

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Los valores aquí son solo defaults: cada comando de la CLI puede
    sobrescribirlos con sus propias opciones.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCOL_BASICS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_sides: int = Field(
        default=6,
        gt=0,
        description="Número de caras del dado cuando no se indica --sides.",
    )
    default_rolls: int = Field(
        default=5,
        ge=0,
        le=MAX_ROLLS,
        description="Tiradas por sesión cuando no se indica --count.",
    )
    seed: int | None = Field(
        default=None,
        description="Semilla del generador aleatorio (None = entropía del proceso).",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging cuando no se usa --verbose.",
    )

    def __init__(self, **values: Any) -> None:
        # Orden: proyecto primero (dev), luego config global de usuario.
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
