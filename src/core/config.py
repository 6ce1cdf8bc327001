"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para la CLI, el shell y
los adaptadores (HTTP, sesión).

Precedencia en `load_settings` (de mayor a menor):
1) variables de entorno `MLE_*`
2) `.env` global del usuario (ver `get_user_config_dir`)
3) `.env` del directorio actual

`AppSettings()` a secas solo lee variables de entorno. La ruta del `.env` de
usuario se calcula en cada llamada a `load_settings`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mle-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mle-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mle-cli"
    return Path.home() / ".config" / "mle-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="MLE_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    keyword: str = Field(
        default="mle",
        min_length=1,
        pattern=r"^\S+$",
        description="Palabra clave que identifica las sentencias del comando registrado.",
    )
    script_name: str = Field(
        default="mle.py",
        min_length=1,
        pattern=r"^\S+$",
        description="Nombre del script en la forma `script <name> ...` del shell.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request al descargar módulos (segundos).",
    )
    user_agent: str = Field(
        default=f"mle-cli/{__version__}",
        min_length=1,
        description="User-Agent para descargas de módulos.",
    )
    prompt: str = Field(
        default="SQL> ",
        description="Prompt del shell interactivo.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Nivel de logging (stderr).",
    )


def load_settings() -> AppSettings:
    """`AppSettings` leyendo también el `.env` del proyecto y el del usuario."""

    return AppSettings(_env_file=(".env", get_user_env_file()))
