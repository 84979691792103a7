"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/imágenes) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.mapping import MappingPolicy

IMAGES_URL = "https://trilbytvcdn.blob.core.windows.net/jobs/2023-03-swift-developer/images.json"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "trilby-gallery"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "trilby-gallery"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "trilby-gallery"
    return Path.home() / ".config" / "trilby-gallery"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRILBY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    images_url: str = Field(
        default=IMAGES_URL,
        min_length=8,
        description="URL del documento JSON con la lista de imágenes.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="trilby-gallery/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )

    debug: bool = Field(
        default=False,
        description="Modo desarrollo: un fallo de mapeo levanta una aserción ruidosa.",
    )
    mapping_policy: MappingPolicy = Field(
        default=MappingPolicy.DROP_INVALID,
        description="Qué hacer con items incompletos (drop-invalid / all-or-nothing).",
    )

    fade_in_seconds: float = Field(
        default=2.0,
        ge=0,
        le=30,
        description="Duración del fade-in de cada imagen en la vista (segundos).",
    )
    thumbnail_width: int = Field(
        default=32,
        ge=4,
        le=200,
        description="Ancho (en columnas de terminal) de las miniaturas.",
    )
