"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- Permite que dispatcher y builder de httpx lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from marvelapi.core.errors import ConfigurationError


DEFAULT_BASE_URL = "https://gateway.marvel.com/v1/public"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "marvelapi"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "marvelapi"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "marvelapi"
    return Path.home() / ".config" / "marvelapi"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class Credentials(BaseModel):
    """Par de claves del developer portal.

    Inmutable: es el único estado compartido entre llamadas concurrentes.
    """

    model_config = ConfigDict(frozen=True)

    public_key: str = Field(..., min_length=1)
    private_key: str | None = Field(
        default=None,
        description="Requerida solo si el modo de auth exige `ts` + `hash`.",
    )

    def __repr__(self) -> str:
        # La private key nunca debe acabar en logs/tracebacks.
        return f"Credentials(public_key={self.public_key!r}, private_key=***)"

    __str__ = __repr__


class MarvelSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para dispatcher/adaptadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARVEL_API_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    public_key: str | None = Field(
        default=None,
        description="Public API key (parámetro `apikey`).",
    )
    private_key: str | None = Field(
        default=None,
        description="Private API key; solo se usa para derivar `hash`.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL versionada de la API pública.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="marvelapi-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    use_gzip: bool = Field(
        default=False,
        description="Solicitar transporte comprimido (Accept-Encoding: gzip).",
    )
    require_hash: bool = Field(
        default=True,
        description="Adjuntar `ts` + `hash` (claves server-side). False para claves de navegador.",
    )

    def credentials(self) -> Credentials:
        """Construye `Credentials` validando que el modo de auth sea coherente."""

        if not self.public_key:
            raise ConfigurationError("MARVEL_API_PUBLIC_KEY is not set")
        if self.require_hash and not self.private_key:
            raise ConfigurationError(
                "MARVEL_API_PRIVATE_KEY is required when require_hash is enabled"
            )
        return Credentials(public_key=self.public_key, private_key=self.private_key)
