"""Envelope de respuesta de la API (dos niveles).

Forma en el wire:

    {
      "code": 200, "status": "Ok",
      "copyright": "...", "attributionText": "...", "etag": "...",
      "data": {"offset": 0, "limit": 20, "total": 1, "count": 1, "results": [...]}
    }

En error, la API devuelve solo `code` + `message` (o `status`) y no hay `data`.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")

SUCCESS_CODE = "200"
SUCCESS_STATUS = "ok"


class DataContainer(BaseModel, Generic[T]):
    """Capa interna: ventana de resultados + metadatos de paginación."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    offset: int = 0
    limit: int = 0
    total: int = 0
    count: int = 0
    results: tuple[T, ...] = ()


class DataWrapper(BaseModel, Generic[T]):
    """Capa externa: estado de la API + atribución + `data`."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    code: int | str | None = None
    status: str | None = None
    message: str | None = None
    copyright: str | None = None
    attribution_text: str | None = None
    attribution_html: str | None = Field(default=None, alias="attributionHTML")
    etag: str | None = None
    data: DataContainer[T] | None = None

    @property
    def is_success(self) -> bool:
        """Éxito = hay al menos un indicador y ninguno contradice el 200/"Ok"."""

        if self.code is None and self.status is None:
            return False
        if self.code is not None and str(self.code).strip() != SUCCESS_CODE:
            return False
        if self.status is not None and self.status.strip().lower() != SUCCESS_STATUS:
            return False
        return True

    @property
    def error_code(self) -> str:
        if self.code is not None:
            return str(self.code)
        return self.status or "unknown"

    @property
    def error_message(self) -> str:
        return self.message or self.status or "no message"


class Page(BaseModel, Generic[T]):
    """Página de resultados para llamadores que gestionan la paginación.

    No hay auto-continuación: `next_offset` solo sugiere el siguiente `offset`.
    """

    model_config = ConfigDict(frozen=True)

    offset: int
    limit: int
    total: int
    count: int
    results: tuple[T, ...]
    attribution_text: str | None = None
    copyright: str | None = None
    etag: str | None = None

    @property
    def has_more(self) -> bool:
        return self.offset + self.count < self.total

    @property
    def next_offset(self) -> int | None:
        return self.offset + self.count if self.has_more else None


def describe_shape(payload: Any) -> str:
    """Descripción corta de un payload inesperado (para mensajes de error)."""

    if isinstance(payload, dict):
        keys = ", ".join(sorted(str(k) for k in payload)[:8])
        return f"object with keys [{keys}]"
    return type(payload).__name__
