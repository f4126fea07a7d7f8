"""Objetos de valor del pipeline request/response.

Ambos viven solo durante una llamada: nunca se cachean ni se persisten.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RequestDescriptor:
    """Path del recurso + query params ya serializados (orden estable)."""

    path: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawResponse:
    """Respuesta HTTP sin interpretar (status + cuerpo en texto)."""

    status_code: int
    body: str
    url: str | None = None

    @property
    def is_http_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.body)
