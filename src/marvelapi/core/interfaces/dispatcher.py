"""Contrato del dispatcher HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el transporte (httpx, un stub en tests) sin tocar el pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from marvelapi.core.config import Credentials
from marvelapi.core.domain.wire import RawResponse, RequestDescriptor


@runtime_checkable
class RequestDispatcher(Protocol):
    """Contrato mínimo para enviar un `RequestDescriptor`.

    Reglas de diseño:
    - `send` es asíncrono: suspende la tarea solo durante el round trip.
    - Exactamente una petición HTTP por llamada; sin reintentos.
    - Adjunta la autenticación en cada llamada (el hash depende del timestamp).
    """

    async def send(
        self,
        descriptor: RequestDescriptor,
        credentials: Credentials,
        *,
        timeout: float | None = None,
    ) -> RawResponse:
        ...
