"""Dispatcher HTTP sobre httpx.

Responsabilidad:
- Adjuntar autenticación (recalculada por llamada).
- Hacer exactamente un GET por llamada, sin reintentos.
- Traducir timeouts y fallos de red a la jerarquía de errores propia.

La cancelación de la tarea (`asyncio.CancelledError`) se deja propagar tal
cual: convertirla rompería la semántica de cancelación de asyncio.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

import httpx

from marvelapi.adapters.auth import auth_params, new_timestamp
from marvelapi.core.config import Credentials
from marvelapi.core.domain.wire import RawResponse, RequestDescriptor
from marvelapi.core.errors import CancelledOrTimedOutError, TransportFailureError

logger = logging.getLogger(__name__)


class HttpxDispatcher:
    """Implementa `core.interfaces.dispatcher.RequestDispatcher` con httpx."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        require_hash: bool = True,
        clock: Callable[[], str] = new_timestamp,
    ) -> None:
        self._client = client
        self._require_hash = require_hash
        self._clock = clock

    async def send(
        self,
        descriptor: RequestDescriptor,
        credentials: Credentials,
        *,
        timeout: float | None = None,
    ) -> RawResponse:
        params = dict(descriptor.params)
        params.update(
            auth_params(credentials, require_hash=self._require_hash, ts=self._clock())
        )

        logger.debug("GET %s (params: %s)", descriptor.path, ", ".join(descriptor.params))
        request = self._client.get(descriptor.path, params=params)
        try:
            if timeout is None:
                response = await request
            else:
                response = await asyncio.wait_for(request, timeout=timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise CancelledOrTimedOutError(
                f"GET {descriptor.path} timed out", timeout=timeout
            ) from exc
        except httpx.RequestError as exc:
            # Incluye TooManyRedirects y DecodingError, no solo TransportError.
            raise TransportFailureError(f"GET {descriptor.path} failed: {exc}") from exc

        return RawResponse(
            status_code=response.status_code,
            body=response.text,
            url=descriptor.path,
        )
