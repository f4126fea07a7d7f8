"""Fachada del cliente.

Ensambla settings -> credenciales -> httpx -> dispatcher -> pipeline y expone
un grupo de endpoints por recurso raíz:

    async with MarvelClient() as marvel:
        series = await marvel.series.get_series(SeriesQuery(title_starts_with="Amazing"))
"""

from __future__ import annotations

import httpx

from marvelapi.adapters.dispatcher import HttpxDispatcher
from marvelapi.adapters.endpoints import (
    CharacterEndpoints,
    ComicEndpoints,
    CreatorEndpoints,
    EventEndpoints,
    SeriesEndpoints,
    StoryEndpoints,
)
from marvelapi.adapters.http_client import build_async_client
from marvelapi.core.config import Credentials, MarvelSettings
from marvelapi.core.errors import ConfigurationError
from marvelapi.core.services.pipeline import RequestPipeline


class MarvelClient:
    """Cliente async para la API pública de Marvel.

    Reglas:
    - Sin estado mutable compartido: se puede usar desde varias tareas a la vez.
    - Solo cierra el `httpx.AsyncClient` que crea él mismo.
    - `timeout` es el deadline por defecto de cada llamada (además del timeout
      de httpx); cada endpoint no añade reintentos.
    """

    def __init__(
        self,
        settings: MarvelSettings | None = None,
        *,
        credentials: Credentials | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self._settings = settings or MarvelSettings()
        self._credentials = credentials or self._settings.credentials()
        if self._settings.require_hash and not self._credentials.private_key:
            raise ConfigurationError("A private key is required when require_hash is enabled")

        self._owns_http_client = http_client is None
        self._http = http_client or build_async_client(self._settings, transport=transport)

        dispatcher = HttpxDispatcher(self._http, require_hash=self._settings.require_hash)
        pipeline = RequestPipeline(dispatcher, self._credentials, timeout=timeout)

        self.characters = CharacterEndpoints(pipeline)
        self.comics = ComicEndpoints(pipeline)
        self.creators = CreatorEndpoints(pipeline)
        self.events = EventEndpoints(pipeline)
        self.series = SeriesEndpoints(pipeline)
        self.stories = StoryEndpoints(pipeline)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "MarvelClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
