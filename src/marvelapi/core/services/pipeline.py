"""Composición build -> dispatch -> unwrap.

Una instancia se comparte entre todos los grupos de endpoints. Solo guarda
referencias inmutables (dispatcher + credenciales), así que es segura para
llamadas concurrentes desde varias tareas sin locks.
"""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from marvelapi.core.config import Credentials
from marvelapi.core.domain.entities import Entity
from marvelapi.core.domain.enums import OrderBy
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import QueryParams
from marvelapi.core.interfaces.dispatcher import RequestDispatcher
from marvelapi.core.services.request_builder import build_request
from marvelapi.core.services.response_unwrapper import find_by_id, unwrap, unwrap_page

E = TypeVar("E", bound=Entity)


class RequestPipeline:
    def __init__(
        self,
        dispatcher: RequestDispatcher,
        credentials: Credentials,
        *,
        timeout: float | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._credentials = credentials
        self._timeout = timeout

    async def fetch(
        self,
        path: str,
        entity_type: type[E],
        params: QueryParams | None = None,
        *,
        allowed_order: Iterable[OrderBy] | None = None,
        timeout: float | None = None,
    ) -> Sequence[E]:
        descriptor = build_request(path, params, allowed_order=allowed_order)
        raw = await self._dispatcher.send(
            descriptor, self._credentials, timeout=self._deadline(timeout)
        )
        return unwrap(raw, entity_type)

    async def fetch_page(
        self,
        path: str,
        entity_type: type[E],
        params: QueryParams | None = None,
        *,
        allowed_order: Iterable[OrderBy] | None = None,
        timeout: float | None = None,
    ) -> Page[E]:
        descriptor = build_request(path, params, allowed_order=allowed_order)
        raw = await self._dispatcher.send(
            descriptor, self._credentials, timeout=self._deadline(timeout)
        )
        return unwrap_page(raw, entity_type)

    async def fetch_one(
        self,
        path: str,
        entity_type: type[E],
        entity_id: int,
        *,
        timeout: float | None = None,
    ) -> E | None:
        results = await self.fetch(path, entity_type, timeout=timeout)
        return find_by_id(results, entity_id)

    def _deadline(self, timeout: float | None) -> float | None:
        return timeout if timeout is not None else self._timeout
