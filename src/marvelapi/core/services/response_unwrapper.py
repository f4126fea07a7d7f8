"""Validación y desenvoltura del envelope de respuesta.

Orden de comprobación:
1. Status HTTP fuera de 2xx -> `HttpError` (status + cuerpo crudo).
2. Cuerpo que no es JSON / no es objeto -> `MalformedResponseError`.
3. Envelope con código/estado de error -> `ApiError`.
4. Envelope de éxito sin `data` -> `MalformedResponseError`.

Nunca se devuelve una lista vacía como "éxito" si algo de lo anterior falla.
"""

from __future__ import annotations

import json
import logging
from typing import Sequence, TypeVar

from pydantic import ValidationError

from marvelapi.core.domain.entities import Entity
from marvelapi.core.domain.envelope import DataContainer, DataWrapper, Page, describe_shape
from marvelapi.core.domain.wire import RawResponse
from marvelapi.core.errors import ApiError, HttpError, MalformedResponseError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


def _parse_envelope(
    raw: RawResponse, entity_type: type[E]
) -> tuple[DataWrapper[E], DataContainer[E]]:
    if not raw.is_http_success:
        logger.warning("Marvel API answered HTTP %s for %s", raw.status_code, raw.url)
        raise HttpError(raw.status_code, raw.body)

    try:
        payload = raw.json()
    except json.JSONDecodeError as exc:
        raise MalformedResponseError("body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"expected a JSON object, got {describe_shape(payload)}")

    # Primero el estado: un envelope de error no trae `data` y no debe fallar
    # por validación de resultados.
    try:
        head = DataWrapper[Entity].model_validate(
            {k: v for k, v in payload.items() if k != "data"}
        )
    except ValidationError as exc:
        raise MalformedResponseError("envelope status fields have unexpected types") from exc
    if not head.is_success:
        logger.warning("Marvel API error %s: %s", head.error_code, head.error_message)
        raise ApiError(head.error_code, head.error_message)

    try:
        envelope = DataWrapper[entity_type].model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"results do not match {entity_type.__name__}: {exc.error_count()} error(s)"
        ) from exc
    if envelope.data is None:
        raise MalformedResponseError("success envelope without 'data'")
    return envelope, envelope.data


def unwrap(raw: RawResponse, entity_type: type[E]) -> Sequence[E]:
    """Devuelve `data.results` tal cual (orden del servidor, sin dedupe ni filtros)."""

    _, data = _parse_envelope(raw, entity_type)
    return data.results


def unwrap_page(raw: RawResponse, entity_type: type[E]) -> Page[E]:
    envelope, data = _parse_envelope(raw, entity_type)
    return Page[entity_type](
        offset=data.offset,
        limit=data.limit,
        total=data.total,
        count=data.count,
        results=data.results,
        attribution_text=envelope.attribution_text,
        copyright=envelope.copyright,
        etag=envelope.etag,
    )


def find_by_id(results: Sequence[E], entity_id: int) -> E | None:
    """Lookup por id: None si no está (NotFound = ausencia, no error)."""

    return next((item for item in results if item.id == entity_id), None)
