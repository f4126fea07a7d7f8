"""Paths de recursos y catálogo de relaciones."""

from __future__ import annotations

from marvelapi.core.domain.entities import (
    Character,
    Comic,
    Creator,
    Entity,
    Event,
    Series,
    Story,
)
from marvelapi.core.errors import MalformedParametersError

ENTITY_TYPES: dict[str, type[Entity]] = {
    "characters": Character,
    "comics": Comic,
    "creators": Creator,
    "events": Event,
    "series": Series,
    "stories": Story,
}


def entity_path(resource: str, entity_id: int, relation: str | None = None) -> str:
    """`/{resource}/{id}[/{relation}]`, validando el id antes de cualquier I/O."""

    if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
        raise MalformedParametersError(
            f"{resource} id must be a positive integer, got {entity_id!r}", field="id"
        )
    path = f"/{resource}/{entity_id}"
    if relation:
        path = f"{path}/{relation}"
    return path


def related_entity_type(resource: str, relation: str, allowed: tuple[str, ...]) -> type[Entity]:
    if relation not in allowed:
        raise MalformedParametersError(
            f"'{relation}' is not a sub-resource of {resource} (expected one of {', '.join(allowed)})",
            field="relation",
        )
    return ENTITY_TYPES[relation]
