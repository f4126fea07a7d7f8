"""Endpoints: /comics.

Los cómics solo exponen personajes, creadores, eventos e historias como
sub-recursos (no hay `/comics/{id}/series`: la serie va embebida en el cómic).
"""

from __future__ import annotations

from typing import Sequence

from marvelapi.adapters.endpoints.paths import entity_path, related_entity_type
from marvelapi.core.domain.entities import Character, Comic, Creator, Entity, Event, Story
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import (
    CharacterQuery,
    ComicQuery,
    CreatorQuery,
    EventQuery,
    QueryParams,
    StoryQuery,
)
from marvelapi.core.services.pipeline import RequestPipeline


class ComicEndpoints:
    resource = "comics"
    relations = ("characters", "creators", "events", "stories")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_comics(self, params: ComicQuery | None = None) -> Sequence[Comic]:
        return await self._pipeline.fetch("/comics", Comic, params)

    async def get_comics_page(self, params: ComicQuery | None = None) -> Page[Comic]:
        return await self._pipeline.fetch_page("/comics", Comic, params)

    async def get_comic(self, comic_id: int) -> Comic | None:
        return await self._pipeline.fetch_one(entity_path("comics", comic_id), Comic, comic_id)

    async def get_characters_for_comic(
        self, comic_id: int, params: CharacterQuery | None = None
    ) -> Sequence[Character]:
        path = entity_path("comics", comic_id, "characters")
        return await self._pipeline.fetch(path, Character, params)

    async def get_creators_for_comic(
        self, comic_id: int, params: CreatorQuery | None = None
    ) -> Sequence[Creator]:
        path = entity_path("comics", comic_id, "creators")
        return await self._pipeline.fetch(path, Creator, params)

    async def get_events_for_comic(
        self, comic_id: int, params: EventQuery | None = None
    ) -> Sequence[Event]:
        path = entity_path("comics", comic_id, "events")
        return await self._pipeline.fetch(path, Event, params)

    async def get_stories_for_comic(
        self, comic_id: int, params: StoryQuery | None = None
    ) -> Sequence[Story]:
        path = entity_path("comics", comic_id, "stories")
        return await self._pipeline.fetch(path, Story, params)

    async def get_related_page(
        self, comic_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, comic_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
