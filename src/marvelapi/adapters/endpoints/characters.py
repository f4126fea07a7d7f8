"""Endpoints: /characters."""

from __future__ import annotations

from typing import Sequence

from marvelapi.adapters.endpoints.paths import entity_path, related_entity_type
from marvelapi.core.domain.entities import Character, Comic, Entity, Event, Series, Story
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import (
    CharacterQuery,
    ComicQuery,
    EventQuery,
    QueryParams,
    SeriesQuery,
    StoryQuery,
)
from marvelapi.core.services.pipeline import RequestPipeline


class CharacterEndpoints:
    resource = "characters"
    relations = ("comics", "events", "series", "stories")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_characters(self, params: CharacterQuery | None = None) -> Sequence[Character]:
        return await self._pipeline.fetch("/characters", Character, params)

    async def get_characters_page(self, params: CharacterQuery | None = None) -> Page[Character]:
        return await self._pipeline.fetch_page("/characters", Character, params)

    async def get_character(self, character_id: int) -> Character | None:
        path = entity_path("characters", character_id)
        return await self._pipeline.fetch_one(path, Character, character_id)

    async def get_comics_for_character(
        self, character_id: int, params: ComicQuery | None = None
    ) -> Sequence[Comic]:
        path = entity_path("characters", character_id, "comics")
        return await self._pipeline.fetch(path, Comic, params)

    async def get_events_for_character(
        self, character_id: int, params: EventQuery | None = None
    ) -> Sequence[Event]:
        path = entity_path("characters", character_id, "events")
        return await self._pipeline.fetch(path, Event, params)

    async def get_series_for_character(
        self, character_id: int, params: SeriesQuery | None = None
    ) -> Sequence[Series]:
        path = entity_path("characters", character_id, "series")
        return await self._pipeline.fetch(path, Series, params)

    async def get_stories_for_character(
        self, character_id: int, params: StoryQuery | None = None
    ) -> Sequence[Story]:
        path = entity_path("characters", character_id, "stories")
        return await self._pipeline.fetch(path, Story, params)

    async def get_related_page(
        self, character_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, character_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
