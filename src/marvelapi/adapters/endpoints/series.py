"""Endpoints: /series."""

from __future__ import annotations

from typing import Sequence

from marvelapi.adapters.endpoints.paths import entity_path, related_entity_type
from marvelapi.core.domain.entities import Character, Comic, Creator, Entity, Event, Series, Story
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import (
    CharacterQuery,
    ComicQuery,
    CreatorQuery,
    EventQuery,
    QueryParams,
    SeriesQuery,
    StoryQuery,
)
from marvelapi.core.services.pipeline import RequestPipeline


class SeriesEndpoints:
    resource = "series"
    relations = ("characters", "comics", "creators", "events", "stories")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_series(self, params: SeriesQuery | None = None) -> Sequence[Series]:
        return await self._pipeline.fetch("/series", Series, params)

    async def get_series_page(self, params: SeriesQuery | None = None) -> Page[Series]:
        return await self._pipeline.fetch_page("/series", Series, params)

    async def get_series_by_id(self, series_id: int) -> Series | None:
        path = entity_path("series", series_id)
        return await self._pipeline.fetch_one(path, Series, series_id)

    async def get_characters_for_series(
        self, series_id: int, params: CharacterQuery | None = None
    ) -> Sequence[Character]:
        path = entity_path("series", series_id, "characters")
        return await self._pipeline.fetch(path, Character, params)

    async def get_comics_for_series(
        self, series_id: int, params: ComicQuery | None = None
    ) -> Sequence[Comic]:
        path = entity_path("series", series_id, "comics")
        return await self._pipeline.fetch(path, Comic, params)

    async def get_creators_for_series(
        self, series_id: int, params: CreatorQuery | None = None
    ) -> Sequence[Creator]:
        path = entity_path("series", series_id, "creators")
        return await self._pipeline.fetch(path, Creator, params)

    async def get_events_for_series(
        self, series_id: int, params: EventQuery | None = None
    ) -> Sequence[Event]:
        path = entity_path("series", series_id, "events")
        return await self._pipeline.fetch(path, Event, params)

    async def get_stories_for_series(
        self, series_id: int, params: StoryQuery | None = None
    ) -> Sequence[Story]:
        path = entity_path("series", series_id, "stories")
        return await self._pipeline.fetch(path, Story, params)

    async def get_related_page(
        self, series_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, series_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
