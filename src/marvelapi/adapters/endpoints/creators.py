"""Endpoints: /creators."""

from __future__ import annotations

from typing import Sequence

from marvelapi.adapters.endpoints.paths import entity_path, related_entity_type
from marvelapi.core.domain.entities import Comic, Creator, Entity, Event, Series, Story
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import (
    ComicQuery,
    CreatorQuery,
    EventQuery,
    QueryParams,
    SeriesQuery,
    StoryQuery,
)
from marvelapi.core.services.pipeline import RequestPipeline


class CreatorEndpoints:
    resource = "creators"
    relations = ("comics", "events", "series", "stories")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_creators(self, params: CreatorQuery | None = None) -> Sequence[Creator]:
        return await self._pipeline.fetch("/creators", Creator, params)

    async def get_creators_page(self, params: CreatorQuery | None = None) -> Page[Creator]:
        return await self._pipeline.fetch_page("/creators", Creator, params)

    async def get_creator(self, creator_id: int) -> Creator | None:
        path = entity_path("creators", creator_id)
        return await self._pipeline.fetch_one(path, Creator, creator_id)

    async def get_comics_for_creator(
        self, creator_id: int, params: ComicQuery | None = None
    ) -> Sequence[Comic]:
        path = entity_path("creators", creator_id, "comics")
        return await self._pipeline.fetch(path, Comic, params)

    async def get_events_for_creator(
        self, creator_id: int, params: EventQuery | None = None
    ) -> Sequence[Event]:
        path = entity_path("creators", creator_id, "events")
        return await self._pipeline.fetch(path, Event, params)

    async def get_series_for_creator(
        self, creator_id: int, params: SeriesQuery | None = None
    ) -> Sequence[Series]:
        path = entity_path("creators", creator_id, "series")
        return await self._pipeline.fetch(path, Series, params)

    async def get_stories_for_creator(
        self, creator_id: int, params: StoryQuery | None = None
    ) -> Sequence[Story]:
        path = entity_path("creators", creator_id, "stories")
        return await self._pipeline.fetch(path, Story, params)

    async def get_related_page(
        self, creator_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, creator_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
