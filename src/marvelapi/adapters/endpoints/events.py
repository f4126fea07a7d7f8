"""Endpoints: /events."""

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


class EventEndpoints:
    resource = "events"
    relations = ("characters", "comics", "creators", "series", "stories")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_events(self, params: EventQuery | None = None) -> Sequence[Event]:
        return await self._pipeline.fetch("/events", Event, params)

    async def get_events_page(self, params: EventQuery | None = None) -> Page[Event]:
        return await self._pipeline.fetch_page("/events", Event, params)

    async def get_event(self, event_id: int) -> Event | None:
        return await self._pipeline.fetch_one(entity_path("events", event_id), Event, event_id)

    async def get_characters_for_event(
        self, event_id: int, params: CharacterQuery | None = None
    ) -> Sequence[Character]:
        path = entity_path("events", event_id, "characters")
        return await self._pipeline.fetch(path, Character, params)

    async def get_comics_for_event(
        self, event_id: int, params: ComicQuery | None = None
    ) -> Sequence[Comic]:
        path = entity_path("events", event_id, "comics")
        return await self._pipeline.fetch(path, Comic, params)

    async def get_creators_for_event(
        self, event_id: int, params: CreatorQuery | None = None
    ) -> Sequence[Creator]:
        path = entity_path("events", event_id, "creators")
        return await self._pipeline.fetch(path, Creator, params)

    async def get_series_for_event(
        self, event_id: int, params: SeriesQuery | None = None
    ) -> Sequence[Series]:
        path = entity_path("events", event_id, "series")
        return await self._pipeline.fetch(path, Series, params)

    async def get_stories_for_event(
        self, event_id: int, params: StoryQuery | None = None
    ) -> Sequence[Story]:
        path = entity_path("events", event_id, "stories")
        return await self._pipeline.fetch(path, Story, params)

    async def get_related_page(
        self, event_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, event_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
