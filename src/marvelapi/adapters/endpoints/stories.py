"""Endpoints: /stories.

- Listado de historias con filtros.
- Historia por id (URI canónica del recurso).
- Personajes, cómics, creadores, eventos y series de una historia.
"""

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


class StoryEndpoints:
    resource = "stories"
    relations = ("characters", "comics", "creators", "events", "series")

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline

    async def get_stories(self, params: StoryQuery | None = None) -> Sequence[Story]:
        return await self._pipeline.fetch("/stories", Story, params)

    async def get_stories_page(self, params: StoryQuery | None = None) -> Page[Story]:
        return await self._pipeline.fetch_page("/stories", Story, params)

    async def get_story(self, story_id: int) -> Story | None:
        return await self._pipeline.fetch_one(entity_path("stories", story_id), Story, story_id)

    async def get_characters_for_story(
        self, story_id: int, params: CharacterQuery | None = None
    ) -> Sequence[Character]:
        path = entity_path("stories", story_id, "characters")
        return await self._pipeline.fetch(path, Character, params)

    async def get_comics_for_story(
        self, story_id: int, params: ComicQuery | None = None
    ) -> Sequence[Comic]:
        path = entity_path("stories", story_id, "comics")
        return await self._pipeline.fetch(path, Comic, params)

    async def get_creators_for_story(
        self, story_id: int, params: CreatorQuery | None = None
    ) -> Sequence[Creator]:
        path = entity_path("stories", story_id, "creators")
        return await self._pipeline.fetch(path, Creator, params)

    async def get_events_for_story(
        self, story_id: int, params: EventQuery | None = None
    ) -> Sequence[Event]:
        path = entity_path("stories", story_id, "events")
        return await self._pipeline.fetch(path, Event, params)

    async def get_series_for_story(
        self, story_id: int, params: SeriesQuery | None = None
    ) -> Sequence[Series]:
        path = entity_path("stories", story_id, "series")
        return await self._pipeline.fetch(path, Series, params)

    async def get_related_page(
        self, story_id: int, relation: str, params: QueryParams | None = None
    ) -> Page[Entity]:
        entity_type = related_entity_type(self.resource, relation, self.relations)
        path = entity_path(self.resource, story_id, relation)
        return await self._pipeline.fetch_page(path, entity_type, params)
