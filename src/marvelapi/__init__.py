"""marvelapi: cliente async y tipado para la API pública de Marvel Comics."""

import logging

from marvelapi.client import MarvelClient
from marvelapi.core.config import Credentials, MarvelSettings
from marvelapi.core.domain.entities import Character, Comic, Creator, Event, Series, Story
from marvelapi.core.domain.enums import (
    ComicFormat,
    ComicFormatType,
    DateDescriptor,
    OrderBy,
    SeriesType,
)
from marvelapi.core.domain.envelope import Page
from marvelapi.core.domain.parameters import (
    CharacterQuery,
    ComicQuery,
    CreatorQuery,
    EventQuery,
    SeriesQuery,
    StoryQuery,
)
from marvelapi.core.errors import (
    ApiError,
    CancelledOrTimedOutError,
    ConfigurationError,
    HttpError,
    InvalidEnumValueError,
    MalformedParametersError,
    MalformedResponseError,
    MarvelAPIError,
    TransportFailureError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiError",
    "CancelledOrTimedOutError",
    "Character",
    "CharacterQuery",
    "Comic",
    "ComicFormat",
    "ComicFormatType",
    "ComicQuery",
    "ConfigurationError",
    "Creator",
    "CreatorQuery",
    "Credentials",
    "DateDescriptor",
    "Event",
    "EventQuery",
    "HttpError",
    "InvalidEnumValueError",
    "MalformedParametersError",
    "MalformedResponseError",
    "MarvelAPIError",
    "MarvelClient",
    "MarvelSettings",
    "OrderBy",
    "Page",
    "Series",
    "SeriesQuery",
    "SeriesType",
    "Story",
    "StoryQuery",
    "TransportFailureError",
]
