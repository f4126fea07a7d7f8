"""Grupos de endpoints (uno por recurso raíz).

Por qué un paquete:
- Agrupa módulos por recurso (characters, comics, ...).
- Cada grupo recibe el mismo `RequestPipeline` por composición.
"""

from marvelapi.adapters.endpoints.characters import CharacterEndpoints
from marvelapi.adapters.endpoints.comics import ComicEndpoints
from marvelapi.adapters.endpoints.creators import CreatorEndpoints
from marvelapi.adapters.endpoints.events import EventEndpoints
from marvelapi.adapters.endpoints.series import SeriesEndpoints
from marvelapi.adapters.endpoints.stories import StoryEndpoints

__all__ = [
	"CharacterEndpoints",
	"ComicEndpoints",
	"CreatorEndpoints",
	"EventEndpoints",
	"SeriesEndpoints",
	"StoryEndpoints",
]
