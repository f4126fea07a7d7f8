"""Entidades del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El JSON de la API usa camelCase; los alias nos dan atributos snake_case sin
  código de mapeo a mano.
- `frozen=True` + tuplas: las entidades son registros de valor inmutables que
  se pueden compartir entre tareas sin copiar.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- `extra="ignore"`: campos nuevos de la API no rompen el parseo.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class MarvelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Image(MarvelModel):
    path: str = Field(..., description="URL base del recurso, sin extensión.")
    extension: str = Field(..., description="Extensión del fichero (jpg, png...).")

    @property
    def url(self) -> str:
        return f"{self.path}.{self.extension}"

    def variant_url(self, variant: str) -> str:
        """URL con una variante de tamaño (p.ej. `portrait_xlarge`)."""

        return f"{self.path}/{variant}.{self.extension}"


class Url(MarvelModel):
    type: str
    url: str


class TextObject(MarvelModel):
    type: str | None = None
    language: str | None = None
    text: str | None = None


class ComicDate(MarvelModel):
    type: str
    date: str | None = None


class ComicPrice(MarvelModel):
    type: str
    price: float = 0.0


class Summary(MarvelModel):
    """Referencia ligera a otra entidad (p.ej. un item de `ResourceList`)."""

    resource_uri: str | None = Field(default=None, alias="resourceURI")
    name: str | None = None
    type: str | None = None
    role: str | None = None

    @property
    def id(self) -> int | None:
        """Id extraído del final de `resourceURI`, si lo hay."""

        if not self.resource_uri:
            return None
        tail = self.resource_uri.rstrip("/").rsplit("/", 1)[-1]
        return int(tail) if tail.isdigit() else None


class ResourceList(MarvelModel):
    available: int = 0
    returned: int = 0
    collection_uri: str | None = Field(default=None, alias="collectionURI")
    items: tuple[Summary, ...] = ()


class Entity(MarvelModel):
    """Campos comunes a todos los recursos raíz."""

    id: int = Field(..., description="Identificador único del recurso.")
    modified: str | None = Field(
        default=None,
        description="Fecha de última modificación tal cual la envía la API.",
    )
    resource_uri: str | None = Field(default=None, alias="resourceURI")
    thumbnail: Image | None = None


class Character(Entity):
    name: str | None = None
    description: str | None = None
    urls: tuple[Url, ...] = ()
    comics: ResourceList | None = None
    stories: ResourceList | None = None
    events: ResourceList | None = None
    series: ResourceList | None = None


class Comic(Entity):
    digital_id: int | None = None
    title: str | None = None
    issue_number: float | None = None
    variant_description: str | None = None
    description: str | None = None
    isbn: str | None = None
    upc: str | None = None
    diamond_code: str | None = None
    ean: str | None = None
    issn: str | None = None
    format: str | None = None
    page_count: int | None = None
    text_objects: tuple[TextObject, ...] = ()
    urls: tuple[Url, ...] = ()
    series: Summary | None = None
    variants: tuple[Summary, ...] = ()
    collections: tuple[Summary, ...] = ()
    collected_issues: tuple[Summary, ...] = ()
    dates: tuple[ComicDate, ...] = ()
    prices: tuple[ComicPrice, ...] = ()
    images: tuple[Image, ...] = ()
    creators: ResourceList | None = None
    characters: ResourceList | None = None
    stories: ResourceList | None = None
    events: ResourceList | None = None


class Creator(Entity):
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    suffix: str | None = None
    full_name: str | None = None
    urls: tuple[Url, ...] = ()
    series: ResourceList | None = None
    stories: ResourceList | None = None
    comics: ResourceList | None = None
    events: ResourceList | None = None


class Event(Entity):
    title: str | None = None
    description: str | None = None
    urls: tuple[Url, ...] = ()
    start: str | None = None
    end: str | None = None
    comics: ResourceList | None = None
    stories: ResourceList | None = None
    series: ResourceList | None = None
    characters: ResourceList | None = None
    creators: ResourceList | None = None
    next: Summary | None = None
    previous: Summary | None = None


class Series(Entity):
    title: str | None = None
    description: str | None = None
    urls: tuple[Url, ...] = ()
    start_year: int | None = None
    end_year: int | None = None
    rating: str | None = None
    type: str | None = None
    comics: ResourceList | None = None
    stories: ResourceList | None = None
    events: ResourceList | None = None
    characters: ResourceList | None = None
    creators: ResourceList | None = None
    next: Summary | None = None
    previous: Summary | None = None


class Story(Entity):
    title: str | None = None
    description: str | None = None
    type: str | None = None
    comics: ResourceList | None = None
    series: ResourceList | None = None
    events: ResourceList | None = None
    characters: ResourceList | None = None
    creators: ResourceList | None = None
    # La API lo envía en minúsculas (no camelCase).
    original_issue: Summary | None = Field(default=None, alias="originalissue")
