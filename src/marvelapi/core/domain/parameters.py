"""Modelos de parámetros por familia de endpoint.

Por qué dataclasses (y no Pydantic):
- Son contenedores planos que el llamador rellena por llamada; la validación
  vive en un único sitio (`core.services.request_builder`) y ocurre antes
  de cualquier I/O.
- La metadata de cada campo (`wire`, `enum`, `role`) es el mapeo campo→nombre
  de wire que consume el builder genérico: no hay un método por endpoint.

Reglas:
- `None`, "" o solo espacios = no enviado.
- Listas vacías = no enviado.
- `limit`/`offset` <= 0 = no enviado (no es error).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar

from marvelapi.core.domain.enums import (
    ComicFormat,
    ComicFormatType,
    DateDescriptor,
    OrderBy,
    SeriesType,
)

ROLE_ORDER = "order"
ROLE_PAGINATION = "pagination"
ROLE_RANGE_BEGIN = "range_begin"
ROLE_RANGE_END = "range_end"


def wire(name: str, *, enum: type | None = None, role: str | None = None) -> Any:
    """Campo escalar opcional con su nombre de wire."""

    return field(default=None, metadata={"wire": name, "enum": enum, "role": role})


def wire_list(name: str, *, enum: type | None = None, role: str | None = None) -> Any:
    """Campo lista (ids o enums) que se serializa como un único valor separado por comas."""

    return field(default_factory=list, metadata={"wire": name, "enum": enum, "role": role})


@dataclass
class QueryParams:
    """Base común: filtro de modificación, orden y paginación."""

    allowed_order: ClassVar[tuple[OrderBy, ...]] = ()

    modified_since: date | None = wire("modifiedSince")
    order: list[OrderBy | str] = wire_list("orderBy", role=ROLE_ORDER)
    limit: int | None = wire("limit", role=ROLE_PAGINATION)
    offset: int | None = wire("offset", role=ROLE_PAGINATION)


@dataclass
class CharacterQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.NAME,
        OrderBy.NAME_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
    )

    name: str | None = wire("name")
    name_starts_with: str | None = wire("nameStartsWith")
    comics: list[int] = wire_list("comics")
    series: list[int] = wire_list("series")
    events: list[int] = wire_list("events")
    stories: list[int] = wire_list("stories")


@dataclass
class ComicQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.FOC_DATE,
        OrderBy.FOC_DATE_DESC,
        OrderBy.ON_SALE_DATE,
        OrderBy.ON_SALE_DATE_DESC,
        OrderBy.TITLE,
        OrderBy.TITLE_DESC,
        OrderBy.ISSUE_NUMBER,
        OrderBy.ISSUE_NUMBER_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
    )

    format: ComicFormat | str | None = wire("format", enum=ComicFormat)
    format_type: ComicFormatType | str | None = wire("formatType", enum=ComicFormatType)
    no_variants: bool | None = wire("noVariants")
    date_descriptor: DateDescriptor | str | None = wire("dateDescriptor", enum=DateDescriptor)
    date_range_begin: date | None = wire("dateRange", role=ROLE_RANGE_BEGIN)
    date_range_end: date | None = wire("dateRange", role=ROLE_RANGE_END)
    title: str | None = wire("title")
    title_starts_with: str | None = wire("titleStartsWith")
    start_year: int | None = wire("startYear")
    issue_number: int | None = wire("issueNumber")
    diamond_code: str | None = wire("diamondCode")
    digital_id: int | None = wire("digitalId")
    upc: str | None = wire("upc")
    isbn: str | None = wire("isbn")
    ean: str | None = wire("ean")
    issn: str | None = wire("issn")
    has_digital_issue: bool | None = wire("hasDigitalIssue")
    creators: list[int] = wire_list("creators")
    characters: list[int] = wire_list("characters")
    series: list[int] = wire_list("series")
    events: list[int] = wire_list("events")
    stories: list[int] = wire_list("stories")
    shared_appearances: list[int] = wire_list("sharedAppearances")
    collaborators: list[int] = wire_list("collaborators")


@dataclass
class CreatorQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.LAST_NAME,
        OrderBy.LAST_NAME_DESC,
        OrderBy.FIRST_NAME,
        OrderBy.FIRST_NAME_DESC,
        OrderBy.MIDDLE_NAME,
        OrderBy.MIDDLE_NAME_DESC,
        OrderBy.SUFFIX,
        OrderBy.SUFFIX_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
    )

    first_name: str | None = wire("firstName")
    middle_name: str | None = wire("middleName")
    last_name: str | None = wire("lastName")
    suffix: str | None = wire("suffix")
    name_starts_with: str | None = wire("nameStartsWith")
    first_name_starts_with: str | None = wire("firstNameStartsWith")
    middle_name_starts_with: str | None = wire("middleNameStartsWith")
    last_name_starts_with: str | None = wire("lastNameStartsWith")
    comics: list[int] = wire_list("comics")
    series: list[int] = wire_list("series")
    events: list[int] = wire_list("events")
    stories: list[int] = wire_list("stories")


@dataclass
class EventQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.NAME,
        OrderBy.NAME_DESC,
        OrderBy.START_DATE,
        OrderBy.START_DATE_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
    )

    name: str | None = wire("name")
    name_starts_with: str | None = wire("nameStartsWith")
    creators: list[int] = wire_list("creators")
    characters: list[int] = wire_list("characters")
    series: list[int] = wire_list("series")
    comics: list[int] = wire_list("comics")
    stories: list[int] = wire_list("stories")


@dataclass
class SeriesQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.TITLE,
        OrderBy.TITLE_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
        OrderBy.START_YEAR,
        OrderBy.START_YEAR_DESC,
    )

    title: str | None = wire("title")
    title_starts_with: str | None = wire("titleStartsWith")
    start_year: int | None = wire("startYear")
    comics: list[int] = wire_list("comics")
    stories: list[int] = wire_list("stories")
    events: list[int] = wire_list("events")
    creators: list[int] = wire_list("creators")
    characters: list[int] = wire_list("characters")
    series_type: SeriesType | str | None = wire("seriesType", enum=SeriesType)
    contains: list[ComicFormat | str] = wire_list("contains", enum=ComicFormat)


@dataclass
class StoryQuery(QueryParams):
    allowed_order: ClassVar[tuple[OrderBy, ...]] = (
        OrderBy.ID,
        OrderBy.ID_DESC,
        OrderBy.MODIFIED,
        OrderBy.MODIFIED_DESC,
    )

    comics: list[int] = wire_list("comics")
    series: list[int] = wire_list("series")
    events: list[int] = wire_list("events")
    creators: list[int] = wire_list("creators")
    characters: list[int] = wire_list("characters")
