"""Enumeraciones de la API y su token de wire.

El `value` de cada miembro ES el token exacto que espera la API, de modo que la
tabla de traducción es la propia enumeración (lookup fijo, sin dispatch dinámico).
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, TypeVar

from marvelapi.core.errors import InvalidEnumValueError


class OrderBy(str, Enum):
    """Claves de orden + dirección (el prefijo `-` indica descendente)."""

    ID = "id"
    ID_DESC = "-id"
    NAME = "name"
    NAME_DESC = "-name"
    TITLE = "title"
    TITLE_DESC = "-title"
    MODIFIED = "modified"
    MODIFIED_DESC = "-modified"
    START_DATE = "startDate"
    START_DATE_DESC = "-startDate"
    START_YEAR = "startYear"
    START_YEAR_DESC = "-startYear"
    FOC_DATE = "focDate"
    FOC_DATE_DESC = "-focDate"
    ON_SALE_DATE = "onsaleDate"
    ON_SALE_DATE_DESC = "-onsaleDate"
    ISSUE_NUMBER = "issueNumber"
    ISSUE_NUMBER_DESC = "-issueNumber"
    FIRST_NAME = "firstName"
    FIRST_NAME_DESC = "-firstName"
    MIDDLE_NAME = "middleName"
    MIDDLE_NAME_DESC = "-middleName"
    LAST_NAME = "lastName"
    LAST_NAME_DESC = "-lastName"
    SUFFIX = "suffix"
    SUFFIX_DESC = "-suffix"


class ComicFormat(str, Enum):
    COMIC = "comic"
    MAGAZINE = "magazine"
    TRADE_PAPERBACK = "trade paperback"
    HARDCOVER = "hardcover"
    DIGEST = "digest"
    GRAPHIC_NOVEL = "graphic novel"
    DIGITAL_COMIC = "digital comic"
    INFINITE_COMIC = "infinite comic"


class ComicFormatType(str, Enum):
    COMIC = "comic"
    COLLECTION = "collection"


class DateDescriptor(str, Enum):
    LAST_WEEK = "lastWeek"
    THIS_WEEK = "thisWeek"
    NEXT_WEEK = "nextWeek"
    THIS_MONTH = "thisMonth"


class SeriesType(str, Enum):
    COLLECTION = "collection"
    ONE_SHOT = "one shot"
    LIMITED = "limited"
    ONGOING = "ongoing"


E = TypeVar("E", bound=Enum)


def wire_token(enum_cls: type[E], value: object) -> str:
    """Traduce `value` (miembro o token crudo) a su token de wire.

    Acepta miembros de `enum_cls` y strings que coincidan con un token; cualquier
    otra cosa falla con `InvalidEnumValueError`.
    """

    if isinstance(value, enum_cls):
        return str(value.value)
    try:
        return str(enum_cls(value).value)
    except ValueError as exc:
        raise InvalidEnumValueError(enum_cls.__name__, value) from exc


def filter_order_by(
    requested: Iterable[OrderBy | str],
    allowed: Iterable[OrderBy],
) -> list[OrderBy]:
    """Intersección de `requested` con la whitelist del endpoint.

    Conserva el orden relativo de `requested`. Lo que no está en la whitelist
    (o no es un `OrderBy` válido) se descarta en silencio.
    """

    whitelist = frozenset(allowed)
    out: list[OrderBy] = []
    for item in requested:
        try:
            token = OrderBy(item)
        except ValueError:
            continue
        if token in whitelist:
            out.append(token)
    return out
