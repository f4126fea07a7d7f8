"""Construcción de requests a partir de un modelo de parámetros.

Un único builder genérico recorre los campos del dataclass y usa su metadata
(`wire`, `enum`, `role`) para serializar. Es una función pura: no hace I/O y
falla antes de cualquier llamada de red si los parámetros son inválidos.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable

from marvelapi.core.domain.enums import OrderBy, filter_order_by, wire_token
from marvelapi.core.domain.parameters import (
    ROLE_ORDER,
    ROLE_PAGINATION,
    ROLE_RANGE_BEGIN,
    ROLE_RANGE_END,
    QueryParams,
)
from marvelapi.core.domain.wire import RequestDescriptor
from marvelapi.core.errors import MalformedParametersError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def _format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def _format_scalar(name: str, value: Any, enum: type[Enum] | None) -> str | None:
    """Serializa un valor escalar; None = campo no enviado."""

    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if enum is not None:
        return wire_token(enum, value)
    # bool antes que int: bool es subclase de int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, date):
        return _format_date(value)
    if isinstance(value, int):
        return str(value)
    raise MalformedParametersError(
        f"Unsupported value {value!r} for parameter '{name}'", field=name
    )


def _format_list(name: str, values: Iterable[Any], enum: type[Enum] | None) -> str | None:
    items = list(values or ())
    if not items:
        return None
    if enum is not None:
        return ",".join(wire_token(enum, item) for item in items)
    out: list[str] = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise MalformedParametersError(
                f"Parameter '{name}' expects integer ids, got {item!r}", field=name
            )
        out.append(str(item))
    return ",".join(out)


def _as_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _format_date_range(begin: date | None, end: date | None) -> str | None:
    if begin is None and end is None:
        return None
    if begin is None or end is None:
        raise MalformedParametersError(
            "Date range requires both a begin and an end date", field="dateRange"
        )
    # Granularidad de día, igual que el formato de salida.
    if _as_day(begin) > _as_day(end):
        raise MalformedParametersError(
            "Date range begin must be on or before its end", field="dateRange"
        )
    return f"{_format_date(begin)},{_format_date(end)}"


def _format_pagination(name: str, value: Any) -> str | None:
    # Valores <= 0 se tratan como "no enviado" (contrato observable de la API).
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedParametersError(
            f"Parameter '{name}' expects an integer, got {value!r}", field=name
        )
    if value <= 0:
        return None
    return str(value)


def build_request(
    base_path: str,
    params: QueryParams | None = None,
    *,
    allowed_order: Iterable[OrderBy] | None = None,
) -> RequestDescriptor:
    """Traduce `params` a un `RequestDescriptor` listo para el dispatcher.

    Orden de salida: filtros en el orden declarado del modelo (con `dateRange`
    en la posición de su inicio), luego `orderBy`, `limit` y `offset`.

    `allowed_order` sobreescribe la whitelist del modelo cuando un endpoint
    concreto acepta un subconjunto distinto.
    """

    query: dict[str, str] = {}
    if params is None:
        return RequestDescriptor(path=base_path, params=query)

    whitelist = tuple(allowed_order) if allowed_order is not None else params.allowed_order
    tail: dict[str, str] = {}
    range_bounds: dict[str, dict[str, Any]] = {}

    for f in fields(params):
        meta = f.metadata
        wire_name = meta.get("wire")
        if not wire_name:
            continue
        role = meta.get("role")
        enum = meta.get("enum")
        value = getattr(params, f.name)

        if role in (ROLE_RANGE_BEGIN, ROLE_RANGE_END):
            bounds = range_bounds.setdefault(wire_name, {})
            bounds[role] = value
            if ROLE_RANGE_BEGIN in bounds and ROLE_RANGE_END in bounds:
                formatted = _format_date_range(bounds[ROLE_RANGE_BEGIN], bounds[ROLE_RANGE_END])
                if formatted is not None:
                    query[wire_name] = formatted
            continue

        if role == ROLE_ORDER:
            if isinstance(value, str):
                value = [value]
            requested = list(value or ())
            kept = filter_order_by(requested, whitelist)
            if len(kept) != len(requested):
                logger.debug(
                    "Dropped %d orderBy token(s) not accepted by %s",
                    len(requested) - len(kept),
                    base_path,
                )
            if kept:
                tail[wire_name] = ",".join(token.value for token in kept)
            continue

        if role == ROLE_PAGINATION:
            formatted = _format_pagination(wire_name, value)
        elif isinstance(value, (list, tuple, set, frozenset)):
            formatted = _format_list(wire_name, value, enum)
        else:
            formatted = _format_scalar(wire_name, value, enum)

        if formatted is None:
            continue
        if role == ROLE_PAGINATION:
            tail[wire_name] = formatted
        else:
            query[wire_name] = formatted

    query.update(tail)
    return RequestDescriptor(path=base_path, params=query)
