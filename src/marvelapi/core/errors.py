"""Jerarquía de errores del cliente.

Invariantes:
- Todo error tiene `code` (str) y `category` (ErrorCategory).
- Los errores de parámetros se detectan antes de cualquier I/O.
- Nada se reintenta ni se silencia aquí: el llamador decide la política.

Por qué una sola raíz (`MarvelAPIError`):
- Permite `except MarvelAPIError` en el borde sin conocer cada subtipo.
- `to_dict()` da una vista serializable para logs o respuestas propias.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categorías de alto nivel para enrutar/gestionar errores."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    PROTOCOL = "protocol"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"


class MarvelAPIError(Exception):
    """Base de todos los errores de la librería."""

    def __init__(self, message: str, code: str, category: ErrorCategory) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
        }


# ─── Errores del llamador (antes del dispatch) ──────────────────


class MalformedParametersError(MarvelAPIError, ValueError):
    """Combinación de filtros estructuralmente inválida (p.ej. rango de fechas a medias)."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, "MALFORMED_PARAMETERS", ErrorCategory.VALIDATION)
        self.field = field


class InvalidEnumValueError(MarvelAPIError, ValueError):
    """Un filtro enumerado no tiene token de wire."""

    def __init__(self, enum_name: str, value: object) -> None:
        super().__init__(
            f"{value!r} is not a valid {enum_name}",
            "INVALID_ENUM_VALUE",
            ErrorCategory.VALIDATION,
        )
        self.enum_name = enum_name
        self.value = value


class ConfigurationError(MarvelAPIError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION)


# ─── Errores de la llamada ──────────────────────────────────────


class HttpError(MarvelAPIError):
    """Status HTTP fuera del rango 2xx."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"HTTP {status_code} from Marvel API",
            "HTTP_ERROR",
            ErrorCategory.EXTERNAL_API,
        )
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["status_code"] = self.status_code
        return out


class ApiError(MarvelAPIError):
    """Envelope bien formado que reporta un fallo del servidor (key inválida, rate limit...)."""

    def __init__(self, api_code: str, message: str) -> None:
        super().__init__(
            f"Marvel API error ({api_code}): {message}",
            "API_ERROR",
            ErrorCategory.EXTERNAL_API,
        )
        self.api_code = api_code
        self.api_message = message

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["api_code"] = self.api_code
        return out


class MalformedResponseError(MarvelAPIError):
    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Malformed Marvel API response: {reason}",
            "MALFORMED_RESPONSE",
            ErrorCategory.PROTOCOL,
        )
        self.reason = reason


class CancelledOrTimedOutError(MarvelAPIError):
    """La llamada excedió el deadline externo o el timeout del transporte."""

    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message, "CANCELLED_OR_TIMED_OUT", ErrorCategory.TIMEOUT)
        self.timeout = timeout


class TransportFailureError(MarvelAPIError):
    """Fallo de la petición antes de obtener una respuesta HTTP utilizable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "TRANSPORT_FAILURE", ErrorCategory.TRANSPORT)
