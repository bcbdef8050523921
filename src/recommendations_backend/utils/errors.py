"""Typed application errors and their HTTP status mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

ErrorType = Literal["conflict", "not_found", "unauthorized", "wrong_schema"]

_STATUS_BY_TYPE: dict[str, int] = {
    "conflict": 409,
    "not_found": 404,
    "unauthorized": 401,
    "wrong_schema": 422,
}


@dataclass(slots=True, eq=True)
class AppError(Exception):
    """Error raised by the service layer; the HTTP layer turns it into a response."""

    type: ErrorType
    message: str = ""

    __hash__ = Exception.__hash__

    def __str__(self) -> str:
        return f"{self.type}: {self.message}" if self.message else self.type

    def to_extra(self) -> dict[str, Any]:
        """Return a dict suitable for log enrichment."""

        return {"error_type": self.type, "error_message": self.message}

    @property
    def status_code(self) -> int:
        return error_type_to_status_code(self.type)


def conflict_error(message: str = "") -> AppError:
    return AppError("conflict", message)


def not_found_error(message: str = "") -> AppError:
    return AppError("not_found", message)


def unauthorized_error(message: str = "") -> AppError:
    return AppError("unauthorized", message)


def wrong_schema_error(message: str = "") -> AppError:
    return AppError("wrong_schema", message)


def is_app_error(value: object) -> bool:
    """Return ``True`` for :class:`AppError` instances and ``{type, message}`` mappings of a known type."""

    if isinstance(value, AppError):
        return True
    if isinstance(value, Mapping):
        return value.get("type") in _STATUS_BY_TYPE and "message" in value
    return False


def error_type_to_status_code(error_type: str) -> int:
    """Map an error type to its HTTP status, defaulting to 400 for unknown types."""

    return _STATUS_BY_TYPE.get(error_type, 400)


__all__ = [
    "AppError",
    "ErrorType",
    "conflict_error",
    "not_found_error",
    "unauthorized_error",
    "wrong_schema_error",
    "is_app_error",
    "error_type_to_status_code",
]
