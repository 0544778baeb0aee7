"""
Shared helpers for request/response schemas: timestamp normalization and
translation of pydantic errors into ``Param <field>: <reason>`` messages.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Tuple

_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}

_DATE_ERROR_TYPES = {
    "datetime_type",
    "datetime_parsing",
    "datetime_from_date_parsing",
    "datetime_object_invalid",
}


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso_utc(value: Optional[datetime]) -> Optional[str]:
    """Serialize a timestamp as ISO-8601 UTC with millisecond precision, e.g.
    ``2024-01-01T10:00:00.000Z``."""
    if value is None:
        return None
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _field_name(loc: Tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
    if parts:
        return parts[0]
    return str(loc[0]) if loc else "body"


def _reason(error: Mapping[str, Any]) -> str:
    err_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if err_type == "missing":
        return "Required"
    if err_type == "string_too_short":
        if ctx.get("min_length") == 1:
            return "Must not be an empty value"
        return f"Must be at least {ctx.get('min_length')} characters"
    if err_type == "string_too_long":
        return f"Must be at most {ctx.get('max_length')} characters"
    if err_type == "string_type":
        return "Expected string"
    if err_type in ("bool_type", "bool_parsing"):
        return "Expected boolean"
    if err_type in _DATE_ERROR_TYPES:
        return "Invalid date"
    if err_type in ("uuid_type", "uuid_parsing"):
        return "Invalid uuid"
    if err_type in ("model_attributes_type", "dict_type", "model_type"):
        return "Expected object"
    if err_type == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value")


def first_validation_issue(errors: Iterable[Mapping[str, Any]]) -> Tuple[str, str]:
    """Return ``(field, reason)`` for the first error reported by pydantic."""
    for error in errors:
        if error.get("type") == "json_invalid":
            return "body", "Invalid JSON"
        return _field_name(tuple(error.get("loc", ()))), _reason(error)
    return "body", "Invalid value"
