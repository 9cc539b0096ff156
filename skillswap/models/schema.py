"""Record validation helpers shared by the stored models.

Stored documents look like ``{"version": 1, "<items>": [...]}``. Each item is
checked here before it becomes a dataclass, so a malformed record fails at
load time instead of surfacing later as a missing field.
"""

from __future__ import annotations

from typing import Any

SCHEMA_VERSION = 1


class ValidationError(ValueError):
    """Raised when a stored or submitted record does not match the schema."""
    pass


def require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(f"{what} must be an object, got {type(data).__name__}")
    return data


def require_str(data: dict[str, Any], key: str, *, allow_blank: bool = False) -> str:
    """Return ``data[key]`` as a string or raise ValidationError."""
    value = data.get(key)
    if not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")
    if not allow_blank and not value.strip():
        raise ValidationError(f"'{key}' must not be blank")
    return value


def optional_str(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")
    return value


def str_list(data: dict[str, Any], key: str) -> list[str]:
    """Return ``data[key]`` as a list of strings (missing means empty)."""
    value = data.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError(f"'{key}' must be a list of strings")
    return list(value)


def require_number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"'{key}' must be a number")
    return float(value)
