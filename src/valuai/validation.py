"""Input parsing and validation helpers."""

from __future__ import annotations

from typing import Any

from valuai.exceptions import ValidationError


def require_field(payload: dict[str, Any], key: str, expected_type: type | tuple[type, ...]) -> Any:
    value = payload.get(key)
    if value is None:
        raise ValidationError(f"Missing required field: '{key}'.")
    # bool is a subclass of int; True/False is never a valid amount or head count.
    if isinstance(value, bool):
        _is_numeric = (
            expected_type is int
            or expected_type is float
            or (isinstance(expected_type, tuple) and any(t in (int, float) for t in expected_type))
        )
        if _is_numeric:
            raise ValidationError(f"Field '{key}' must be numeric, received bool.")
    if not isinstance(value, expected_type):
        if isinstance(expected_type, tuple):
            expected_name = ", ".join(t.__name__ for t in expected_type)
        else:
            expected_name = expected_type.__name__
        raise ValidationError(
            f"Field '{key}' must be of type {expected_name}, received {type(value).__name__}."
        )
    return value


def require_text(payload: dict[str, Any], key: str) -> str:
    value: str = require_field(payload, key, str).strip()
    if not value:
        raise ValidationError(f"Field '{key}' must not be empty.")
    return value


def optional_text(payload: dict[str, Any], key: str) -> str | None:
    if payload.get(key) is None:
        return None
    return require_field(payload, key, str)


def parse_amount(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field_name}' must be numeric, received bool.")
    try:
        parsed = float(value)
    except (ValueError, TypeError) as exc:
        raise ValidationError(f"Field '{field_name}' must be numeric.") from exc
    if parsed != parsed or parsed in (float("inf"), float("-inf")):
        raise ValidationError(f"Field '{field_name}' must be a finite number.")
    if parsed < 0:
        raise ValidationError(f"Field '{field_name}' must be non-negative.")
    return parsed


def optional_amount(payload: dict[str, Any], key: str) -> float | None:
    value = payload.get(key)
    if value is None:
        return None
    return parse_amount(value, key)


def parse_team_size(payload: dict[str, Any]) -> int:
    team_size: int = require_field(payload, "team_size", int)
    if team_size < 1:
        raise ValidationError("Field 'team_size' must be at least 1.")
    return team_size
