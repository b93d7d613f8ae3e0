"""Field readers shared by the forecast decoders.

Every reader maps a missing key or a JSON ``null`` to the zero value of its
type and raises DecodeError when the value has the wrong JSON type.
"""

from datetime import UTC, datetime
from typing import Any

from darksky.errors import DecodeError


def read_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{key}: expected number, got {_json_type(value)}")
    return float(value)


def read_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{key}: expected integer, got {_json_type(value)}")
    if isinstance(value, float):
        if not value.is_integer():
            raise DecodeError(f"{key}: expected integer, got {value}")
        return int(value)
    return value


def read_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{key}: expected string, got {_json_type(value)}")
    return value


def read_object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{key}: expected object, got {_json_type(value)}")
    return value


def read_objects(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"{key}: expected array, got {_json_type(value)}")
    for item in value:
        if not isinstance(item, dict):
            raise DecodeError(f"{key}: expected array of objects, got {_json_type(item)}")
    return value


def read_strs(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DecodeError(f"{key}: expected array of strings")
    return tuple(value)


def from_unix(timestamp: int) -> datetime:
    """Convert UNIX seconds to an aware UTC datetime.

    Raises DecodeError if the timestamp is outside the range datetime supports.
    """
    try:
        return datetime.fromtimestamp(timestamp, UTC)
    except (ValueError, OverflowError, OSError) as e:
        raise DecodeError(f"Timestamp {timestamp} is out of range") from e


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
