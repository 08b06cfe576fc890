"""Minimal object <-> JSON helpers.

``get_json`` flattens mappings, sequences, and plain objects into compact
JSON. ``from_json`` rebuilds an instance of a class from a JSON object
without running its ``__init__``, so the class's methods work on the result:

    rect = from_json(Rectangle, '{"width":10,"height":20}')
    rect.area()  # 200
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, TypeVar

from csskit.errors import SerializationError

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _to_payload(obj: Any) -> Any:
    """Convert a non-JSON-native value into a dict or list, or raise TypeError."""
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, tuple):
        return list(obj)
    if isinstance(obj, type):
        raise TypeError(f"Cannot serialize class {obj.__name__}")
    if dataclasses.is_dataclass(obj):
        return {
            f.name: getattr(obj, f.name)
            for f in dataclasses.fields(obj)
            if not f.name.startswith("_")
        }
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Accepts mappings, lists/tuples, dataclasses, and objects with public
    instance attributes. Key order is preserved.
    """
    try:
        payload = obj if isinstance(obj, (dict, list)) else _to_payload(obj)
        return json.dumps(payload, separators=(",", ":"), default=_to_payload)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object string."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        try:
            object.__setattr__(instance, key, value)
        except (AttributeError, TypeError) as exc:
            raise SerializationError(
                f"Cannot set attribute {key!r} on {cls.__name__}"
            ) from exc
    return instance
