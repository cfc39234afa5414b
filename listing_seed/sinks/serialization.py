"""Shared serialization utilities for stores and sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


def to_document(obj: Any, exclude: tuple[str, ...] = ()) -> dict:
    """Convert a model to a JSON-ready document.

    Parameters
    ----------
    obj : Any
        A dataclass instance or a dict.
    exclude : tuple[str, ...]
        Field names to leave out (e.g. store-assigned ids).

    Returns
    -------
    dict
        Serialized document.
    """
    if is_dataclass(obj):
        return {
            f.name: serialize_value(getattr(obj, f.name))
            for f in fields(obj)
            if f.name not in exclude
        }
    if isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items() if k not in exclude}
    return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif is_dataclass(value):
        return to_document(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
