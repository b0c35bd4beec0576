"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization.

    Uses ``dataclasses.fields()`` + ``getattr`` so that callable fields
    (an account's injected clock) can be skipped instead of deep-copied.
    """
    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if callable(value):
            continue
        result[f.name] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
