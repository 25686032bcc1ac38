"""JSON and YAML helpers."""

import dataclasses
import json
from typing import Any

import yaml


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    raise TypeError(f"cannot encode {type(value).__name__}")


def json_marshal_to_string(value: Any) -> str:
    """Encode ``value`` as compact JSON; return an empty string if it cannot be encoded."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_default)
    except (TypeError, ValueError):
        return ""


def yaml_dump(value: Any) -> str:
    """Encode ``value`` as a YAML document."""
    return yaml.safe_dump(value, allow_unicode=True, sort_keys=False)


def yaml_load(text: str) -> Any:
    """Decode a YAML document."""
    return yaml.safe_load(text)