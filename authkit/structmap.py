"""Copy same-named fields from one dataclass instance into another."""

import dataclasses
from typing import Any


def _public_fields(obj: Any) -> list[str]:
    return [f.name for f in dataclasses.fields(obj) if not f.name.startswith("_")]


def _is_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def struct_map_to_struct(source: Any, target: Any) -> None:
    """Copy fields of ``source`` into same-named fields of ``target``.

    A target field holding a dataclass instance that has no counterpart in the
    source is filled field by field from the source. ``None`` values are not
    copied. Anything that is not a dataclass instance is left alone.
    """
    if not _is_instance(source) or not _is_instance(target):
        return
    available = set(_public_fields(source))

    def copy_into(obj: Any) -> None:
        for name in _public_fields(obj):
            if name in available:
                value = getattr(source, name)
                if value is not None:
                    setattr(obj, name, value)
            else:
                nested = getattr(obj, name)
                if _is_instance(nested) and nested is not obj:
                    copy_into(nested)

    copy_into(target)