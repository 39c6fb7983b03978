"""Helpers for reading and writing nested mappings by dotted path."""

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def get_property(obj: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return the value at ``path`` (e.g. ``"system.type.value"``) or ``default``."""
    target: Any = obj
    for part in path.split("."):
        if not isinstance(target, Mapping) or part not in target:
            return default
        target = target[part]
    return target


def has_property(obj: Mapping[str, Any], path: str) -> bool:
    """Check whether ``path`` exists in ``obj``, even when its value is None."""
    return get_property(obj, path, _MISSING) is not _MISSING


def set_property(obj: dict[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at ``path``, creating intermediate dicts as needed."""
    *parents, leaf = path.split(".")
    target = obj
    for part in parents:
        child = target.get(part)
        if not isinstance(child, dict):
            child = {}
            target[part] = child
        target = child
    target[leaf] = value


def expand_object(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Expand ``{"a.b": 1}`` into ``{"a": {"b": 1}}``."""
    expanded: dict[str, Any] = {}
    for path, value in flat.items():
        set_property(expanded, path, value)
    return expanded
