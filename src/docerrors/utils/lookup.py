"""Dotted-path access over mappings, sequences and plain objects."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

_MISSING = object()


def get_field(source: Any, name: str, default: Any = None) -> Any:
    """
    Read ``name`` from a mapping key or, failing that, an attribute.
    """
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def get_path(source: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dotted ``path`` such as ``properties.minlength`` or
    ``logs.0.time``. Integer segments index into sequences. Any missing step
    yields ``default``.
    """
    if not path:
        return default
    current = source
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return default
    return current


def _step(current: Any, segment: str) -> Any:
    if current is None:
        return _MISSING
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.lstrip("-").isdigit():
            return _MISSING
        index = int(segment)
        if -len(current) <= index < len(current):
            return current[index]
        return _MISSING
    if isinstance(current, (str, bytes, int, float, bool)):
        return _MISSING
    return getattr(current, segment, _MISSING)
