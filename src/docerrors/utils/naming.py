"""
Naming utilities for docerrors.
"""

import re
from typing import Any, Dict, Mapping


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """
    Convert ``camelCase`` record keys such as ``stringValue`` or
    ``enumValues`` to ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", step1).lower()
    return snake


def with_snake_aliases(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy ``data`` keeping every original key and adding a ``snake_case``
    alias next to each ``camelCase`` one. An explicit snake key wins.
    """
    result: Dict[str, Any] = dict(data)
    for key, value in data.items():
        result.setdefault(camel_to_snake(str(key)), value)
    return result
