"""
Global rendering options.
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

from ..exceptions import InvalidArgument

_REQUIRED_TEXT = ("default_package", "default_key", "path_name_key")
_OPTIONAL_LINKS = ("link_to_errors", "link_to_origin_error")
_MAPPINGS = ("additional_error_fields", "additional_context_fields")


@dataclass
class ErrorOptions:
    default_package: str = "DEFAULT"
    default_key: str = "DEFAULT"
    msg_delimiter: str = ", "
    path_name_key: str = "$name"
    upper_first: bool = True
    link_to_errors: Optional[str] = "errors"
    link_to_origin_error: Optional[str] = None
    exclude_errors: List[str] = field(default_factory=list)
    additional_error_fields: Dict[str, Any] = field(default_factory=dict)
    additional_context_fields: Dict[str, str] = field(default_factory=dict)

    def merged(self, partial: Mapping[str, Any]) -> "ErrorOptions":
        """
        Return a copy with ``partial`` merged in. Nested mappings merge key by
        key; every other value is replaced.
        """
        if not isinstance(partial, Mapping) or not partial:
            raise InvalidArgument(f"Param 'options' expects a non-empty mapping, received {partial!r}")
        known = {item.name for item in fields(self)}
        unknown = sorted(set(partial) - known)
        if unknown:
            raise InvalidArgument(f"Unknown option(s): {', '.join(unknown)}")

        current = self.to_dict()
        deep_merge(current, {key: _validate_option(key, value) for key, value in partial.items()})
        return ErrorOptions(**current)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(asdict(self))


def normalize_exclusions(value: Any) -> List[str]:
    """
    Accept a single kind or an iterable of kinds; ``None`` means no exclusion.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(item) for item in value if item]
    raise InvalidArgument(f"'exclude_errors' expects a string or a list of strings, received {value!r}")


def deep_merge(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> MutableMapping[str, Any]:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def _validate_option(key: str, value: Any) -> Any:
    if key in _REQUIRED_TEXT:
        if not isinstance(value, str) or not value:
            raise InvalidArgument(f"Option '{key}' expects a non-empty string, received {value!r}")
        return value
    if key == "msg_delimiter":
        if not isinstance(value, str):
            raise InvalidArgument(f"Option 'msg_delimiter' expects a string, received {value!r}")
        return value
    if key == "upper_first":
        if not isinstance(value, bool):
            raise InvalidArgument(f"Option 'upper_first' expects a boolean, received {value!r}")
        return value
    if key in _OPTIONAL_LINKS:
        if value is None or value is False or value == "":
            return None
        if not isinstance(value, str):
            raise InvalidArgument(f"Option '{key}' expects a field name or None, received {value!r}")
        return value
    if key == "exclude_errors":
        return normalize_exclusions(value)
    if key in _MAPPINGS:
        if not isinstance(value, Mapping):
            raise InvalidArgument(f"Option '{key}' expects a mapping, received {value!r}")
        return dict(value)
    return value
