"""
Normalized validation failure records.

The document mapper hands over failures either as mappings (decoded JSON,
driver payloads) or as exception-like objects. Both are coerced into
:class:`ValidationFailure` without touching the caller's object.
"""

from __future__ import annotations

import dataclasses
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..utils.lookup import get_field
from ..utils.naming import camel_to_snake, with_snake_aliases


class FailureKind(str, Enum):
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    MINLENGTH = "minlength"
    MAXLENGTH = "maxlength"
    ENUM = "enum"
    MATCH = "match"
    REGEXP = "regexp"
    TYPE = "type"
    UNIQUE = "unique"
    VALIDATE = "validate"
    USER_DEFINED = "user defined"


CAST_ERROR_NAMES = frozenset({"CastError"})
DUPLICATE_KEY_ERROR_NAMES = frozenset(
    {"MongoError", "MongoServerError", "BulkWriteError", "DuplicateKeyError"}
)
DUPLICATE_KEY_CODE = 11000

SUB_FAILURE_KEYS = ("sub_failures", "errors")

_KNOWN_FIELDS = ("kind", "path", "message", "value", "properties", "name", "code")


@dataclass
class ValidationFailure:
    kind: Optional[str] = None
    path: Optional[str] = None
    message: str = ""
    value: Any = None
    properties: Dict[str, Any] = field(default_factory=dict)
    name: Optional[str] = None
    code: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any, *, path: Optional[str] = None) -> "ValidationFailure":
        if isinstance(raw, ValidationFailure):
            return dataclasses.replace(raw, properties=dict(raw.properties), extra=dict(raw.extra))

        if isinstance(raw, Mapping):
            data = with_snake_aliases(raw)
        else:
            attributes = getattr(raw, "__dict__", {})
            data = with_snake_aliases(
                {key: value for key, value in attributes.items() if not key.startswith("_")}
            )
            for key in _KNOWN_FIELDS:
                if key not in data and getattr(raw, key, None) is not None:
                    data[key] = getattr(raw, key)
            data.setdefault("name", type(raw).__name__)
            if isinstance(raw, BaseException) and "message" not in data:
                data["message"] = str(raw)

        properties = data.get("properties")
        extra = {
            key: value
            for key, value in data.items()
            if camel_to_snake(str(key)) not in _KNOWN_FIELDS
            and camel_to_snake(str(key)) not in SUB_FAILURE_KEYS
        }
        return cls(
            kind=_as_text(data.get("kind")),
            path=_as_text(data.get("path")) or path,
            message="" if data.get("message") is None else str(data.get("message")),
            value=data.get("value"),
            properties=with_snake_aliases(properties) if isinstance(properties, Mapping) else {},
            name=_as_text(data.get("name")),
            code=data.get("code"),
            extra=extra,
        )

    @property
    def is_leaf(self) -> bool:
        return bool(self.kind) and bool(self.path)

    @property
    def is_cast_error(self) -> bool:
        return self.name in CAST_ERROR_NAMES

    def replace(self, **changes: Any) -> "ValidationFailure":
        return dataclasses.replace(self, **changes)

    def to_record(self) -> Dict[str, Any]:
        """
        Flat record used for context lookups; ``extra`` entries sit beside the
        known fields.
        """
        record: Dict[str, Any] = dict(self.extra)
        record.update(
            {
                "kind": self.kind,
                "path": self.path,
                "message": self.message,
                "value": self.value,
                "properties": dict(self.properties),
                "name": self.name,
                "code": self.code,
            }
        )
        return record


def is_duplicate_key_error(raw: Any) -> bool:
    if isinstance(raw, (str, bytes)) or raw is None:
        return False
    name = get_field(raw, "name") or type(raw).__name__
    return get_field(raw, "code") == DUPLICATE_KEY_CODE and name in DUPLICATE_KEY_ERROR_NAMES


def sub_failures_of(raw: Any) -> Optional[Mapping[str, Any]]:
    """
    Return the non-empty path -> failure mapping of an aggregate error, if any.
    """
    if isinstance(raw, (str, bytes)) or raw is None:
        return None
    for key in SUB_FAILURE_KEYS:
        candidate = get_field(raw, key)
        if isinstance(candidate, Mapping) and candidate:
            return OrderedDict(candidate)
    return None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    return str(value)
