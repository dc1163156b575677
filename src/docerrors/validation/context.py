"""
Context records rendered into message templates.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..config.options import ErrorOptions
from ..config.store import ConfigStore
from ..core.model import ModelInfo
from ..utils.lookup import get_path
from .failures import FailureKind, ValidationFailure

BASE_CONTEXT = "base"
PATH_NAME_FIELD = "path_name"


@dataclass(frozen=True)
class ErrorContext:
    """
    Flat, read-only values for one leaf failure, together with the
    normalized failure they were read from.
    """

    failure: ValidationFailure
    values: Mapping[str, Any]

    @property
    def kind(self) -> str:
        return self.failure.kind or ""

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.values)


def build_context(
    model: ModelInfo,
    failure: ValidationFailure,
    package: str,
    store: ConfigStore,
    options: ErrorOptions | None = None,
) -> ErrorContext:
    options = options or store.options
    failure = normalize_failure(failure, package, store, options)
    record = failure.to_record()

    context = _read_fields(record, store.get_error_contexts(BASE_CONTEXT))
    context[PATH_NAME_FIELD] = resolve_path_name(model, failure.path or "", package, store, options)
    if failure.kind:
        context.update(_read_fields(record, store.get_error_contexts(failure.kind)))

    for context_field, schema_field in options.additional_context_fields.items():
        context[context_field] = get_path(model.schema, f"{failure.path}.{schema_field}")

    return ErrorContext(failure=failure, values=MappingProxyType(context))


def normalize_failure(
    failure: ValidationFailure,
    package: str,
    store: ConfigStore,
    options: ErrorOptions,
) -> ValidationFailure:
    """
    Rewrite kind-specific raw fields into the shape the context maps expect.
    """
    if failure.is_cast_error or failure.kind == FailureKind.TYPE.value:
        raw_type = failure.extra.get("type") if failure.kind == FailureKind.TYPE.value else failure.kind
        token = str(raw_type or "").lower()
        extra = dict(failure.extra, type=token, type_name=store.type_name_for(package, token) or token)
        return failure.replace(kind=FailureKind.TYPE.value, extra=extra)

    if failure.kind == FailureKind.ENUM.value:
        allowed = failure.properties.get("enum_values") or []
        properties = dict(failure.properties)
        properties["enum_values_string"] = options.msg_delimiter.join(str(item) for item in allowed)
        return failure.replace(properties=properties)

    if failure.kind == FailureKind.USER_DEFINED.value:
        return failure.replace(kind=FailureKind.VALIDATE.value)

    return failure


def resolve_path_name(
    model: ModelInfo,
    path: str,
    package: str,
    store: ConfigStore,
    options: ErrorOptions,
) -> str:
    """
    Display name for ``path``: configured path names for the model and
    package, then the inline schema name, then the path itself.
    """
    override = store.path_name_for(model.name, package, path)
    if _filled(override):
        return override
    inline = get_path(model.schema, f"{path}.{options.path_name_key}") if path else None
    if _filled(inline):
        return inline
    return path


def _read_fields(record: Mapping[str, Any], field_map: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        name: get_path(record, lookup) if isinstance(lookup, str) else None
        for name, lookup in field_map.items()
    }


def _filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value)
