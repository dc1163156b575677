"""
Shape detection for incoming validation errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config.options import ErrorOptions, normalize_exclusions
from ..config.store import ConfigStore
from ..core.model import ModelInfo, inspect_model
from ..exceptions import InvalidArgument, UnsupportedFailureShape
from ..templating import DUPLICATE_KEY_TEMPLATES, INDEX_TEMPLATE, compile, decompile
from ..utils import get_field, get_logger, get_path
from .failures import FailureKind, ValidationFailure, is_duplicate_key_error, sub_failures_of

logger = get_logger("validation.classifier")

# Where drivers keep the bare server message.
DUPLICATE_KEY_MESSAGE_PATHS = ("details.errmsg", "errmsg", "details.writeErrors.0.errmsg")


class FailureShape(Enum):
    MULTI = "multi"  # document validate / save
    SINGLE = "single"  # update, duplicate key
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CallOptions:
    package: str
    exclude_errors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"package": self.package, "exclude_errors": list(self.exclude_errors)}


@dataclass
class Classification:
    shape: FailureShape
    model: ModelInfo
    options: CallOptions
    failures: List[ValidationFailure] = field(default_factory=list)


def classify(
    model: Any,
    raw: Any,
    store: ConfigStore,
    *,
    package: Optional[str] = None,
    exclude_errors: Any = None,
) -> Classification:
    """
    Inspect ``model`` and split ``raw`` into ordered leaf failures.

    Raises :class:`UnsupportedModel` for a non-model and
    :class:`UnsupportedFailureShape` when ``raw`` is neither a leaf nor an
    aggregate of leaves.
    """
    info = inspect_model(model)
    options = resolve_call_options(store.options, package=package, exclude_errors=exclude_errors)

    shape, failures = split_failures(raw)
    if shape is FailureShape.UNSUPPORTED:
        logger.debug("Unsupported failure shape %s for model %s", type(raw).__name__, info.name)
        raise UnsupportedFailureShape(raw)
    return Classification(shape=shape, model=info, options=options, failures=failures)


def split_failures(raw: Any) -> Tuple[FailureShape, List[ValidationFailure]]:
    if raw is None or isinstance(raw, (str, bytes, int, float, bool)):
        return FailureShape.UNSUPPORTED, []

    sub_failures = sub_failures_of(raw)
    if sub_failures:
        if get_field(raw, "kind") and get_field(raw, "path"):
            # both an aggregate and a leaf
            return FailureShape.UNSUPPORTED, []
        failures = []
        for path, entry in sub_failures.items():
            if entry is None or isinstance(entry, (str, bytes, list, tuple)):
                return FailureShape.UNSUPPORTED, []
            failure = ValidationFailure.from_raw(entry, path=str(path))
            if not failure.is_leaf:
                return FailureShape.UNSUPPORTED, []
            failures.append(failure)
        return FailureShape.MULTI, failures

    if is_duplicate_key_error(raw):
        failure = parse_duplicate_key_error(raw)
        if failure is not None:
            return FailureShape.SINGLE, [failure]
        return FailureShape.UNSUPPORTED, []

    failure = ValidationFailure.from_raw(raw)
    if failure.is_leaf:
        return FailureShape.SINGLE, [failure]
    return FailureShape.UNSUPPORTED, []


def parse_duplicate_key_error(raw: Any) -> Optional[ValidationFailure]:
    """
    Rebuild a ``unique`` leaf from a duplicate-key message such as
    ``E11000 duplicate key error collection: test.Users index: username_1
    dup key: { : "bob" }``. Returns ``None`` if no known format matches.

    Driver exceptions decorate ``str()`` with the full server reply, so the
    server's own ``errmsg`` is tried before the failure message.
    """
    failure = ValidationFailure.from_raw(raw)
    match = _match_duplicate_key_message(raw, failure.message)
    if match is None:
        logger.debug("Duplicate key message did not match a known format: %s", failure.message)
        return None
    message, data = match

    value = data["value"]
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    index = decompile(INDEX_TEMPLATE, data["index"], from_right=True)
    path = index["path"] or data.get("key") or data["index"]

    extra = dict(failure.extra)
    extra.update(collection=data["collection"], index=data["index"], direction=index["direction"])
    if data.get("key"):
        extra["key"] = data["key"]
    return failure.replace(
        kind=FailureKind.UNIQUE.value, path=path, value=value, message=message, extra=extra
    )


def _match_duplicate_key_message(raw: Any, fallback: str) -> Optional[Tuple[str, Dict[str, str]]]:
    candidates = [get_path(raw, lookup) for lookup in DUPLICATE_KEY_MESSAGE_PATHS]
    candidates.append(fallback)
    for message in candidates:
        if not isinstance(message, str) or not message:
            continue
        for template in DUPLICATE_KEY_TEMPLATES:
            data = decompile(template, message)
            if compile(template, data) == message:
                return message, data
    return None


def resolve_call_options(
    options: ErrorOptions,
    *,
    package: Optional[str] = None,
    exclude_errors: Any = None,
) -> CallOptions:
    if package is not None and (not isinstance(package, str) or not package):
        raise InvalidArgument(f"Param 'package' expects a non-empty string, received {package!r}")
    exclusions = options.exclude_errors if exclude_errors is None else normalize_exclusions(exclude_errors)
    return CallOptions(package=package or options.default_package, exclude_errors=tuple(exclusions))
