"""
docerrors public package initialization.

Module-level functions operate on :data:`default_store`, a
:class:`~docerrors.config.ConfigStore` seeded with the built-in English
templates. Applications needing isolated configuration build their own store
and pass it through ``store=``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config import ConfigStore, ErrorOptions  # noqa: F401
from .config import load_config_file as _load_config_file
from .exceptions import (  # noqa: F401
    ConfigFileError,
    DocErrorsError,
    InvalidArgument,
    UnsupportedFailureShape,
    UnsupportedModel,
)
from .templating import compile, decompile  # noqa: F401
from .validation import FailureKind, FriendlyValidationError, ValidationFailure  # noqa: F401
from .validation import pipeline as _pipeline

default_store = ConfigStore.with_defaults()


def handle_validation_error(
    model: Any,
    error: Any,
    *,
    package: Optional[str] = None,
    exclude_errors: Any = None,
    store: Optional[ConfigStore] = None,
) -> Any:
    return _pipeline.handle_validation_error(
        model, error, store=store or default_store, package=package, exclude_errors=exclude_errors
    )


async def validate_document(
    document: Any,
    *,
    package: Optional[str] = None,
    exclude_errors: Any = None,
    store: Optional[ConfigStore] = None,
) -> Any:
    return await _pipeline.validate_document(
        document, store=store or default_store, package=package, exclude_errors=exclude_errors
    )


def configure(partial: Mapping[str, Any], *, store: Optional[ConfigStore] = None) -> None:
    (store or default_store).configure(partial)


def get_config(*, store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    return (store or default_store).get_config()


def set_message_templates(
    templates: Mapping[str, str], package: Optional[str] = None, *, store: Optional[ConfigStore] = None
) -> None:
    (store or default_store).set_message_templates(templates, package)


def get_message_templates(package: Optional[str] = None, *, store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    return (store or default_store).get_message_templates(package)


def set_type_names(
    type_names: Mapping[str, str], package: Optional[str] = None, *, store: Optional[ConfigStore] = None
) -> None:
    (store or default_store).set_type_names(type_names, package)


def get_type_names(package: Optional[str] = None, *, store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    return (store or default_store).get_type_names(package)


def set_path_names(
    model: Any,
    path_names: Mapping[str, Any],
    package: Optional[str] = None,
    *,
    store: Optional[ConfigStore] = None,
) -> None:
    (store or default_store).set_path_names(model, path_names, package)


def get_path_names(model: Any, package: Optional[str] = None, *, store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    return (store or default_store).get_path_names(model, package)


def merge_error_contexts(contexts: Mapping[str, Mapping[str, str]], *, store: Optional[ConfigStore] = None) -> None:
    (store or default_store).merge_error_contexts(contexts)


def set_error_context(kind: str, context: Mapping[str, str], *, store: Optional[ConfigStore] = None) -> None:
    (store or default_store).set_error_context(kind, context)


def get_error_contexts(kind: Optional[str] = None, *, store: Optional[ConfigStore] = None) -> Dict[str, Any]:
    return (store or default_store).get_error_contexts(kind)


def load_config_file(path: Path | str, *, store: Optional[ConfigStore] = None) -> ConfigStore:
    return _load_config_file(path, store or default_store)


__all__ = [
    "ConfigFileError",
    "ConfigStore",
    "DocErrorsError",
    "ErrorOptions",
    "FailureKind",
    "FriendlyValidationError",
    "InvalidArgument",
    "UnsupportedFailureShape",
    "UnsupportedModel",
    "ValidationFailure",
    "compile",
    "configure",
    "decompile",
    "default_store",
    "get_config",
    "get_error_contexts",
    "get_message_templates",
    "get_path_names",
    "get_type_names",
    "handle_validation_error",
    "load_config_file",
    "merge_error_contexts",
    "set_error_context",
    "set_message_templates",
    "set_path_names",
    "set_type_names",
    "validate_document",
]
