"""
Configuration store holding templates, context maps and display names.
"""

from __future__ import annotations

import copy
from threading import RLock
from typing import Any, Dict, Mapping, Optional

from ..core.model import resolve_model_name
from ..exceptions import InvalidArgument
from ..utils import get_logger, get_path
from .defaults import (
    DEFAULT_ERROR_CONTEXTS,
    DEFAULT_MESSAGE_TEMPLATES,
    DEFAULT_OPTIONS,
    DEFAULT_TYPE_NAMES,
)
from .options import ErrorOptions, deep_merge


class ConfigStore:
    """
    Owns every configuration map used while rendering.

    Configure once, then share the store between callers. Each setter and
    getter holds the lock for its own duration only, so a render that runs
    while another thread reconfigures may see a mix of old and new values.
    Getters always return deep copies.
    """

    def __init__(self, options: Optional[ErrorOptions] = None) -> None:
        self._lock = RLock()
        self._options = options or ErrorOptions()
        self._templates: Dict[str, Dict[str, str]] = {}  # <package> : {<kind> : <template>}
        self._contexts: Dict[str, Dict[str, str]] = {}  # <kind> : {<field> : <lookup path>}
        self._type_names: Dict[str, Dict[str, str]] = {}  # <package> : {<type> : <name>}
        self._path_names: Dict[str, Dict[str, Dict[str, Any]]] = {}  # <model> : {<package> : {...}}
        self.logger = get_logger("config.store")

    @classmethod
    def with_defaults(cls) -> "ConfigStore":
        store = cls()
        store.configure(DEFAULT_OPTIONS)
        store.merge_error_contexts(DEFAULT_ERROR_CONTEXTS)
        store.set_message_templates(DEFAULT_MESSAGE_TEMPLATES)
        store.set_type_names(DEFAULT_TYPE_NAMES)
        return store

    # Options -------------------------------------------------------------
    def configure(self, partial: Mapping[str, Any]) -> None:
        with self._lock:
            self._options = self._options.merged(partial)
        self.logger.debug("Options updated: %s", ", ".join(sorted(partial)))

    def get_config(self) -> Dict[str, Any]:
        with self._lock:
            return self._options.to_dict()

    @property
    def options(self) -> ErrorOptions:
        with self._lock:
            return copy.deepcopy(self._options)

    # Message templates ---------------------------------------------------
    def set_message_templates(self, templates: Mapping[str, str], package: Optional[str] = None) -> None:
        package = self._package(package)
        _require_mapping("templates", templates)
        with self._lock:
            self._templates[package] = copy.deepcopy(dict(templates))
        self.logger.debug("Message templates replaced for package '%s'", package)

    def get_message_templates(self, package: Optional[str] = None) -> Dict[str, Any]:
        with self._lock:
            if package:
                return copy.deepcopy(self._templates.get(package, {}))
            return copy.deepcopy(self._templates)

    def template_for(self, package: str, kind: str) -> Optional[str]:
        """
        Template for ``kind`` in ``package``, falling back to the package's
        default key. ``None`` when neither exists.
        """
        with self._lock:
            templates = self._templates.get(package, {})
            template = templates.get(kind)
            if template is None:
                template = templates.get(self._options.default_key)
                if template is not None:
                    self.logger.debug("No '%s' template in package '%s'; using default", kind, package)
            return template

    # Type names ----------------------------------------------------------
    def set_type_names(self, type_names: Mapping[str, str], package: Optional[str] = None) -> None:
        package = self._package(package)
        _require_mapping("type_names", type_names)
        with self._lock:
            self._type_names[package] = {str(key).lower(): value for key, value in type_names.items()}

    def get_type_names(self, package: Optional[str] = None) -> Dict[str, Any]:
        with self._lock:
            if package:
                return copy.deepcopy(self._type_names.get(package, {}))
            return copy.deepcopy(self._type_names)

    def type_name_for(self, package: str, type_token: str) -> Optional[str]:
        with self._lock:
            return self._type_names.get(package, {}).get(type_token)

    # Path names ----------------------------------------------------------
    def set_path_names(self, model: Any, path_names: Mapping[str, Any], package: Optional[str] = None) -> None:
        model_name = resolve_model_name(model)
        if not model_name:
            raise InvalidArgument(f"Param 'model' expects a model or model name, received {model!r}")
        package = self._package(package)
        _require_mapping("path_names", path_names)
        with self._lock:
            self._path_names.setdefault(model_name, {})[package] = copy.deepcopy(dict(path_names))

    def get_path_names(self, model: Any, package: Optional[str] = None) -> Dict[str, Any]:
        model_name = resolve_model_name(model)
        with self._lock:
            by_package = self._path_names.get(model_name or "", {})
            if package:
                return copy.deepcopy(by_package.get(package, {}))
            return copy.deepcopy(by_package)

    def path_name_for(self, model_name: str, package: str, path: str) -> Any:
        """
        Display-name override for ``path``; a flat dotted key wins over a
        nested lookup.
        """
        with self._lock:
            names = self._path_names.get(model_name, {}).get(package)
            if not names:
                return None
            if path in names:
                return names[path]
            return get_path(names, path)

    # Error contexts ------------------------------------------------------
    def merge_error_contexts(self, contexts: Mapping[str, Mapping[str, str]]) -> None:
        """
        Merge field mappings into the existing kinds; fields given here
        override fields already configured for the same kind.
        """
        _require_mapping("contexts", contexts)
        for kind, context in contexts.items():
            _require_text("kind", kind)
            if not isinstance(context, Mapping):
                raise InvalidArgument(f"Context for kind '{kind}' expects a mapping, received {context!r}")
        with self._lock:
            deep_merge(self._contexts, {kind: dict(context) for kind, context in contexts.items()})

    def set_error_context(self, kind: str, context: Mapping[str, str]) -> None:
        _require_text("kind", kind)
        _require_mapping("context", context)
        with self._lock:
            self._contexts[kind] = copy.deepcopy(dict(context))

    def get_error_contexts(self, kind: Optional[str] = None) -> Dict[str, Any]:
        with self._lock:
            if kind:
                return copy.deepcopy(self._contexts.get(kind, {}))
            return copy.deepcopy(self._contexts)

    # Helpers -------------------------------------------------------------
    def _package(self, package: Optional[str]) -> str:
        if package is None:
            return self._options.default_package
        _require_text("package", package)
        return package


def _require_text(label: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"Param '{label}' expects a non-empty string, received {value!r}")


def _require_mapping(label: str, value: Any) -> None:
    if not isinstance(value, Mapping) or not value:
        raise InvalidArgument(f"Param '{label}' expects a non-empty mapping, received {value!r}")
