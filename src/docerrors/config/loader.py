"""YAML configuration files for message packages and options."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..exceptions import ConfigFileError, InvalidArgument
from .store import ConfigStore

SECTIONS = ("options", "message_templates", "type_names", "path_names", "error_contexts")


def load_config_file(path: Path | str, store: ConfigStore) -> ConfigStore:
    """
    Apply a YAML configuration file to ``store``.

    Recognized top-level sections::

        options:            {msg_delimiter: "; ", default_package: en}
        message_templates:  {en: {DEFAULT: "Invalid {path_name}", ...}}
        type_names:         {en: {number: number, ...}}
        path_names:         {Users: {en: {fullName: full name}}}
        error_contexts:     {minlength: {min_length: properties.minlength}}

    Options are applied first so that a new ``default_package`` is in place
    before any package-less data is stored.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigFileError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigFileError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(set(raw) - set(SECTIONS))
    if unknown:
        raise ConfigFileError(f"Unknown section(s) in {path}: {', '.join(unknown)}")

    try:
        _apply(raw, store)
    except ConfigFileError:
        raise
    except InvalidArgument as exc:
        raise ConfigFileError(f"Config file at {path} is invalid: {exc}") from exc
    store.logger.info("Loaded configuration from %s", path)
    return store


def _apply(raw: Mapping[str, Any], store: ConfigStore) -> None:
    options = _section(raw, "options")
    if options:
        store.configure(options)

    for package, templates in _section(raw, "message_templates").items():
        store.set_message_templates(_section_entry("message_templates", package, templates), str(package))

    for package, type_names in _section(raw, "type_names").items():
        store.set_type_names(_section_entry("type_names", package, type_names), str(package))

    for model_name, packages in _section(raw, "path_names").items():
        for package, names in _section_entry("path_names", model_name, packages).items():
            store.set_path_names(str(model_name), _section_entry("path_names", package, names), str(package))

    contexts = _section(raw, "error_contexts")
    if contexts:
        store.merge_error_contexts(contexts)


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value: Optional[Any] = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigFileError(f"{name} must be a mapping")
    return value


def _section_entry(section: str, key: Any, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ConfigFileError(f"{section}.{key} must be a mapping")
    return value
