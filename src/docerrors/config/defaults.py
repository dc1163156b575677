"""
Built-in configuration seeded into every default store.
"""

from __future__ import annotations

DEFAULT_PACKAGE = "DEFAULT"
DEFAULT_KEY = "DEFAULT"

DEFAULT_OPTIONS = {
    "default_package": DEFAULT_PACKAGE,
    "default_key": DEFAULT_KEY,
    "msg_delimiter": ", ",
    "path_name_key": "$name",
    "upper_first": True,
    "link_to_errors": "errors",
    "link_to_origin_error": None,
    "exclude_errors": [],
    "additional_error_fields": {
        "name": "ValidationError",
        "code": "ERR_DOCUMENT_VALIDATION",
    },
    "additional_context_fields": {},
}

# <kind> : { <context field> : <dotted path into the failure record> }
DEFAULT_ERROR_CONTEXTS = {
    "base": {
        "kind": "kind",
        "path": "path",
    },
    "type": {
        "type": "type",
        "type_name": "type_name",
        "value": "value",
        "string_value": "string_value",
    },
    "min": {
        "value": "value",
        "min": "properties.min",
    },
    "max": {
        "value": "value",
        "max": "properties.max",
    },
    "minlength": {
        "value": "value",
        "min_length": "properties.minlength",
    },
    "maxlength": {
        "value": "value",
        "max_length": "properties.maxlength",
    },
    "regexp": {
        "value": "value",
    },
    "match": {
        "value": "value",
    },
    "enum": {
        "value": "value",
        "enum_values": "properties.enum_values",
        "enum_values_string": "properties.enum_values_string",
    },
    "unique": {
        "value": "value",
        "collection": "collection",
        "index": "index",
        "direction": "direction",
    },
}

DEFAULT_MESSAGE_TEMPLATES = {
    "DEFAULT": "Invalid {path_name}",
    "type": "{path_name} must be a {type_name}",
    "required": "{path_name} is required",
    "min": "{path_name} must not be less than {min}",
    "max": "{path_name} must not be greater than {max}",
    "minlength": "{path_name} must be at least {min_length} characters long",
    "maxlength": "{path_name} must be at most {max_length} characters long",
    "enum": "{path_name} must be one of the following: {enum_values_string}",
    "match": "Invalid {path_name}",
    "regexp": "Invalid {path_name}",
    "unique": "{path_name} {value} has already been used, please choose another",
}

DEFAULT_TYPE_NAMES = {
    "number": "number",
    "boolean": "boolean",
    "date": "date",
    "string": "string",
    "array": "array",
    "object": "object",
    "buffer": "buffer",
    "objectid": "id",
}
