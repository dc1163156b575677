"""
Exception hierarchy for docerrors.
"""

from __future__ import annotations

from typing import Any


class DocErrorsError(Exception):
    """Base class for errors raised by docerrors itself."""


class InvalidArgument(DocErrorsError, ValueError):
    """Raised when a setter or option receives an empty or malformed value."""


class ConfigFileError(InvalidArgument):
    """Raised when a configuration file cannot be read or applied."""


class UnsupportedModel(DocErrorsError, TypeError):
    """Raised when an object is not a recognizable model handle."""


class UnsupportedFailureShape(DocErrorsError):
    """
    Raised when a failure record is neither a leaf nor an aggregate.

    The pipeline never lets this escape; it hands back the original error.
    """

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Unsupported validation failure shape: {type(raw).__name__}")
