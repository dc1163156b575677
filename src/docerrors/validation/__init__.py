"""
Validation error translation exposed at the package level.
"""

from .classifier import CallOptions, Classification, FailureShape, classify, split_failures
from .context import ErrorContext, build_context, resolve_path_name
from .errors import FriendlyValidationError
from .failures import FailureKind, ValidationFailure
from .pipeline import handle_validation_error, validate_document
from .renderer import RenderedMessage, render, upper_first

__all__ = [
    "CallOptions",
    "Classification",
    "ErrorContext",
    "FailureKind",
    "FailureShape",
    "FriendlyValidationError",
    "RenderedMessage",
    "ValidationFailure",
    "build_context",
    "classify",
    "handle_validation_error",
    "render",
    "resolve_path_name",
    "split_failures",
    "upper_first",
    "validate_document",
]
