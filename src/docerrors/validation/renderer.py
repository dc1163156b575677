"""
Template selection and rendering for a single failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..config.options import ErrorOptions
from ..config.store import ConfigStore
from ..templating import compile
from .context import ErrorContext
from .failures import FailureKind


@dataclass(frozen=True)
class RenderedMessage:
    message: str
    context: Dict[str, Any]
    template: str

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "context": dict(self.context), "template": self.template}


def select_template(package: str, context: ErrorContext, store: ConfigStore) -> str:
    # A custom validator's own message is authoritative.
    if context.kind == FailureKind.VALIDATE.value:
        return context.failure.message
    return store.template_for(package, context.kind) or ""


def render(
    package: str,
    context: ErrorContext,
    store: ConfigStore,
    options: ErrorOptions | None = None,
) -> RenderedMessage:
    options = options or store.options
    template = select_template(package, context, store)
    message = compile(template, context.values)
    if options.upper_first:
        message = upper_first(message)
    return RenderedMessage(message=message, context=context.to_dict(), template=template)


def upper_first(text: str) -> str:
    """
    Uppercase the first character only when it is an ASCII lowercase letter;
    any other first character, including non-Latin letters, is kept.
    """
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text
