"""
Validation error pipeline: classify, build contexts, render and aggregate.
"""

from __future__ import annotations

import copy
import inspect
from typing import Any, List, Optional

from ..config.store import ConfigStore
from ..core.model import is_model
from ..exceptions import UnsupportedFailureShape, UnsupportedModel
from ..utils import get_logger, time_call
from .classifier import classify
from .context import build_context
from .errors import FriendlyValidationError
from .renderer import RenderedMessage, render

logger = get_logger("validation.pipeline")


def handle_validation_error(
    model: Any,
    error: Any,
    *,
    store: ConfigStore,
    package: Optional[str] = None,
    exclude_errors: Any = None,
) -> Any:
    """
    Turn a mapper validation error into a :class:`FriendlyValidationError`.

    Returns ``error`` itself when its shape is not understood, and ``None``
    when every failure was excluded.
    """
    try:
        classification = classify(model, error, store, package=package, exclude_errors=exclude_errors)
    except UnsupportedFailureShape:
        return error

    options = store.options
    call = classification.options
    rendered: List[RenderedMessage] = []

    with time_call(
        "handle_validation_error",
        logger,
        model=classification.model.name,
        shape=classification.shape.value,
    ):
        for failure in classification.failures:
            context = build_context(classification.model, failure, call.package, store, options)
            if context.kind in call.exclude_errors or failure.kind in call.exclude_errors:
                logger.debug("Excluded '%s' failure on path '%s'", context.kind, failure.path)
                continue
            rendered.append(render(call.package, context, store, options))

    if not rendered:
        return None

    fields = copy.deepcopy(options.additional_error_fields)
    if options.link_to_errors:
        fields[options.link_to_errors] = [item.to_dict() for item in rendered]
    if options.link_to_origin_error:
        fields[options.link_to_origin_error] = error

    return FriendlyValidationError(
        [item.message for item in rendered],
        delimiter=options.msg_delimiter,
        model_name=classification.model.name,
        options=call.to_dict(),
        fields=fields,
    )


async def validate_document(
    document: Any,
    *,
    store: ConfigStore,
    package: Optional[str] = None,
    exclude_errors: Any = None,
) -> Any:
    """
    Validate ``document`` through its own ``validate()`` and translate the
    outcome. ``validate()`` may return or raise the failure, and may be a
    coroutine. Resolves to ``None`` when the document is valid.
    """
    model = type(document)
    validate = getattr(document, "validate", None)
    if document is None or not is_model(model) or not callable(validate):
        raise UnsupportedModel(f"Param 'document' expects a model document, received {document!r}")

    raised = False
    try:
        outcome = validate()
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as exc:
        outcome = exc
        raised = True

    if outcome is None or outcome is True:
        return None

    result = handle_validation_error(
        model, outcome, store=store, package=package, exclude_errors=exclude_errors
    )
    if raised and result is outcome:
        raise outcome
    return result
