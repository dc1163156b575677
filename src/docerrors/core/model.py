"""
Model-handle inspection.

docerrors never defines documents itself. A model handle is whatever the
document mapper exposes for a collection: an object carrying a ``schema``
descriptor (nested mapping of field name to field options) and a name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from ..exceptions import UnsupportedModel
from ..utils.lookup import get_field, get_path


@runtime_checkable
class ModelHandle(Protocol):
    schema: Mapping[str, Any]


@dataclass(frozen=True)
class ModelInfo:
    """
    Resolved name and schema descriptor of a model handle.
    """

    model: Any
    name: str
    schema: Mapping[str, Any]


def resolve_model_name(model: Any) -> Optional[str]:
    """
    Name lookup order: ``model_name``, ``name``, ``collection.name`` and
    finally the class ``__name__``. Plain strings name themselves.
    """
    if isinstance(model, str):
        return model or None
    if model is None:
        return None
    for attribute in ("model_name", "name"):
        value = get_field(model, attribute)
        if isinstance(value, str) and value:
            return value
    collection_name = get_path(model, "collection.name")
    if isinstance(collection_name, str) and collection_name:
        return collection_name
    name = getattr(model, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return None


def is_model(model: Any) -> bool:
    if model is None or isinstance(model, (str, bytes, Mapping)):
        return False
    if not isinstance(model, ModelHandle) or not isinstance(model.schema, Mapping):
        return False
    return resolve_model_name(model) is not None


def inspect_model(model: Any) -> ModelInfo:
    if not is_model(model):
        raise UnsupportedModel(f"Parameter 'model' expects a model handle, received {model!r}")
    return ModelInfo(model=model, name=resolve_model_name(model), schema=model.schema)
