"""
Model handle inspection for document mappers.
"""

from .model import ModelHandle, ModelInfo, inspect_model, is_model, resolve_model_name

__all__ = [
    "ModelHandle",
    "ModelInfo",
    "inspect_model",
    "is_model",
    "resolve_model_name",
]
