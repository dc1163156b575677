"""
Message template rendering.
"""

from .engine import (
    DUPLICATE_KEY_TEMPLATE,
    DUPLICATE_KEY_TEMPLATES,
    INDEX_TEMPLATE,
    compile,
    decompile,
)

__all__ = [
    "DUPLICATE_KEY_TEMPLATE",
    "DUPLICATE_KEY_TEMPLATES",
    "INDEX_TEMPLATE",
    "compile",
    "decompile",
]
