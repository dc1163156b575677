"""
Utility helpers shared across docerrors packages.
"""

from .logging import configure_logging, get_logger, time_call
from .lookup import get_field, get_path
from .naming import camel_to_snake, with_snake_aliases

__all__ = [
    "camel_to_snake",
    "configure_logging",
    "get_field",
    "get_logger",
    "get_path",
    "time_call",
    "with_snake_aliases",
]
