"""
Configuration: options, built-in defaults and the configuration store.
"""

from .loader import load_config_file
from .options import ErrorOptions, normalize_exclusions
from .store import ConfigStore

__all__ = ["ConfigStore", "ErrorOptions", "load_config_file", "normalize_exclusions"]
