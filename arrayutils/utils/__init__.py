"""Utility exports."""

from .config import ArrayUtilsConfig, get_config, set_config
from .logging import get_logger
from .validation import ensure_callable, ensure_mutable, like_input

__all__ = [
    "ArrayUtilsConfig",
    "get_config",
    "set_config",
    "get_logger",
    "ensure_callable",
    "ensure_mutable",
    "like_input",
]
