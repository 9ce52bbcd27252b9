"""Utility helpers shared across the abbs-l10n-sync codebase."""

from .config import AppConfig, load_config
from .logging import configure_logging, get_logger
from .paths import contains_fragment, resolve_start

__all__ = [
    "AppConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "contains_fragment",
    "resolve_start",
]
