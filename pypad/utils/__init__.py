"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    MAX_RECENTS,
    SETTINGS_PREVIEW_VISIBLE,
    SETTINGS_RECENTS,
    UNTITLED,
)
from .logging_setup import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "UNTITLED",
    "SETTINGS_RECENTS",
    "SETTINGS_PREVIEW_VISIBLE",
    "MAX_RECENTS",
    "configure_logging",
]
