"""Configuration: INI file reader and typed window settings."""

from .ini_config_service import IniConfigService
from .window_config import WindowConfig

__all__ = ["IniConfigService", "WindowConfig"]
