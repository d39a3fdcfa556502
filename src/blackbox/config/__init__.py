"""Configuration: fixed constants plus the read-only settings service"""

from .app_constants import AppInfo, Events, Hotkeys, MenuIds, Paths, Urls, WindowConfig
from .config_defaults import get_default_config
from .config_service import AppSettings, ConfigService, default_settings_path

__all__ = [
    "AppInfo",
    "Events",
    "Hotkeys",
    "MenuIds",
    "Paths",
    "Urls",
    "WindowConfig",
    "get_default_config",
    "AppSettings",
    "ConfigService",
    "default_settings_path",
]
