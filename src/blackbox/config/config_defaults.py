"""Default settings"""

from typing import Dict, Any

from .app_constants import Hotkeys, WindowConfig


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration

    Returns:
        Default configuration dictionary
    """
    return {
        "launch_at_login": False,
        "hotkey": Hotkeys.DEFAULT,
        "show_in_menu_bar": True,
        "appearance": "system",  # "light", "dark" or "system"
        "ui": {
            "frontend_url": WindowConfig.DEFAULT_FRONTEND_URL,
        },
        "logging": {
            "level": "INFO",
            "console_output": False,
        },
    }
