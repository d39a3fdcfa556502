"""Read-only configuration service

Settings are written by the web UI; the shell only reads them. Keys are
looked up with dotted paths (``"logging.level"``) against the file merged
over the defaults.
"""

import copy
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TypeVar, Union

from ..utils import ConfigurationError, app_logger, get_app_data_dir
from .app_constants import Hotkeys, Paths
from .config_defaults import get_default_config

T = TypeVar("T")

APPEARANCES = ("light", "dark", "system")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


@dataclass(frozen=True)
class AppSettings:
    """User settings shared with the web UI"""

    launch_at_login: bool = False
    hotkey: str = Hotkeys.DEFAULT
    show_in_menu_bar: bool = True
    appearance: str = "system"


def default_settings_path() -> Path:
    return get_app_data_dir() / Paths.SETTINGS_FILE_NAME


class ConfigService:
    """Configuration reader"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Args:
            config_path: Settings file; defaults to the per-user location
        """
        self.config_path = Path(config_path) if config_path else default_settings_path()
        self._default_config = get_default_config()
        self._config: Dict[str, Any] = copy.deepcopy(self._default_config)

    def load_config(self) -> bool:
        """Load settings from disk

        A missing file is not an error. An unreadable file leaves the
        defaults in place.

        Returns:
            True if the defaults or the file were applied cleanly
        """
        if not self.config_path.exists():
            self._config = copy.deepcopy(self._default_config)
            app_logger.log_config_event(
                "Using default configuration", {"config_path": str(self.config_path)}
            )
            return True

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ConfigurationError(
                    "Settings file must contain a JSON object",
                    context={"config_path": str(self.config_path)},
                )
        except (OSError, ValueError, ConfigurationError) as e:
            app_logger.warning(
                "Failed to read settings, using defaults",
                context={"config_path": str(self.config_path), "error": str(e)},
                component="config",
            )
            self._config = copy.deepcopy(self._default_config)
            return False

        self._config = self._merge_configs(self._default_config, self._normalize_keys(loaded))
        app_logger.log_config_event(
            "Configuration loaded",
            {"config_path": str(self.config_path), "keys_loaded": len(loaded)},
        )
        return True

    def get_setting(self, key: str, default: Optional[T] = None) -> T:
        """Get a setting by dotted key

        Args:
            key: Dotted path, e.g. "ui.frontend_url"
            default: Value returned when the key is missing

        Returns:
            The setting value or ``default``
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def get_all_settings(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def get_app_settings(self) -> AppSettings:
        """Typed view of the user settings, with invalid values replaced by defaults"""
        defaults = AppSettings()

        hotkey = self.get_setting("hotkey", defaults.hotkey)
        if not isinstance(hotkey, str) or not hotkey.strip():
            app_logger.warning(
                "Invalid hotkey setting, using default",
                context={"hotkey": hotkey},
                component="config",
            )
            hotkey = defaults.hotkey

        appearance = self.get_setting("appearance", defaults.appearance)
        if appearance not in APPEARANCES:
            app_logger.warning(
                "Invalid appearance setting, using default",
                context={"appearance": appearance},
                component="config",
            )
            appearance = defaults.appearance

        return AppSettings(
            launch_at_login=self._get_bool("launch_at_login", defaults.launch_at_login),
            hotkey=hotkey.strip(),
            show_in_menu_bar=self._get_bool("show_in_menu_bar", defaults.show_in_menu_bar),
            appearance=appearance,
        )

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.get_setting(key, default)
        if not isinstance(value, bool):
            app_logger.warning(
                f"Invalid {key} setting, using default",
                context={key: value},
                component="config",
            )
            return default
        return value

    def _normalize_keys(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Accept the web UI's camelCase keys alongside snake_case"""
        result: Dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                value = self._normalize_keys(value)
            result[_to_snake_case(key)] = value
        return result

    def _merge_configs(
        self, default: Dict[str, Any], loaded: Dict[str, Any]
    ) -> Dict[str, Any]:
        result = copy.deepcopy(default)

        def merge_recursive(base: Dict[str, Any], update: Dict[str, Any]) -> None:
            for key, value in update.items():
                if (
                    key in base
                    and isinstance(base[key], dict)
                    and isinstance(value, dict)
                ):
                    merge_recursive(base[key], value)
                else:
                    base[key] = value

        merge_recursive(result, loaded)
        return result
