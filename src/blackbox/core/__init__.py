"""Decision core: window visibility, menu actions and event dispatch

Nothing here imports Qt; ``hotkey_listener`` loads pynput only when started.
"""

from .dispatcher import ActionDispatcher
from .hotkeys import HotkeyBinding, Shortcut
from .menu_actions import MenuAction
from .window_state import (
    WindowAction,
    WindowActionKind,
    WindowDimensions,
    WindowVisibility,
    handle_tray_click,
)

__all__ = [
    "ActionDispatcher",
    "HotkeyBinding",
    "Shortcut",
    "MenuAction",
    "WindowAction",
    "WindowActionKind",
    "WindowDimensions",
    "WindowVisibility",
    "handle_tray_click",
]
