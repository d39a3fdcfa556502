"""Interfaces between the core and the host framework"""

from .host import (
    MAIN_WINDOW,
    SETTINGS_WINDOW,
    IWindowHandle,
    IWindowHost,
    WindowSpec,
)

__all__ = [
    "MAIN_WINDOW",
    "SETTINGS_WINDOW",
    "IWindowHandle",
    "IWindowHost",
    "WindowSpec",
]
