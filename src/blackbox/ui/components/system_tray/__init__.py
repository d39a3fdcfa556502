"""System tray component module

Separates tray rendering (TrayWidget) from event routing (TrayController).
"""

from .tray_controller import TrayController
from .tray_widget import MenuEntry, SEPARATOR, TrayWidget, build_menu_layout

__all__ = [
    "TrayWidget",
    "TrayController",
    "MenuEntry",
    "SEPARATOR",
    "build_menu_layout",
]
