"""Qt host: web-view windows, tray and the bridge exposed to pages"""

from .qt_host import HostSignals, QtWindowHost
from .web_bridge import HostBridge
from .web_window import WebWindow, WebWindowHandle

__all__ = [
    "HostSignals",
    "QtWindowHost",
    "HostBridge",
    "WebWindow",
    "WebWindowHandle",
]
