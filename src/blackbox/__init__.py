"""Blackbox - menu-bar shell

Tray icon, dropdown menu and window show/hide logic around an embedded
web UI.
"""

__version__ = "0.1.0"
__author__ = "Blackbox Team"
__description__ = "Blackbox"

__all__ = ["__version__"]
