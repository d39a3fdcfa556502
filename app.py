#!/usr/bin/env python3
"""
Blackbox - Application Entry Point

Runs the menu-bar app straight from a source checkout.

Usage:
  python app.py                      # Start in the tray
  python app.py --dev                # Verbose console logging
  python app.py --frontend-url URL   # Point windows at another web UI
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from blackbox.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
