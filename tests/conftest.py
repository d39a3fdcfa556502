"""pytest configuration and shared fixtures"""
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Headless Qt for every test session
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blackbox.core.interfaces.host import IWindowHandle, IWindowHost
from blackbox.utils import logger


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path):
    """Keep test runs out of the real per-user log file"""
    previous = logger.get_log_file()
    logger.set_log_file(tmp_path / "app.log")
    yield tmp_path / "app.log"
    logger.set_log_file(previous)


# ============= Host mocks =============

@pytest.fixture
def mock_host():
    """Host with no windows"""
    host = MagicMock(spec=IWindowHost)
    host.get_window.return_value = None
    return host


@pytest.fixture
def make_window():
    """Factory for mocked window handles"""
    def _make(label="main", visible=True):
        window = MagicMock(spec=IWindowHandle)
        window.label = label
        if isinstance(visible, Exception):
            window.is_visible.side_effect = visible
        else:
            window.is_visible.return_value = visible
        return window

    return _make


@pytest.fixture
def host_with_windows(mock_host):
    """Install windows on mock_host: host_with_windows(main=window, ...)"""
    def _install(**windows):
        mock_host.get_window.side_effect = lambda label: windows.get(label)
        return mock_host

    return _install
