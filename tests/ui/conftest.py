"""UI test configuration and fixtures

Web views are replaced by FakeWebView so tests never start a browser
engine; the tray icon class is swapped for one that reports a tray as
available on headless CI.
"""

import pytest
from PySide6.QtCore import QUrl, Signal
from PySide6.QtWidgets import QSystemTrayIcon, QWidget

from blackbox.ui.components.system_tray import tray_widget as tray_widget_module


@pytest.fixture(scope="session")
def qapp_args():
    """Run Qt without a display"""
    return ["--platform", "offscreen"]


# ============= Fake web view =============

class FakePage:
    """Stands in for QWebEnginePage"""

    def __init__(self):
        self.scripts = []
        self.background = None

    def runJavaScript(self, script):
        self.scripts.append(script)

    def setBackgroundColor(self, color):
        self.background = color


class FakeWebView(QWidget):
    """QWebEngineView look-alike: url, page() and loadFinished"""

    loadFinished = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._url = QUrl()
        self._page = FakePage()
        self.loaded_urls = []

    def setUrl(self, url):
        self._url = QUrl(url)
        self.loaded_urls.append(self._url.toString())

    def url(self):
        return self._url

    def page(self):
        return self._page

    def finish_load(self, ok=True):
        self.loadFinished.emit(ok)


@pytest.fixture
def fake_view_factory():
    return FakeWebView


# ============= System tray =============

class AvailableTrayIcon(QSystemTrayIcon):
    @staticmethod
    def isSystemTrayAvailable():
        return True


class UnavailableTrayIcon(QSystemTrayIcon):
    @staticmethod
    def isSystemTrayAvailable():
        return False


@pytest.fixture
def tray_available(monkeypatch, qapp):
    monkeypatch.setattr(tray_widget_module, "QSystemTrayIcon", AvailableTrayIcon)


@pytest.fixture
def tray_unavailable(monkeypatch, qapp):
    monkeypatch.setattr(tray_widget_module, "QSystemTrayIcon", UnavailableTrayIcon)
