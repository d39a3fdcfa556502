"""Commands exposed to the web UI over QWebChannel

Pages reach this object as ``channel.objects.blackbox`` after loading
``qwebchannel.js``.
"""

from typing import Callable

from PySide6.QtCore import QObject, QUrl, Slot

from ..config.app_constants import AppInfo
from ..utils import app_logger

BRIDGE_NAME = "blackbox"

_ALLOWED_SCHEMES = ("http", "https")


class HostBridge(QObject):
    """Slots callable from JavaScript"""

    def __init__(self, open_url: Callable[[str], None], parent=None):
        super().__init__(parent)
        self._open_url = open_url

    @Slot(result=str)
    def getAppVersion(self) -> str:
        return AppInfo.VERSION

    @Slot(str, result=bool)
    def openExternalUrl(self, url: str) -> bool:
        """Open a link in the default browser

        Returns:
            False for non-http(s) URLs or when opening failed
        """
        if QUrl(url).scheme().lower() not in _ALLOWED_SCHEMES:
            app_logger.warning(
                "Refusing to open non-web URL", context={"url": url}, component="bridge"
            )
            return False

        try:
            self._open_url(url)
        except Exception as e:
            app_logger.log_error(e, "bridge_open_external_url")
            return False
        return True


def attach_bridge(view, bridge: HostBridge) -> None:
    """Register ``bridge`` on a QWebEngineView's page"""
    from PySide6.QtWebChannel import QWebChannel

    page = view.page()
    channel = QWebChannel(page)
    channel.registerObject(BRIDGE_NAME, bridge)
    page.setWebChannel(channel)
