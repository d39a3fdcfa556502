"""Web-view window

A plain QMainWindow hosting the web UI. Closing the window only hides it;
the app keeps running in the tray.
"""

from typing import Callable, Optional

from PySide6.QtCore import QUrl, Signal
from PySide6.QtGui import QCloseEvent, QColor, QGuiApplication
from PySide6.QtWidgets import QMainWindow, QWidget

from ..core.interfaces.host import IWindowHandle, WindowSpec
from ..utils import app_logger

ViewFactory = Callable[[QWidget], QWidget]
CloseHandler = Callable[[str], bool]


def create_web_view(parent: QWidget) -> QWidget:
    """Default view factory: a QWebEngineView"""
    from PySide6.QtWebEngineWidgets import QWebEngineView

    return QWebEngineView(parent)


def resolve_route(base_url: str, route: str) -> QUrl:
    """Join a frontend route (``/settings?tab=about``) onto the base URL"""
    if not route.startswith("/"):
        route = "/" + route
    return QUrl(base_url.rstrip("/") + route)


class WebWindow(QMainWindow):
    """Window showing one route of the web UI"""

    page_loaded = Signal(bool)

    def __init__(
        self,
        spec: WindowSpec,
        base_url: str,
        view_factory: Optional[ViewFactory] = None,
        close_handler: Optional[CloseHandler] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)

        self.spec = spec
        self._base_url = base_url
        self._close_handler = close_handler
        self._reveal_on_load = False

        self.setWindowTitle(spec.title)
        self.resize(int(spec.dimensions.width), int(spec.dimensions.height))
        self.setStyleSheet(f"QMainWindow {{ background-color: {spec.background_color}; }}")
        if not spec.resizable:
            self.setFixedSize(self.size())

        self._view = (view_factory or create_web_view)(self)
        self.setCentralWidget(self._view)
        self._apply_view_background()

        load_finished = getattr(self._view, "loadFinished", None)
        if load_finished is not None:
            load_finished.connect(self._on_load_finished)

        if spec.center:
            self.center_on_screen()

        self.navigate(spec.route)

    @property
    def label(self) -> str:
        return self.spec.label

    @property
    def view(self) -> QWidget:
        return self._view

    # ==================== Page ====================

    def navigate(self, route: str) -> None:
        url = resolve_route(self._base_url, route)
        self._view.setUrl(url)
        app_logger.log_window_event("Navigate", {"label": self.label, "url": url.toString()})

    def current_url(self) -> str:
        return self._view.url().toString()

    def evaluate(self, script: str) -> None:
        """Run JavaScript in the page, if the view supports it"""
        page = getattr(self._view, "page", None)
        if page is not None:
            page().runJavaScript(script)

    def reveal_when_loaded(self) -> None:
        """Show the window once the page has finished loading"""
        self._reveal_on_load = True

    def cancel_reveal(self) -> None:
        """Drop a pending reveal; an explicit show or hide wins over page load"""
        self._reveal_on_load = False

    def _on_load_finished(self, ok: bool) -> None:
        self.page_loaded.emit(ok)
        if not ok:
            app_logger.warning(
                "Page failed to load",
                context={"label": self.label, "url": self.current_url()},
                component="window",
            )
        if self._reveal_on_load:
            self._reveal_on_load = False
            self.show()
            self.raise_()
            self.activateWindow()

    def _apply_view_background(self) -> None:
        page = getattr(self._view, "page", None)
        if page is not None and hasattr(page(), "setBackgroundColor"):
            page().setBackgroundColor(QColor(self.spec.background_color))

    # ==================== Geometry ====================

    def center_on_screen(self) -> None:
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # ==================== Close handling ====================

    def closeEvent(self, event: QCloseEvent) -> None:
        """Hide instead of closing"""
        self.cancel_reveal()
        veto = self._close_handler(self.label) if self._close_handler else True
        if veto:
            event.ignore()
            if self._close_handler is None:
                self.hide()
        else:
            event.accept()


class WebWindowHandle(IWindowHandle):
    """IWindowHandle over a WebWindow

    A separate adapter because QMainWindow's metaclass cannot be combined
    with ABCMeta.
    """

    def __init__(self, window: WebWindow):
        self._window = window

    @property
    def label(self) -> str:
        return self._window.label

    @property
    def window(self) -> WebWindow:
        return self._window

    def show(self) -> None:
        self._window.cancel_reveal()
        self._window.show()

    def hide(self) -> None:
        self._window.cancel_reveal()
        self._window.hide()

    def set_focus(self) -> None:
        self._window.raise_()
        self._window.activateWindow()

    def is_visible(self) -> bool:
        return self._window.isVisible()

    def navigate(self, route: str) -> None:
        self._window.navigate(route)
