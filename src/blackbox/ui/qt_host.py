"""Qt implementation of the window host"""

import json
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QApplication, QWidget

from ..core.interfaces.host import IWindowHandle, IWindowHost, WindowSpec
from ..utils import WindowOperationError, app_logger
from .web_bridge import HostBridge, attach_bridge
from .web_window import (
    CloseHandler,
    ViewFactory,
    WebWindow,
    WebWindowHandle,
    create_web_view,
)


class HostSignals(QObject):
    """Qt-side notifications from the host"""

    event_emitted = Signal(str, object)
    window_created = Signal(str)


class QtWindowHost(IWindowHost):
    """Window registry backed by WebWindow instances

    Windows are created hidden and reveal themselves once their page has
    loaded. They are never destroyed while the app runs.
    """

    def __init__(
        self,
        base_url: str,
        view_factory: Optional[ViewFactory] = None,
        reveal_on_load: bool = True,
    ):
        self._base_url = base_url
        self._view_factory = view_factory
        self._reveal_on_load = reveal_on_load
        self._windows: Dict[str, WebWindow] = {}
        self._close_handler: Optional[CloseHandler] = None
        self.signals = HostSignals()
        self.bridge = HostBridge(self.open_external_url)

    def set_close_handler(self, handler: Optional[CloseHandler]) -> None:
        """Route window close requests (normally to the dispatcher)"""
        self._close_handler = handler

    # ==================== IWindowHost ====================

    def get_window(self, label: str) -> Optional[IWindowHandle]:
        window = self._windows.get(label)
        return WebWindowHandle(window) if window is not None else None

    def create_window(self, spec: WindowSpec) -> IWindowHandle:
        if spec.label in self._windows:
            raise WindowOperationError(
                f"Window '{spec.label}' already exists", label=spec.label
            )
        if not spec.dimensions.is_valid():
            raise WindowOperationError(
                f"Invalid dimensions for window '{spec.label}'",
                label=spec.label,
                context={"width": spec.dimensions.width, "height": spec.dimensions.height},
            )

        window = WebWindow(
            spec,
            self._base_url,
            view_factory=self._make_view,
            close_handler=self._on_close_requested,
        )
        self._windows[spec.label] = window

        if spec.visible:
            window.show()
        elif self._reveal_on_load:
            window.reveal_when_loaded()

        app_logger.log_window_event(
            "Window created",
            {
                "label": spec.label,
                "route": spec.route,
                "width": spec.dimensions.width,
                "height": spec.dimensions.height,
            },
        )
        self.signals.window_created.emit(spec.label)
        return WebWindowHandle(window)

    def open_external_url(self, url: str) -> None:
        if not QDesktopServices.openUrl(QUrl(url)):
            raise WindowOperationError(f"Could not open URL: {url}", label="browser")
        app_logger.log_window_event("Opened external URL", {"url": url})

    def exit(self, code: int = 0) -> None:
        app_logger.log_shutdown(code)
        QApplication.exit(code)

    def emit(self, event: str, payload: Any = None) -> None:
        script = (
            f"window.dispatchEvent(new CustomEvent({json.dumps(event)}, "
            f"{{ detail: {json.dumps(payload)} }}));"
        )
        for window in self._windows.values():
            window.evaluate(script)
        self.signals.event_emitted.emit(event, payload)

    # ==================== Helpers ====================

    def windows(self) -> Dict[str, WebWindow]:
        return dict(self._windows)

    def _make_view(self, parent: QWidget) -> QWidget:
        if self._view_factory is not None:
            return self._view_factory(parent)

        view = create_web_view(parent)
        attach_bridge(view, self.bridge)
        return view

    def _on_close_requested(self, label: str) -> bool:
        if self._close_handler is None:
            window = self._windows.get(label)
            if window is not None:
                window.hide()
            return True
        return self._close_handler(label)
