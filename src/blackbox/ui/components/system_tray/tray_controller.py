"""System tray controller - Business logic component

Connects the tray widget's raw events to the action dispatcher:
- Left click on the icon toggles the main window
- Menu items are classified and dispatched by id
"""

from typing import Optional

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QSystemTrayIcon

from ....core.dispatcher import ActionDispatcher
from ....core.menu_actions import MenuAction
from ....utils import app_logger
from .tray_widget import TrayWidget


class TrayController(QObject):
    """System tray controller

    Note: Inherits from QObject for signal wiring and implements the
    start/stop lifecycle by hand; QObject's metaclass does not mix with
    ABCMeta.
    """

    def __init__(
        self,
        dispatcher: ActionDispatcher,
        widget: Optional[TrayWidget] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        self._component_name = "tray_controller"
        self._is_running = False
        self._dispatcher = dispatcher
        self._tray_widget = widget

    # ==================== Lifecycle ====================

    def start(self) -> None:
        """Build (if needed) and show the tray

        Raises:
            TrayInitializationError: The tray or its menu could not be
                built. Fatal at startup.
        """
        if self._is_running:
            return

        if self._tray_widget is None:
            self._tray_widget = TrayWidget()

        self._tray_widget.icon_activated.connect(self._on_icon_activated)
        self._tray_widget.menu_action_triggered.connect(self._on_menu_action)
        self._tray_widget.show()

        self._is_running = True
        app_logger.log_tray_event("Tray started", {"component": self._component_name})

    def stop(self) -> None:
        if not self._is_running:
            return

        if self._tray_widget:
            self._tray_widget.icon_activated.disconnect(self._on_icon_activated)
            self._tray_widget.menu_action_triggered.disconnect(self._on_menu_action)
            self._tray_widget.cleanup()
            self._tray_widget = None

        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def widget(self) -> Optional[TrayWidget]:
        return self._tray_widget

    # ==================== Event Handling ====================

    def _on_icon_activated(self, reason) -> None:
        app_logger.log_tray_event(
            "Tray icon activated", {"reason": reason, "component": self._component_name}
        )
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._dispatcher.handle_tray_click()

    def _on_menu_action(self, menu_id: str) -> MenuAction:
        return self._dispatcher.handle_menu_event(menu_id)
