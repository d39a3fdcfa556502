"""System tray widget - Pure UI component

Handles only the visual aspects of the tray icon and its menu.
No business logic or state management.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from PySide6.QtCore import QObject, QRectF, Qt, Signal
from PySide6.QtGui import QAction, QColor, QIcon, QKeySequence, QPainter, QPixmap
from PySide6.QtWidgets import QMenu, QSystemTrayIcon

from ....config.app_constants import AppInfo, Hotkeys, MenuIds
from ....utils import TrayInitializationError, app_logger


@dataclass(frozen=True)
class MenuEntry:
    """One clickable (or disabled) tray menu item"""

    menu_id: Optional[str]
    text: str
    accelerator: Optional[str] = None
    enabled: bool = True


SEPARATOR = None

MenuItem = Union[MenuEntry, None]


def build_menu_layout(version: str = AppInfo.VERSION) -> List[MenuItem]:
    """Tray menu, top to bottom"""
    return [
        MenuEntry(MenuIds.OPEN, "Open Blackbox", Hotkeys.OPEN_ACCELERATOR),
        SEPARATOR,
        MenuEntry(MenuIds.FEEDBACK, "Send us Feedback ↗"),
        MenuEntry(MenuIds.MANUAL, "Manual ↗"),
        MenuEntry(MenuIds.TROUBLESHOOTING, "Troubleshooting ↗"),
        SEPARATOR,
        MenuEntry(MenuIds.SLACK, "Join our Community ↗"),
        MenuEntry(MenuIds.TWITTER, "Follow us on X ↗"),
        MenuEntry(MenuIds.YOUTUBE, "Subscribe to our Channel ↗"),
        SEPARATOR,
        MenuEntry(None, f"Version {version}", enabled=False),
        MenuEntry(MenuIds.ABOUT, "About Blackbox"),
        MenuEntry(MenuIds.UPDATES, "Check for Updates"),
        SEPARATOR,
        MenuEntry(MenuIds.SETTINGS, "Settings...", Hotkeys.SETTINGS_ACCELERATOR),
        MenuEntry(MenuIds.QUIT, "Quit Blackbox", Hotkeys.QUIT_ACCELERATOR),
    ]


def to_key_sequence(accelerator: str) -> QKeySequence:
    """Menu accelerator to QKeySequence; Qt maps Ctrl to Cmd on macOS"""
    text = accelerator.replace("CommandOrControl", "Ctrl").replace("CmdOrCtrl", "Ctrl")
    return QKeySequence(text)


class TrayWidget(QObject):
    """Pure UI component for the system tray

    Responsible only for:
    - Creating and displaying the tray icon
    - Building the context menu
    - Forwarding user interaction
    """

    icon_activated = Signal(object)  # QSystemTrayIcon.ActivationReason
    menu_action_triggered = Signal(str)  # menu item id

    def __init__(self, layout: Optional[List[MenuItem]] = None, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._tray_icon: Optional[QSystemTrayIcon] = None
        self._context_menu: Optional[QMenu] = None
        self._menu_actions: Dict[str, QAction] = {}
        self._layout = layout if layout is not None else build_menu_layout()

        if not QSystemTrayIcon.isSystemTrayAvailable():
            raise TrayInitializationError("System tray is not available on this system")

        try:
            self._setup_tray_icon()
        except Exception as e:
            raise TrayInitializationError(
                f"Failed to build tray menu: {e}", original_exception=e
            ) from e

    def _setup_tray_icon(self) -> None:
        self._tray_icon = QSystemTrayIcon(self._create_icon())
        self._create_context_menu()
        self._tray_icon.setToolTip(AppInfo.TOOLTIP)
        self._tray_icon.activated.connect(self._on_icon_activated)

    def _create_icon(self) -> QIcon:
        """Draw the tray glyph: a rounded dark box with a light inner frame"""
        size = 32
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor(0, 0, 0, 0))

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        outer = QRectF(size * 0.12, size * 0.12, size * 0.76, size * 0.76)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(0x1A, 0x1A, 0x1A))
        painter.drawRoundedRect(outer, size * 0.16, size * 0.16)

        pen = painter.pen()
        pen.setStyle(Qt.PenStyle.SolidLine)
        pen.setColor(QColor(0xF2, 0xF2, 0xF2))
        pen.setWidth(max(2, int(size * 0.07)))
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        inner = outer.adjusted(size * 0.16, size * 0.16, -size * 0.16, -size * 0.16)
        painter.drawRoundedRect(inner, size * 0.06, size * 0.06)

        painter.end()

        icon = QIcon(pixmap)
        # Monochrome template image on the macOS menu bar
        icon.setIsMask(True)
        return icon

    def _create_context_menu(self) -> None:
        self._context_menu = QMenu()

        for item in self._layout:
            if item is SEPARATOR:
                self._context_menu.addSeparator()
                continue

            action = QAction(item.text, self._context_menu)
            action.setEnabled(item.enabled)
            if item.accelerator:
                action.setShortcut(to_key_sequence(item.accelerator))
            if item.menu_id is not None:
                action.triggered.connect(
                    lambda checked=False, menu_id=item.menu_id: self.menu_action_triggered.emit(menu_id)
                )
                self._menu_actions[item.menu_id] = action
            self._context_menu.addAction(action)

        self._tray_icon.setContextMenu(self._context_menu)

    def _on_icon_activated(self, reason) -> None:
        self.icon_activated.emit(reason)

    # ==================== Public UI Interface ====================

    def menu_actions(self) -> Dict[str, QAction]:
        return dict(self._menu_actions)

    def context_menu(self) -> Optional[QMenu]:
        return self._context_menu

    def show(self) -> None:
        if self._tray_icon:
            self._tray_icon.show()

    def hide(self) -> None:
        if self._tray_icon:
            self._tray_icon.hide()

    def is_visible(self) -> bool:
        return self._tray_icon.isVisible() if self._tray_icon else False

    def cleanup(self) -> None:
        if self._tray_icon:
            self._tray_icon.hide()
            self._tray_icon = None

        self._context_menu = None
        self._menu_actions.clear()
        app_logger.log_tray_event("Tray widget cleaned up")
