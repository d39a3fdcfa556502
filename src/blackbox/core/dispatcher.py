"""Event dispatch

Turns raw host events (menu item ids, tray clicks, hotkeys, close
requests) into ``MenuAction``/``WindowAction`` decisions and performs
exactly one host primitive per event. Every host call is best-effort:
failures are logged and dropped, never retried.
"""

from dataclasses import replace
from typing import Any, Callable, Optional

from ..config.app_constants import Events, WindowConfig
from ..utils import LogCategory, app_logger
from .hotkeys import HotkeyBinding, Shortcut
from .interfaces.host import (
    MAIN_WINDOW,
    SETTINGS_WINDOW,
    IWindowHandle,
    IWindowHost,
    WindowSpec,
)
from .menu_actions import MenuAction
from .window_state import WindowAction, WindowVisibility


class ActionDispatcher:
    """Applies decisions to the host window registry"""

    def __init__(self, host: IWindowHost, hotkey: Optional[HotkeyBinding] = None):
        self._host = host
        self._hotkey = hotkey

    @property
    def hotkey(self) -> Optional[HotkeyBinding]:
        return self._hotkey

    def set_hotkey(self, hotkey: Optional[HotkeyBinding]) -> None:
        self._hotkey = hotkey

    # ==================== Entry points ====================

    def handle_menu_event(self, menu_id: str) -> MenuAction:
        """Handle a tray menu click

        Args:
            menu_id: Raw id of the clicked item

        Returns:
            The classified action
        """
        action = MenuAction.from_id(menu_id)
        app_logger.log_menu_event(menu_id, action)

        url = action.get_url()
        if url is not None:
            self._best_effort("open_external_url", self._host.open_external_url, url)
            return action

        if action is MenuAction.OPEN:
            self.toggle_main_window()
        elif action is MenuAction.SETTINGS:
            self.show_or_create_window(SETTINGS_WINDOW)
        elif action is MenuAction.ABOUT:
            self.show_or_create_window(
                SETTINGS_WINDOW, route=WindowConfig.ABOUT_ROUTE, navigate=True
            )
        elif action is MenuAction.CHECK_UPDATES:
            # Update checking itself lives in the web UI
            self._best_effort("emit_check_updates", self._host.emit, Events.CHECK_UPDATES, None)
        elif action.should_exit():
            self._best_effort("exit", self._host.exit, 0)
        else:
            app_logger.debug(
                "Ignoring unknown menu id",
                LogCategory.MENU,
                context={"menu_id": menu_id},
                component="menu",
            )

        return action

    def handle_tray_click(self) -> WindowAction:
        return self.toggle_main_window()

    def handle_hotkey(self, shortcut: Shortcut, pressed: bool = True) -> Optional[WindowAction]:
        """Handle a global hotkey event

        Only presses of the configured combination act; releases and other
        shortcuts are ignored.
        """
        if not pressed or self._hotkey is None or not self._hotkey.matches(shortcut):
            return None

        app_logger.log_hotkey_event(str(shortcut), "toggle_main_window")
        return self.toggle_main_window()

    def handle_close_request(self, label: str) -> bool:
        """Convert a window close request into a hide

        Returns:
            True, meaning the close must be vetoed; the window is never
            destroyed so the app keeps running in the tray.
        """
        window = self._get_window(label)
        if window is not None:
            self._best_effort(f"hide_{label}", window.hide)
        app_logger.log_window_event("Close request converted to hide", {"label": label})
        return True

    # ==================== Window operations ====================

    def toggle_main_window(self) -> WindowAction:
        """Create, show or hide the main window depending on its current state"""
        return self.toggle_window(MAIN_WINDOW)

    def toggle_window(self, spec: WindowSpec) -> WindowAction:
        window = self._get_window(spec.label)
        current = self._query_visibility(window) if window is not None else None
        action = WindowAction.determine(window is not None, current)

        app_logger.log_window_event(
            "Window action resolved",
            {"label": spec.label, "visible": current, "action": repr(action)},
        )

        if action.is_create:
            self._best_effort(f"create_{spec.label}", self._host.create_window, spec)
        elif action.visibility is WindowVisibility.VISIBLE:
            self._show_and_focus(window)
        else:
            self._best_effort(f"hide_{spec.label}", window.hide)

        return action

    def show_or_create_window(
        self, spec: WindowSpec, route: Optional[str] = None, navigate: bool = False
    ) -> None:
        """Show an existing window or build it

        Args:
            spec: Window to show
            route: Route to load; defaults to ``spec.route``
            navigate: Navigate an already existing window to ``route``
                before showing it
        """
        route = route or spec.route
        window = self._get_window(spec.label)

        if window is not None:
            if navigate:
                self._best_effort(f"navigate_{spec.label}", window.navigate, route)
            self._show_and_focus(window)
            return

        if route != spec.route:
            spec = replace(spec, route=route)
        self._best_effort(f"create_{spec.label}", self._host.create_window, spec)

    # ==================== Helpers ====================

    def _show_and_focus(self, window: IWindowHandle) -> None:
        self._best_effort(f"show_{window.label}", window.show)
        self._best_effort(f"focus_{window.label}", window.set_focus)

    def _get_window(self, label: str) -> Optional[IWindowHandle]:
        return self._best_effort(f"get_window_{label}", self._host.get_window, label)

    def _query_visibility(self, window: IWindowHandle) -> Optional[bool]:
        try:
            return bool(window.is_visible())
        except Exception as e:
            app_logger.log_error(e, f"query_visibility_{window.label}")
            return None

    def _best_effort(self, context: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as e:
            app_logger.log_error(e, context)
            return None
