"""System tray widget and controller tests"""

from unittest.mock import MagicMock

import pytest
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QSystemTrayIcon

from blackbox import __version__
from blackbox.ui.components.system_tray import TrayController, TrayWidget
from blackbox.ui.components.system_tray.tray_widget import (
    SEPARATOR,
    MenuEntry,
    build_menu_layout,
    to_key_sequence,
)
from blackbox.utils import TrayInitializationError

MENU_IDS = [
    "open",
    "feedback",
    "manual",
    "troubleshooting",
    "slack",
    "twitter",
    "youtube",
    "about",
    "updates",
    "settings",
    "quit",
]


@pytest.fixture
def widget(tray_available):
    widget = TrayWidget()
    yield widget
    widget.cleanup()


class TestMenuLayout:
    """Static menu description"""

    def test_order_of_ids(self):
        ids = [item.menu_id for item in build_menu_layout() if item is not SEPARATOR and item.menu_id]

        assert ids == MENU_IDS

    def test_separators(self):
        layout = build_menu_layout()

        assert layout.count(SEPARATOR) == 4
        assert layout[0] is not SEPARATOR and layout[-1] is not SEPARATOR

    def test_version_entry_is_disabled(self):
        version = [item for item in build_menu_layout("1.2.3") if item and item.menu_id is None]

        assert version == [MenuEntry(None, "Version 1.2.3", enabled=False)]

    def test_accelerators(self):
        accelerators = {
            item.menu_id: item.accelerator
            for item in build_menu_layout()
            if item is not SEPARATOR and item.accelerator
        }

        assert accelerators == {
            "open": "CmdOrCtrl+Space",
            "settings": "CmdOrCtrl+,",
            "quit": "CmdOrCtrl+Q",
        }

    def test_to_key_sequence(self):
        assert to_key_sequence("CmdOrCtrl+Q") == QKeySequence("Ctrl+Q")
        assert to_key_sequence("CommandOrControl+Space") == QKeySequence("Ctrl+Space")


class TestTrayWidget:
    """Qt tray icon and menu"""

    def test_unavailable_tray_raises(self, tray_unavailable):
        with pytest.raises(TrayInitializationError) as exc_info:
            TrayWidget()

        assert exc_info.value.is_fatal()

    def test_menu_actions_by_id(self, widget):
        assert list(widget.menu_actions()) == MENU_IDS

    def test_context_menu_contents(self, widget):
        actions = widget.context_menu().actions()
        separators = [a for a in actions if a.isSeparator()]
        disabled = [a for a in actions if not a.isSeparator() and not a.isEnabled()]

        assert len(actions) == len(MENU_IDS) + 1 + 4
        assert len(separators) == 4
        assert [a.text() for a in disabled] == [f"Version {__version__}"]

    def test_shortcuts(self, widget):
        actions = widget.menu_actions()

        assert actions["open"].shortcut() == QKeySequence("Ctrl+Space")
        assert actions["quit"].shortcut() == QKeySequence("Ctrl+Q")
        assert actions["feedback"].shortcut().isEmpty()

    @pytest.mark.parametrize("menu_id", MENU_IDS)
    def test_trigger_emits_menu_id(self, qtbot, widget, menu_id):
        with qtbot.waitSignal(widget.menu_action_triggered) as blocker:
            widget.menu_actions()[menu_id].trigger()

        assert blocker.args == [menu_id]

    def test_show_and_cleanup(self, tray_available):
        widget = TrayWidget()
        widget.show()
        widget.cleanup()

        assert widget.is_visible() is False
        assert widget.menu_actions() == {}


class TestTrayController:
    """Tray events to dispatcher calls"""

    @pytest.fixture
    def dispatcher(self):
        return MagicMock()

    @pytest.fixture
    def controller(self, dispatcher, widget):
        controller = TrayController(dispatcher, widget)
        controller.start()
        yield controller
        controller.stop()

    def test_start(self, controller, widget):
        assert controller.is_running
        assert controller.widget is widget

    def test_left_click_toggles_main_window(self, controller, widget, dispatcher):
        widget.icon_activated.emit(QSystemTrayIcon.ActivationReason.Trigger)

        dispatcher.handle_tray_click.assert_called_once_with()

    @pytest.mark.parametrize(
        "reason",
        [QSystemTrayIcon.ActivationReason.Context, QSystemTrayIcon.ActivationReason.DoubleClick],
    )
    def test_other_activations_are_ignored(self, controller, widget, dispatcher, reason):
        widget.icon_activated.emit(reason)

        dispatcher.handle_tray_click.assert_not_called()

    def test_menu_item_is_dispatched(self, controller, widget, dispatcher):
        widget.menu_actions()["settings"].trigger()

        dispatcher.handle_menu_event.assert_called_once_with("settings")

    def test_stop_releases_widget(self, dispatcher, tray_available):
        controller = TrayController(dispatcher)
        controller.start()

        controller.stop()

        assert controller.is_running is False
        assert controller.widget is None

    def test_start_fails_without_tray(self, dispatcher, tray_unavailable):
        controller = TrayController(dispatcher)

        with pytest.raises(TrayInitializationError):
            controller.start()
        assert controller.is_running is False
