"""Action dispatcher tests

The host is a MagicMock; each test checks which host primitives a single
event turns into.
"""

from unittest.mock import MagicMock, call

import pytest

from blackbox.config.app_constants import Events, Urls
from blackbox.core.dispatcher import ActionDispatcher
from blackbox.core.hotkeys import CTRL, META, SHIFT, HotkeyBinding, Shortcut
from blackbox.core.interfaces.host import MAIN_WINDOW, SETTINGS_WINDOW
from blackbox.core.menu_actions import MenuAction
from blackbox.core import dispatcher as dispatcher_module
from blackbox.core.window_state import WindowAction, WindowDimensions, WindowVisibility
from blackbox.utils import LogCategory


@pytest.fixture
def dispatcher(mock_host):
    return ActionDispatcher(mock_host, HotkeyBinding.parse("CommandOrControl+Space"))


class TestTrayClick:
    """Left click on the tray icon"""

    def test_creates_main_window_when_missing(self, dispatcher, mock_host):
        action = dispatcher.handle_tray_click()

        assert action == WindowAction.create()
        mock_host.create_window.assert_called_once_with(MAIN_WINDOW)
        spec = mock_host.create_window.call_args[0][0]
        assert spec.label == "main"
        assert spec.route == "/"
        assert spec.dimensions == WindowDimensions(400.0, 300.0)
        assert spec.visible is False

    def test_hides_visible_main_window(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=True)
        host = host_with_windows(main=window)

        action = dispatcher.handle_tray_click()

        assert action == WindowAction.toggle(WindowVisibility.HIDDEN)
        window.hide.assert_called_once_with()
        window.show.assert_not_called()
        host.create_window.assert_not_called()

    def test_shows_and_focuses_hidden_main_window(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=False)
        host_with_windows(main=window)

        action = dispatcher.handle_tray_click()

        assert action == WindowAction.toggle(WindowVisibility.VISIBLE)
        assert window.method_calls[-2:] == [call.show(), call.set_focus()]
        window.hide.assert_not_called()

    def test_unknown_visibility_shows_window(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=RuntimeError("window gone"))
        host_with_windows(main=window)

        action = dispatcher.handle_tray_click()

        assert action == WindowAction.toggle(WindowVisibility.VISIBLE)
        window.show.assert_called_once_with()

    def test_failing_get_window_counts_as_missing(self, dispatcher, mock_host):
        mock_host.get_window.side_effect = RuntimeError("registry unavailable")

        action = dispatcher.handle_tray_click()

        assert action.is_create
        mock_host.create_window.assert_called_once_with(MAIN_WINDOW)

    def test_create_failure_is_swallowed(self, dispatcher, mock_host):
        mock_host.create_window.side_effect = RuntimeError("webview crashed")

        action = dispatcher.handle_tray_click()

        assert action.is_create

    def test_hide_failure_is_swallowed(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=True)
        window.hide.side_effect = RuntimeError("hide failed")
        host_with_windows(main=window)

        dispatcher.handle_tray_click()

        window.hide.assert_called_once_with()

    def test_only_the_main_window_is_touched(self, dispatcher, host_with_windows, make_window):
        main = make_window("main", visible=True)
        settings = make_window("settings", visible=True)
        host_with_windows(main=main, settings=settings)

        dispatcher.handle_tray_click()

        assert settings.method_calls == []


class TestMenuLinks:
    """Link items open the browser and nothing else"""

    @pytest.mark.parametrize(
        "menu_id,url",
        [
            ("feedback", Urls.FEEDBACK),
            ("manual", Urls.MANUAL),
            ("troubleshooting", Urls.TROUBLESHOOTING),
            ("slack", Urls.SLACK),
            ("twitter", Urls.TWITTER),
            ("youtube", Urls.YOUTUBE),
        ],
    )
    def test_link_opens_url(self, dispatcher, mock_host, menu_id, url):
        action = dispatcher.handle_menu_event(menu_id)

        assert action.is_link()
        mock_host.open_external_url.assert_called_once_with(url)
        assert mock_host.method_calls == [call.open_external_url(url)]

    def test_open_failure_is_swallowed(self, dispatcher, mock_host):
        mock_host.open_external_url.side_effect = RuntimeError("no browser")

        assert dispatcher.handle_menu_event("feedback") is MenuAction.FEEDBACK


class TestMenuWindows:
    """Open, Settings and About"""

    def test_open_creates_main_window(self, dispatcher, mock_host):
        assert dispatcher.handle_menu_event("open") is MenuAction.OPEN
        mock_host.create_window.assert_called_once_with(MAIN_WINDOW)

    def test_open_toggles_visible_main_window(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=True)
        host_with_windows(main=window)

        dispatcher.handle_menu_event("open")

        window.hide.assert_called_once_with()

    def test_settings_creates_settings_window(self, dispatcher, mock_host):
        dispatcher.handle_menu_event("settings")

        mock_host.create_window.assert_called_once_with(SETTINGS_WINDOW)
        spec = mock_host.create_window.call_args[0][0]
        assert spec.route == "/settings"
        assert spec.dimensions == WindowDimensions(480.0, 400.0)

    def test_settings_shows_existing_window_without_navigating(
        self, dispatcher, host_with_windows, make_window
    ):
        window = make_window("settings", visible=True)
        host = host_with_windows(settings=window)

        dispatcher.handle_menu_event("settings")

        assert window.method_calls == [call.show(), call.set_focus()]
        host.create_window.assert_not_called()

    def test_about_creates_settings_window_on_about_tab(self, dispatcher, mock_host):
        dispatcher.handle_menu_event("about")

        spec = mock_host.create_window.call_args[0][0]
        assert spec.label == "settings"
        assert spec.route == "/settings?tab=about"
        assert spec.dimensions == SETTINGS_WINDOW.dimensions

    def test_about_navigates_existing_window_then_shows(
        self, dispatcher, host_with_windows, make_window
    ):
        window = make_window("settings", visible=False)
        host = host_with_windows(settings=window)

        dispatcher.handle_menu_event("about")

        assert window.method_calls == [
            call.navigate("/settings?tab=about"),
            call.show(),
            call.set_focus(),
        ]
        host.create_window.assert_not_called()

    def test_navigate_failure_still_shows(self, dispatcher, host_with_windows, make_window):
        window = make_window("settings")
        window.navigate.side_effect = RuntimeError("page gone")
        host_with_windows(settings=window)

        dispatcher.handle_menu_event("about")

        window.show.assert_called_once_with()


class TestMenuProcess:
    """Quit, updates and unknown ids"""

    def test_quit_exits_with_zero(self, dispatcher, mock_host):
        assert dispatcher.handle_menu_event("quit") is MenuAction.QUIT
        mock_host.exit.assert_called_once_with(0)

    def test_quit_does_not_touch_windows(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=True)
        host_with_windows(main=window)

        dispatcher.handle_menu_event("quit")

        assert window.method_calls == []

    def test_updates_emits_event(self, dispatcher, mock_host):
        assert dispatcher.handle_menu_event("updates") is MenuAction.CHECK_UPDATES
        mock_host.emit.assert_called_once_with(Events.CHECK_UPDATES, None)

    @pytest.mark.parametrize("menu_id", ["", "Quit", "version", "bogus"])
    def test_unknown_id_is_a_no_op(self, dispatcher, mock_host, menu_id):
        assert dispatcher.handle_menu_event(menu_id) is MenuAction.UNKNOWN
        assert mock_host.method_calls == []

    def test_unknown_id_is_logged_as_menu_event(self, monkeypatch, dispatcher):
        debug = MagicMock()
        monkeypatch.setattr(dispatcher_module.app_logger, "debug", debug)

        dispatcher.handle_menu_event("bogus")

        debug.assert_called_once()
        assert debug.call_args[0][1] is LogCategory.MENU
        assert debug.call_args[1]["context"] == {"menu_id": "bogus"}


class TestHotkey:
    """Global hotkey presses"""

    def test_ctrl_space_toggles_main_window(self, dispatcher, mock_host):
        action = dispatcher.handle_hotkey(Shortcut(frozenset({CTRL}), "space"))

        assert action.is_create
        mock_host.create_window.assert_called_once_with(MAIN_WINDOW)

    def test_cmd_space_toggles_main_window(self, dispatcher, host_with_windows, make_window):
        window = make_window("main", visible=True)
        host_with_windows(main=window)

        action = dispatcher.handle_hotkey(Shortcut(frozenset({META}), "space"))

        assert action == WindowAction.toggle(WindowVisibility.HIDDEN)
        window.hide.assert_called_once_with()

    def test_release_is_ignored(self, dispatcher, mock_host):
        assert dispatcher.handle_hotkey(Shortcut(frozenset({CTRL}), "space"), pressed=False) is None
        assert mock_host.method_calls == []

    def test_other_shortcut_is_ignored(self, dispatcher, mock_host):
        assert dispatcher.handle_hotkey(Shortcut(frozenset({CTRL, SHIFT}), "space")) is None
        assert mock_host.method_calls == []

    def test_without_binding_nothing_matches(self, mock_host):
        dispatcher = ActionDispatcher(mock_host)

        assert dispatcher.handle_hotkey(Shortcut(frozenset({CTRL}), "space")) is None
        assert mock_host.method_calls == []

    def test_set_hotkey(self, dispatcher, mock_host):
        dispatcher.set_hotkey(HotkeyBinding.parse("Alt+K"))

        assert dispatcher.handle_hotkey(Shortcut(frozenset({CTRL}), "space")) is None
        assert dispatcher.hotkey.accelerator == "Alt+K"


class TestCloseRequest:
    """Close-to-hide"""

    @pytest.mark.parametrize("label", ["main", "settings"])
    def test_close_is_vetoed_and_window_hidden(self, dispatcher, host_with_windows, make_window, label):
        window = make_window(label, visible=True)
        host_with_windows(**{label: window})

        assert dispatcher.handle_close_request(label) is True
        window.hide.assert_called_once_with()

    def test_close_of_unknown_window_is_still_vetoed(self, dispatcher, mock_host):
        assert dispatcher.handle_close_request("main") is True

    def test_hide_failure_still_vetoes(self, dispatcher, host_with_windows, make_window):
        window = make_window("main")
        window.hide.side_effect = RuntimeError("hide failed")
        host_with_windows(main=window)

        assert dispatcher.handle_close_request("main") is True

    def test_close_never_exits(self, dispatcher, host_with_windows, make_window):
        host = host_with_windows(main=make_window("main"))

        dispatcher.handle_close_request("main")

        host.exit.assert_not_called()
