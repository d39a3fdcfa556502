"""Application bootstrap

Wires the Qt host, the tray and the global hotkey to the dispatcher and
runs the Qt event loop.
"""

import argparse
import signal
import sys
from typing import List, Optional

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QApplication

from .config import AppInfo, ConfigService, Hotkeys, WindowConfig
from .core.dispatcher import ActionDispatcher
from .core.hotkey_listener import (
    GlobalHotkeyListener,
    create_hotkey_listener,
    resolve_binding,
)
from .core.hotkeys import Shortcut
from .ui.components.system_tray import TrayController
from .ui.qt_host import QtWindowHost
from .utils import LogCategory, TrayInitializationError, app_logger, logger


class HotkeyRelay(QObject):
    """Moves hotkey callbacks from pynput's thread onto the Qt thread"""

    triggered = Signal(object)  # Shortcut


class BlackboxApp:
    """Menu-bar application"""

    def __init__(
        self,
        config: ConfigService,
        frontend_url: Optional[str] = None,
        enable_hotkey: bool = True,
        qt_app: Optional[QApplication] = None,
    ):
        self.config = config
        self.settings = config.get_app_settings()

        self.qt_app = qt_app or QApplication.instance() or QApplication(sys.argv)
        self.qt_app.setApplicationName(AppInfo.NAME)
        self.qt_app.setApplicationVersion(AppInfo.VERSION)
        # Closing the last window must not end a tray app
        self.qt_app.setQuitOnLastWindowClosed(False)

        base_url = frontend_url or config.get_setting(
            "ui.frontend_url", WindowConfig.DEFAULT_FRONTEND_URL
        )
        self.host = QtWindowHost(base_url)

        binding = resolve_binding(self.settings.hotkey, Hotkeys.DEFAULT)
        self.dispatcher = ActionDispatcher(self.host, binding if enable_hotkey else None)
        self.host.set_close_handler(self.dispatcher.handle_close_request)

        self.tray = TrayController(self.dispatcher)
        self.hotkey_relay = HotkeyRelay()
        self.hotkey_relay.triggered.connect(self._on_hotkey)
        self.hotkey_listener: Optional[GlobalHotkeyListener] = None

    def start(self) -> None:
        """Build the tray and register the hotkey

        Raises:
            TrayInitializationError: Tray or menu construction failed
        """
        with logger.trace("startup", component="app") as trace:
            self.tray.start()
            trace.checkpoint("tray_ready")

            if self.dispatcher.hotkey is not None:
                self.hotkey_listener = create_hotkey_listener(
                    self.dispatcher.hotkey, self.hotkey_relay.triggered.emit
                )
                trace.checkpoint("hotkey_ready" if self.hotkey_listener else "hotkey_unavailable")

        app_logger.info(
            "Blackbox is running in the tray",
            LogCategory.STARTUP,
            context={
                "hotkey": self.dispatcher.hotkey.accelerator if self.dispatcher.hotkey else None,
                "hotkey_active": self.hotkey_listener is not None,
            },
            component="app",
        )

    def shutdown(self) -> None:
        if self.hotkey_listener is not None:
            self.hotkey_listener.stop()
            self.hotkey_listener = None
        self.tray.stop()

    def run(self) -> int:
        self.start()

        # Let Python handle SIGINT while the Qt loop is running
        signal_timer = QTimer()
        signal_timer.timeout.connect(lambda: None)
        signal_timer.start(200)

        try:
            exit_code = self.qt_app.exec()
        finally:
            signal_timer.stop()
            self.shutdown()

        app_logger.log_shutdown(exit_code)
        return exit_code

    def _on_hotkey(self, shortcut: Shortcut) -> None:
        self.dispatcher.handle_hotkey(shortcut, pressed=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackbox", description="Blackbox menu-bar app")
    parser.add_argument("--dev", action="store_true", help="Verbose console logging")
    parser.add_argument("--config", metavar="PATH", help="Settings file to read")
    parser.add_argument("--no-hotkey", action="store_true", help="Do not register the global hotkey")
    parser.add_argument("--frontend-url", metavar="URL", help="Base URL of the web UI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {AppInfo.VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    args = build_parser().parse_args(argv)

    if args.dev:
        logger.set_dev_mode(True)

    app_logger.log_startup(AppInfo.VERSION)

    config = ConfigService(args.config)
    config.load_config()
    logger.set_config_service(config)

    signal.signal(signal.SIGINT, lambda signum, frame: QApplication.exit(0))

    try:
        app = BlackboxApp(
            config,
            frontend_url=args.frontend_url,
            enable_hotkey=not args.no_hotkey,
        )
        return app.run()
    except TrayInitializationError as e:
        app_logger.critical("Failed to start Blackbox", e, context=e.to_dict(), component="app")
        print(f"ERROR: {e.get_user_message()}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
