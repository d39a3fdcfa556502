"""Application identity, window, menu and link constants."""

from .. import __version__


class AppInfo:
    """Application metadata constants."""

    NAME = "Blackbox"
    VERSION = __version__
    TOOLTIP = "Blackbox"


class Paths:
    """Path and filename constants."""

    SETTINGS_FILE_NAME = "settings.json"
    LOG_DIR_NAME = "logs"


class WindowConfig:
    """Window labels, titles, routes and sizes."""

    MAIN_LABEL = "main"
    MAIN_TITLE = "Blackbox"
    MAIN_ROUTE = "/"
    MAIN_WIDTH = 400.0
    MAIN_HEIGHT = 300.0

    SETTINGS_LABEL = "settings"
    SETTINGS_TITLE = "Settings"
    SETTINGS_ROUTE = "/settings"
    ABOUT_ROUTE = "/settings?tab=about"
    SETTINGS_WIDTH = 480.0
    SETTINGS_HEIGHT = 400.0

    BACKGROUND_COLOR = "#1a1a1a"
    DEFAULT_FRONTEND_URL = "http://localhost:1420"


class MenuIds:
    """Tray menu item identifiers."""

    OPEN = "open"
    FEEDBACK = "feedback"
    MANUAL = "manual"
    TROUBLESHOOTING = "troubleshooting"
    SLACK = "slack"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    ABOUT = "about"
    UPDATES = "updates"
    SETTINGS = "settings"
    QUIT = "quit"


class Urls:
    """External links opened in the default browser."""

    FEEDBACK = "https://github.com/blackbox-dev/blackbox/issues/new"
    MANUAL = "https://blackbox.dev/docs"
    TROUBLESHOOTING = "https://blackbox.dev/docs/troubleshooting"
    SLACK = "https://blackbox.dev/community"
    TWITTER = "https://twitter.com/blackboxdev"
    YOUTUBE = "https://youtube.com/@blackboxdev"


class Events:
    """Event names emitted to the web UI."""

    CHECK_UPDATES = "check-updates"


class Hotkeys:
    """Hotkey and menu accelerator defaults."""

    DEFAULT = "CommandOrControl+Space"
    OPEN_ACCELERATOR = "CmdOrCtrl+Space"
    SETTINGS_ACCELERATOR = "CmdOrCtrl+,"
    QUIT_ACCELERATOR = "CmdOrCtrl+Q"
