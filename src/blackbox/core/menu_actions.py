"""Tray menu action classification

Menu items carry opaque string ids. ``MenuAction.from_id`` maps them onto
a closed set of actions through a fixed table: exact, case-sensitive
matches only; anything else is ``UNKNOWN``.
"""

from enum import Enum
from typing import Dict, Optional

from ..config.app_constants import MenuIds, Urls


class MenuAction(Enum):
    """Semantic result of a tray menu click"""

    OPEN = "open"
    FEEDBACK = "feedback"
    MANUAL = "manual"
    TROUBLESHOOTING = "troubleshooting"
    SLACK = "slack"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    ABOUT = "about"
    CHECK_UPDATES = "check_updates"
    SETTINGS = "settings"
    QUIT = "quit"
    UNKNOWN = "unknown"

    @classmethod
    def from_id(cls, menu_id: str) -> "MenuAction":
        return _ACTIONS_BY_ID.get(menu_id, cls.UNKNOWN)

    @property
    def menu_id(self) -> Optional[str]:
        """Menu item id for this action, None for UNKNOWN"""
        return _IDS_BY_ACTION.get(self)

    def should_exit(self) -> bool:
        return self is MenuAction.QUIT

    def get_url(self) -> Optional[str]:
        """External URL for link actions, None otherwise"""
        return _URLS.get(self)

    def is_link(self) -> bool:
        return self in _URLS


_ACTIONS_BY_ID: Dict[str, MenuAction] = {
    MenuIds.OPEN: MenuAction.OPEN,
    MenuIds.FEEDBACK: MenuAction.FEEDBACK,
    MenuIds.MANUAL: MenuAction.MANUAL,
    MenuIds.TROUBLESHOOTING: MenuAction.TROUBLESHOOTING,
    MenuIds.SLACK: MenuAction.SLACK,
    MenuIds.TWITTER: MenuAction.TWITTER,
    MenuIds.YOUTUBE: MenuAction.YOUTUBE,
    MenuIds.ABOUT: MenuAction.ABOUT,
    MenuIds.UPDATES: MenuAction.CHECK_UPDATES,
    MenuIds.SETTINGS: MenuAction.SETTINGS,
    MenuIds.QUIT: MenuAction.QUIT,
}

_IDS_BY_ACTION: Dict[MenuAction, str] = {
    action: menu_id for menu_id, action in _ACTIONS_BY_ID.items()
}

_URLS: Dict[MenuAction, str] = {
    MenuAction.FEEDBACK: Urls.FEEDBACK,
    MenuAction.MANUAL: Urls.MANUAL,
    MenuAction.TROUBLESHOOTING: Urls.TROUBLESHOOTING,
    MenuAction.SLACK: Urls.SLACK,
    MenuAction.TWITTER: Urls.TWITTER,
    MenuAction.YOUTUBE: Urls.YOUTUBE,
}
