"""Window visibility decisions

Pure values computed fresh from the host's live window query every time a
tray click, menu selection or hotkey fires. Nothing here is persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.app_constants import WindowConfig


class WindowVisibility(Enum):
    """Visibility of a window"""

    VISIBLE = "visible"
    HIDDEN = "hidden"

    @classmethod
    def from_bool(cls, visible: bool) -> "WindowVisibility":
        return cls.VISIBLE if visible else cls.HIDDEN

    def toggle(self) -> "WindowVisibility":
        """Return the opposite state"""
        if self is WindowVisibility.VISIBLE:
            return WindowVisibility.HIDDEN
        return WindowVisibility.VISIBLE

    def is_visible(self) -> bool:
        return self is WindowVisibility.VISIBLE


@dataclass(frozen=True)
class WindowDimensions:
    """Window width/height in logical pixels

    Construction never validates; call ``is_valid()``.
    """

    width: float
    height: float

    @classmethod
    def default_dimensions(cls) -> "WindowDimensions":
        return cls(WindowConfig.MAIN_WIDTH, WindowConfig.MAIN_HEIGHT)

    @classmethod
    def settings_dimensions(cls) -> "WindowDimensions":
        return cls(WindowConfig.SETTINGS_WIDTH, WindowConfig.SETTINGS_HEIGHT)

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


class WindowActionKind(Enum):
    TOGGLE = "toggle"
    CREATE = "create"


@dataclass(frozen=True)
class WindowAction:
    """What to do with a target window

    ``TOGGLE`` carries the visibility the window should end up in;
    ``CREATE`` carries none.
    """

    kind: WindowActionKind
    visibility: Optional[WindowVisibility] = None

    @classmethod
    def toggle(cls, visibility: WindowVisibility) -> "WindowAction":
        return cls(WindowActionKind.TOGGLE, visibility)

    @classmethod
    def create(cls) -> "WindowAction":
        return cls(WindowActionKind.CREATE)

    @classmethod
    def determine(
        cls, window_exists: bool, current_visibility: Optional[bool]
    ) -> "WindowAction":
        """Decide the action for a tray click or hotkey

        Args:
            window_exists: Whether the host currently has the window
            current_visibility: Host-reported visibility, None when the
                query failed. Ignored when the window does not exist.

        Returns:
            CREATE for a missing window, otherwise TOGGLE to the opposite
            of the current state. An unknown state counts as hidden, so
            the result is a show.
        """
        if not window_exists:
            return cls.create()

        if current_visibility is None:
            visibility = WindowVisibility.HIDDEN
        else:
            visibility = WindowVisibility.from_bool(current_visibility)
        return cls.toggle(visibility.toggle())

    @property
    def is_create(self) -> bool:
        return self.kind is WindowActionKind.CREATE

    def __repr__(self) -> str:
        if self.is_create:
            return "WindowAction.CREATE"
        return f"WindowAction.TOGGLE({self.visibility.name})"


def handle_tray_click(current_visibility: WindowVisibility) -> WindowVisibility:
    """Visibility a known window should switch to on a tray click"""
    return current_visibility.toggle()
