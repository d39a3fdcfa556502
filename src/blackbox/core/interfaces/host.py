"""Host framework interfaces

The core never touches Qt directly. It queries and commands the window
registry through these interfaces, which the Qt host implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ...config.app_constants import WindowConfig
from ..window_state import WindowDimensions


@dataclass(frozen=True)
class WindowSpec:
    """Everything the host needs to build a web-view window"""

    label: str
    title: str
    route: str
    dimensions: WindowDimensions
    visible: bool = False
    background_color: str = WindowConfig.BACKGROUND_COLOR
    resizable: bool = True
    center: bool = True


MAIN_WINDOW = WindowSpec(
    label=WindowConfig.MAIN_LABEL,
    title=WindowConfig.MAIN_TITLE,
    route=WindowConfig.MAIN_ROUTE,
    dimensions=WindowDimensions.default_dimensions(),
)

SETTINGS_WINDOW = WindowSpec(
    label=WindowConfig.SETTINGS_LABEL,
    title=WindowConfig.SETTINGS_TITLE,
    route=WindowConfig.SETTINGS_ROUTE,
    dimensions=WindowDimensions.settings_dimensions(),
)


class IWindowHandle(ABC):
    """A live window owned by the host"""

    @property
    @abstractmethod
    def label(self) -> str:
        pass

    @abstractmethod
    def show(self) -> None:
        pass

    @abstractmethod
    def hide(self) -> None:
        pass

    @abstractmethod
    def set_focus(self) -> None:
        pass

    @abstractmethod
    def is_visible(self) -> bool:
        """Current visibility

        May raise if the host cannot answer; callers treat that as unknown.
        """
        pass

    @abstractmethod
    def navigate(self, route: str) -> None:
        """Replace the current page with ``route`` in place"""
        pass


class IWindowHost(ABC):
    """Window registry and process-level primitives"""

    @abstractmethod
    def get_window(self, label: str) -> Optional[IWindowHandle]:
        pass

    @abstractmethod
    def create_window(self, spec: WindowSpec) -> IWindowHandle:
        pass

    @abstractmethod
    def open_external_url(self, url: str) -> None:
        """Open ``url`` in the default browser"""
        pass

    @abstractmethod
    def exit(self, code: int = 0) -> None:
        """Terminate immediately, skipping close-to-hide handling"""
        pass

    @abstractmethod
    def emit(self, event: str, payload: Any = None) -> None:
        """Notify the web UI"""
        pass
