"""Global hotkey listener - pynput backend

Registers every alternative of the configured binding with
``pynput.keyboard.GlobalHotKeys``. pynput calls back on its own listener
thread; callers must marshal the reported ``Shortcut`` onto the UI thread
before touching any window.
"""

import time
from typing import Callable, Dict, Optional

from ..utils import HotkeyRegistrationError, app_logger
from .base.lifecycle_component import LifecycleComponent
from .hotkeys import HotkeyBinding, Shortcut


class GlobalHotkeyListener(LifecycleComponent):
    """Listens for the configured global hotkey (desktop only)"""

    def __init__(self, binding: HotkeyBinding, callback: Callable[[Shortcut], None]):
        super().__init__("GlobalHotkeyListener")
        self.binding = binding
        self.callback = callback
        self._listener = None
        self._combos: Dict[str, Shortcut] = {
            shortcut.to_pynput(): shortcut for shortcut in binding.alternatives
        }

    def _do_start(self) -> bool:
        try:
            # Imported lazily: pynput picks an OS backend at import time
            # and fails on sessions without a display.
            from pynput import keyboard
        except ImportError as e:
            raise HotkeyRegistrationError(
                f"Global hotkeys unavailable: {e}", original_exception=e
            ) from e

        hotkeys = {combo: self._make_handler(combo) for combo in self._combos}
        try:
            self._listener = keyboard.GlobalHotKeys(hotkeys)
        except ValueError as e:
            raise HotkeyRegistrationError(
                f"Failed to register hotkey '{self.binding.accelerator}': {e}",
                context={"hotkey": self.binding.accelerator},
                original_exception=e,
            ) from e

        self._listener.daemon = True
        self._listener.start()

        app_logger.info(
            "Global hotkey registered",
            context={"hotkey": self.binding.accelerator, "combos": list(self._combos)},
            component="hotkey",
        )
        return True

    def _do_stop(self) -> bool:
        listener, self._listener = self._listener, None
        if listener is None:
            return True

        listener.stop()
        # Give the listener thread a moment to exit
        for _ in range(10):
            if not listener.is_alive():
                break
            time.sleep(0.1)
        return True

    def _make_handler(self, combo: str) -> Callable[[], None]:
        shortcut = self._combos[combo]

        def on_activate() -> None:
            try:
                self.callback(shortcut)
            except Exception as e:
                app_logger.log_error(e, f"hotkey_callback_{combo}")

        return on_activate


def resolve_binding(accelerator: str, fallback: str) -> HotkeyBinding:
    """Parse the configured hotkey, falling back to ``fallback`` when invalid"""
    try:
        return HotkeyBinding.parse(accelerator)
    except HotkeyRegistrationError as e:
        app_logger.warning(
            "Invalid hotkey, using default",
            context={"hotkey": accelerator, "default": fallback, "error": e.message},
            component="hotkey",
        )
        return HotkeyBinding.parse(fallback)


def create_hotkey_listener(
    binding: HotkeyBinding, callback: Callable[[Shortcut], None]
) -> Optional[GlobalHotkeyListener]:
    """Start a listener for ``binding``

    Returns:
        The running listener, or None when registration failed. The app
        keeps running without a hotkey.
    """
    listener = GlobalHotkeyListener(binding, callback)
    if not listener.start():
        return None
    return listener
