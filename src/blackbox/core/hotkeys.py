"""Global hotkey binding model

Accelerator strings follow the web UI's format, e.g.
``"CommandOrControl+Space"``. The cross-platform ``CommandOrControl``
modifier expands into two alternatives (meta and ctrl); a pressed
shortcut matches the binding when it equals any alternative exactly.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from ..utils import HotkeyRegistrationError

META = "meta"
CTRL = "ctrl"
ALT = "alt"
SHIFT = "shift"

_MODIFIER_ALIASES = {
    "command": (META,),
    "cmd": (META,),
    "super": (META,),
    "meta": (META,),
    "win": (META,),
    "windows": (META,),
    "control": (CTRL,),
    "ctrl": (CTRL,),
    "alt": (ALT,),
    "option": (ALT,),
    "shift": (SHIFT,),
    # Either modifier, whichever the platform uses
    "commandorcontrol": (META, CTRL),
    "cmdorctrl": (META, CTRL),
}

_KEY_ALIASES = {
    "escape": "esc",
    "return": "enter",
    "arrowup": "up",
    "arrowdown": "down",
    "arrowleft": "left",
    "arrowright": "right",
    "pgup": "page_up",
    "pageup": "page_up",
    "pgdown": "page_down",
    "pagedown": "page_down",
    "del": "delete",
}

_PYNPUT_MODIFIERS = {META: "<cmd>", CTRL: "<ctrl>", ALT: "<alt>", SHIFT: "<shift>"}
_MODIFIER_ORDER = (CTRL, ALT, SHIFT, META)


@dataclass(frozen=True)
class Shortcut:
    """A concrete key combination: modifiers plus one key"""

    modifiers: FrozenSet[str]
    key: str

    def to_pynput(self) -> str:
        """Format for ``pynput.keyboard.GlobalHotKeys``, e.g. ``<ctrl>+<space>``"""
        parts = [_PYNPUT_MODIFIERS[m] for m in _MODIFIER_ORDER if m in self.modifiers]
        parts.append(self.key if len(self.key) == 1 else f"<{self.key}>")
        return "+".join(parts)

    def __str__(self) -> str:
        parts = [m for m in _MODIFIER_ORDER if m in self.modifiers]
        parts.append(self.key)
        return "+".join(parts)


class HotkeyBinding:
    """Configured global hotkey and its concrete alternatives"""

    def __init__(self, accelerator: str, alternatives: Tuple[Shortcut, ...]):
        self.accelerator = accelerator
        self.alternatives = alternatives

    @classmethod
    def parse(cls, accelerator: str) -> "HotkeyBinding":
        """Parse an accelerator string

        Raises:
            HotkeyRegistrationError: Empty string, unknown layout or not
                exactly one non-modifier key
        """
        if not accelerator or not accelerator.strip():
            raise HotkeyRegistrationError("Hotkey string cannot be empty")

        tokens = [t.strip().lower() for t in accelerator.split("+")]
        if any(not t for t in tokens):
            raise HotkeyRegistrationError(
                f"Malformed hotkey '{accelerator}'", context={"hotkey": accelerator}
            )

        modifier_choices: List[Tuple[str, ...]] = []
        keys: List[str] = []
        for token in tokens:
            if token in _MODIFIER_ALIASES:
                modifier_choices.append(_MODIFIER_ALIASES[token])
            else:
                keys.append(_KEY_ALIASES.get(token, token))

        if len(keys) != 1:
            raise HotkeyRegistrationError(
                f"Hotkey '{accelerator}' must contain exactly one non-modifier key",
                context={"hotkey": accelerator, "keys": keys},
            )

        combos: List[FrozenSet[str]] = [frozenset()]
        for choices in modifier_choices:
            combos = [combo | {choice} for combo in combos for choice in choices]

        alternatives: List[Shortcut] = []
        for combo in combos:
            shortcut = Shortcut(frozenset(combo), keys[0])
            if shortcut not in alternatives:
                alternatives.append(shortcut)

        return cls(accelerator, tuple(alternatives))

    def matches(self, shortcut: Shortcut) -> bool:
        return shortcut in self.alternatives

    def __repr__(self) -> str:
        return f"HotkeyBinding({self.accelerator!r})"
