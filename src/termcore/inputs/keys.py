"""Input identifiers: modifiers, named keys and mouse buttons."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, Flag

from termcore.errors import ConfigValueError


class Modifier(Flag):
    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4
    META = 8


MODIFIER_NAMES: dict[Modifier, str] = {
    Modifier.SHIFT: "Shift",
    Modifier.ALT: "Alt",
    Modifier.CONTROL: "Control",
    Modifier.META: "Meta",
}
_MODIFIER_ALIASES = {
    "shift": Modifier.SHIFT,
    "alt": Modifier.ALT,
    "control": Modifier.CONTROL,
    "ctrl": Modifier.CONTROL,
    "meta": Modifier.META,
    "super": Modifier.META,
    "none": Modifier.NONE,
}


class Key(str, Enum):
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    ESCAPE = "Escape"
    ENTER = "Enter"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    UP_ARROW = "UpArrow"
    DOWN_ARROW = "DownArrow"
    LEFT_ARROW = "LeftArrow"
    RIGHT_ARROW = "RightArrow"
    INSERT = "Insert"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    NUMPAD_0 = "Numpad_0"
    NUMPAD_1 = "Numpad_1"
    NUMPAD_2 = "Numpad_2"
    NUMPAD_3 = "Numpad_3"
    NUMPAD_4 = "Numpad_4"
    NUMPAD_5 = "Numpad_5"
    NUMPAD_6 = "Numpad_6"
    NUMPAD_7 = "Numpad_7"
    NUMPAD_8 = "Numpad_8"
    NUMPAD_9 = "Numpad_9"
    NUMPAD_DECIMAL = "Numpad_Decimal"
    NUMPAD_DIVIDE = "Numpad_Divide"
    NUMPAD_MULTIPLY = "Numpad_Multiply"
    NUMPAD_SUBTRACT = "Numpad_Subtract"
    NUMPAD_ADD = "Numpad_Add"
    NUMPAD_ENTER = "Numpad_Enter"
    NUMPAD_EQUAL = "Numpad_Equal"


class MouseButton(str, Enum):
    LEFT = "Left"
    MIDDLE = "Middle"
    RIGHT = "Right"
    RELEASE = "Release"
    WHEEL_UP = "WheelUp"
    WHEEL_DOWN = "WheelDown"
    WHEEL_LEFT = "WheelLeft"
    WHEEL_RIGHT = "WheelRight"


_KEYS_BY_NAME = {key.value.lower(): key for key in Key}
_BUTTONS_BY_NAME = {button.value.lower(): button for button in MouseButton}


def parse_key(name: str) -> Key:
    key = _KEYS_BY_NAME.get(name.strip().lower())
    if key is None:
        raise ConfigValueError(f"Unknown key name: {name!r}")
    return key


def parse_mouse_button(name: str) -> MouseButton:
    button = _BUTTONS_BY_NAME.get(str(name).strip().lower())
    if button is None:
        raise ConfigValueError(f"Unknown mouse button: {name!r}")
    return button


def parse_modifiers(names: Iterable[object] | str | None) -> Modifier:
    """Accepts a list of names or a single ``"Control+Shift"`` style string."""
    if names is None:
        return Modifier.NONE
    if isinstance(names, str):
        names = [part for part in names.replace("+", ",").split(",")]
    elif not isinstance(names, (list, tuple)):
        raise ConfigValueError(f"Modifiers must be a list or a string, got {names!r}")
    result = Modifier.NONE
    for raw in names:
        if not isinstance(raw, str):
            raise ConfigValueError(f"Modifier must be a string, got {raw!r}")
        token = raw.strip().lower()
        if not token:
            continue
        modifier = _MODIFIER_ALIASES.get(token)
        if modifier is None:
            raise ConfigValueError(f"Unknown modifier: {raw!r}")
        result |= modifier
    return result


def modifier_names(modifiers: Modifier) -> list[str]:
    return [name for flag, name in MODIFIER_NAMES.items() if modifiers & flag]


def format_modifiers(modifiers: Modifier) -> str:
    names = modifier_names(modifiers)
    return "+".join(names) if names else "None"
