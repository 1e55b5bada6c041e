from __future__ import annotations

import pytest

from termcore.errors import ConfigValueError
from termcore.inputs import Key, Modifier, MouseButton, parse_key, parse_modifiers, parse_mouse_button
from termcore.inputs.keys import format_modifiers, modifier_names


def test_parse_key_is_case_insensitive() -> None:
    assert parse_key("pageup") is Key.PAGE_UP
    assert parse_key(" F12 ") is Key.F12
    assert parse_key("numpad_enter") is Key.NUMPAD_ENTER


def test_parse_key_rejects_unknown_name() -> None:
    with pytest.raises(ConfigValueError, match="Unknown key name"):
        parse_key("Hyper")


def test_parse_mouse_button() -> None:
    assert parse_mouse_button("wheelup") is MouseButton.WHEEL_UP
    with pytest.raises(ConfigValueError):
        parse_mouse_button("Button9")


def test_parse_modifiers_accepts_list_and_plus_string() -> None:
    expected = Modifier.CONTROL | Modifier.SHIFT

    assert parse_modifiers(["Control", "Shift"]) == expected
    assert parse_modifiers(["Shift", "Control"]) == expected
    assert parse_modifiers("Ctrl+Shift") == expected


def test_parse_modifiers_none_and_empty() -> None:
    assert parse_modifiers(None) == Modifier.NONE
    assert parse_modifiers([]) == Modifier.NONE
    assert parse_modifiers(["None"]) == Modifier.NONE


def test_parse_modifiers_rejects_unknown_and_non_string() -> None:
    with pytest.raises(ConfigValueError, match="Unknown modifier"):
        parse_modifiers(["Hyper"])
    with pytest.raises(ConfigValueError):
        parse_modifiers([3])


def test_modifier_names_use_stable_order() -> None:
    modifiers = Modifier.META | Modifier.SHIFT | Modifier.CONTROL

    assert modifier_names(modifiers) == ["Shift", "Control", "Meta"]
    assert format_modifiers(modifiers) == "Shift+Control+Meta"
    assert format_modifiers(Modifier.NONE) == "None"


def test_parse_modifiers_rejects_scalar_values() -> None:
    with pytest.raises(ConfigValueError, match="list or a string"):
        parse_modifiers(5)
