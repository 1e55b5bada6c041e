from __future__ import annotations

import pytest
from pydantic import ValidationError

from termcore.config import Config, ConfigEntry, TerminalProfile


def test_entry_get_and_set() -> None:
    entry = ConfigEntry[int](value=3, documentation="{comment} lines")

    entry.set(5)

    assert entry.get() == 5


def test_entry_assignment_is_validated() -> None:
    entry = ConfigEntry[int](value=3)

    with pytest.raises(ValidationError):
        entry.value = "many"


def test_entry_documentation_placeholder_is_replaced() -> None:
    entry = ConfigEntry[bool](value=True, documentation="{comment} first\n{comment} second\n")

    assert entry.render_documentation() == "# first\n# second\n"
    assert entry.render_documentation("//") == "// first\n// second\n"


def test_entry_comparisons_look_at_value_only() -> None:
    small = ConfigEntry[int](value=1, documentation="a")
    large = ConfigEntry[int](value=2, documentation="b")

    assert small == ConfigEntry[int](value=1, documentation="other")
    assert small != large
    assert small < large
    assert large >= small


def test_profile_fields_do_not_share_state() -> None:
    first = TerminalProfile()
    second = TerminalProfile()

    first.font_size.value = 20.0

    assert second.font_size.value == 12.0


def test_default_config_shape() -> None:
    config = Config()

    assert config.default_profile.value == "main"
    assert list(config.profiles) == ["main"]
    assert "default" in config.color_schemes
    assert config.profile("missing") is config.profiles["main"]
    assert config.color_palette() == config.color_schemes["default"]
    assert config.input_mappings.binding_count() > 0


def test_profile_lookup_survives_unknown_default_profile() -> None:
    config = Config()
    work = TerminalProfile()
    config.profiles = {"work": work}
    config.default_profile.value = "gone"

    assert config.profile() is work
    assert config.profile("missing") is work


def test_profile_lookup_without_profiles_gives_builtin_profile() -> None:
    config = Config()
    config.profiles = {}

    assert config.profile() == TerminalProfile()
    assert config.profile().tab_width.value == 8
