from __future__ import annotations

import pytest

from termcore.errors import ConfigValueError
from termcore.inputs import ANY_MODE, MatchModes, MatchStatus, ModeFlag, format_match_modes, matches, parse_match_modes


def test_any_mode_matches_every_state() -> None:
    assert matches(ModeFlag.NONE, ANY_MODE)
    assert matches(ModeFlag.SELECT | ModeFlag.ALTERNATE_SCREEN, ANY_MODE)


def test_enabled_flag_requires_flag_set() -> None:
    required = ANY_MODE.enable(ModeFlag.SELECT)

    assert matches(ModeFlag.SELECT, required)
    assert matches(ModeFlag.SELECT | ModeFlag.INSERT, required)
    assert not matches(ModeFlag.INSERT, required)


def test_disabled_flag_requires_flag_clear() -> None:
    required = ANY_MODE.disable(ModeFlag.ALTERNATE_SCREEN)

    assert matches(ModeFlag.NONE, required)
    assert matches(ModeFlag.SEARCH, required)
    assert not matches(ModeFlag.ALTERNATE_SCREEN, required)


def test_status_reports_tri_state() -> None:
    modes = MatchModes().enable(ModeFlag.SELECT).disable(ModeFlag.INSERT)

    assert modes.status(ModeFlag.SELECT) is MatchStatus.ENABLED
    assert modes.status(ModeFlag.INSERT) is MatchStatus.DISABLED
    assert modes.status(ModeFlag.TRACE) is MatchStatus.ANY


def test_enable_after_disable_moves_flag_between_sets() -> None:
    modes = ANY_MODE.disable(ModeFlag.SEARCH).enable(ModeFlag.SEARCH)

    assert modes.status(ModeFlag.SEARCH) is MatchStatus.ENABLED
    assert not (modes.enabled & modes.disabled)


def test_clear_returns_flag_to_any() -> None:
    modes = ANY_MODE.enable(ModeFlag.SELECT).clear(ModeFlag.SELECT)

    assert modes == ANY_MODE
    assert modes.any


def test_overlapping_sets_are_rejected() -> None:
    with pytest.raises(ValueError):
        MatchModes(enabled=ModeFlag.SELECT, disabled=ModeFlag.SELECT)


def test_parse_match_modes_reads_positive_and_negated_flags() -> None:
    modes = parse_match_modes("Select|~Alt")

    assert modes.status(ModeFlag.SELECT) is MatchStatus.ENABLED
    assert modes.status(ModeFlag.ALTERNATE_SCREEN) is MatchStatus.DISABLED


def test_parse_match_modes_is_case_insensitive_and_ignores_blanks() -> None:
    assert parse_match_modes(" appcursor | ~INSERT |") == parse_match_modes("AppCursor|~Insert")


@pytest.mark.parametrize("text", [None, "", "   "])
def test_parse_match_modes_empty_means_any(text: str | None) -> None:
    assert parse_match_modes(text) == ANY_MODE


def test_parse_match_modes_rejects_unknown_flag() -> None:
    with pytest.raises(ConfigValueError, match="Bogus"):
        parse_match_modes("Select|Bogus")


def test_format_match_modes_round_trips() -> None:
    modes = parse_match_modes("~Alt|Search")

    assert format_match_modes(modes) == "~Alt|Search"
    assert parse_match_modes(format_match_modes(modes)) == modes
    assert format_match_modes(ANY_MODE) == ""
