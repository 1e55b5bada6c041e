"""Terminal mode flags and tri-state mode predicates for input bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag

from termcore.errors import ConfigValueError


class ModeFlag(Flag):
    NONE = 0
    ALTERNATE_SCREEN = 1
    APP_CURSOR = 2
    APP_KEYPAD = 4
    SELECT = 8
    INSERT = 16
    SEARCH = 32
    TRACE = 64


ALL_MODE_FLAGS: tuple[ModeFlag, ...] = (
    ModeFlag.ALTERNATE_SCREEN,
    ModeFlag.APP_CURSOR,
    ModeFlag.APP_KEYPAD,
    ModeFlag.SELECT,
    ModeFlag.INSERT,
    ModeFlag.SEARCH,
    ModeFlag.TRACE,
)

MODE_FLAG_NAMES: dict[ModeFlag, str] = {
    ModeFlag.ALTERNATE_SCREEN: "Alt",
    ModeFlag.APP_CURSOR: "AppCursor",
    ModeFlag.APP_KEYPAD: "AppKeypad",
    ModeFlag.SELECT: "Select",
    ModeFlag.INSERT: "Insert",
    ModeFlag.SEARCH: "Search",
    ModeFlag.TRACE: "Trace",
}
_FLAGS_BY_NAME = {name.lower(): flag for flag, name in MODE_FLAG_NAMES.items()}


class MatchStatus(str, Enum):
    ANY = "any"
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class MatchModes:
    """Required state per mode flag; a flag in neither set matches anything."""

    enabled: ModeFlag = ModeFlag.NONE
    disabled: ModeFlag = ModeFlag.NONE

    def __post_init__(self) -> None:
        if self.enabled & self.disabled:
            raise ValueError("a mode flag cannot be both enabled and disabled")

    def status(self, flag: ModeFlag) -> MatchStatus:
        if flag & self.enabled:
            return MatchStatus.ENABLED
        if flag & self.disabled:
            return MatchStatus.DISABLED
        return MatchStatus.ANY

    def enable(self, flag: ModeFlag) -> MatchModes:
        return MatchModes(enabled=self.enabled | flag, disabled=self.disabled & ~flag)

    def disable(self, flag: ModeFlag) -> MatchModes:
        return MatchModes(enabled=self.enabled & ~flag, disabled=self.disabled | flag)

    def clear(self, flag: ModeFlag) -> MatchModes:
        return MatchModes(enabled=self.enabled & ~flag, disabled=self.disabled & ~flag)

    @property
    def any(self) -> bool:
        return not self.enabled and not self.disabled


ANY_MODE = MatchModes()


def matches(actual: ModeFlag, required: MatchModes) -> bool:
    for flag in ALL_MODE_FLAGS:
        status = required.status(flag)
        if status is MatchStatus.ENABLED and not (actual & flag):
            return False
        if status is MatchStatus.DISABLED and (actual & flag):
            return False
    return True


def parse_match_modes(text: str | None) -> MatchModes:
    """Parse ``"Select|~Alt"``: ``~`` marks a flag that must be off."""
    if text is None:
        return ANY_MODE
    modes = ANY_MODE
    for raw in str(text).split("|"):
        token = raw.strip()
        if not token:
            continue
        negated = token.startswith("~")
        name = token[1:].strip() if negated else token
        flag = _FLAGS_BY_NAME.get(name.lower())
        if flag is None:
            raise ConfigValueError(f"Unknown input mode flag: {name!r}")
        modes = modes.disable(flag) if negated else modes.enable(flag)
    return modes


def format_match_modes(modes: MatchModes) -> str:
    parts: list[str] = []
    for flag in ALL_MODE_FLAGS:
        status = modes.status(flag)
        if status is MatchStatus.ENABLED:
            parts.append(MODE_FLAG_NAMES[flag])
        elif status is MatchStatus.DISABLED:
            parts.append("~" + MODE_FLAG_NAMES[flag])
    return "|".join(parts)
