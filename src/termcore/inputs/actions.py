"""Closed set of application actions produced by input resolution.

Every action is a frozen dataclass; ``Action`` is the union of all of them.
The session and GUI layers execute actions, this module only defines their
shape and the document codec (``action`` name plus payload keys).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Union

from termcore.errors import ConfigValueError


class CopyFormat(str, Enum):
    TEXT = "Text"
    HTML = "HTML"
    PNG = "PNG"
    VT = "VT"


@dataclass(frozen=True)
class CancelSelection:
    pass


@dataclass(frozen=True)
class ChangeProfile:
    name: str


@dataclass(frozen=True)
class ClearHistoryAndReset:
    pass


@dataclass(frozen=True)
class CloseTab:
    pass


@dataclass(frozen=True)
class CopyPreviousMarkRange:
    pass


@dataclass(frozen=True)
class CopySelection:
    format: CopyFormat = CopyFormat.TEXT


@dataclass(frozen=True)
class CreateDebugDump:
    pass


@dataclass(frozen=True)
class CreateNewTab:
    pass


@dataclass(frozen=True)
class DecreaseFontSize:
    pass


@dataclass(frozen=True)
class DecreaseOpacity:
    pass


@dataclass(frozen=True)
class FocusNextSearchMatch:
    pass


@dataclass(frozen=True)
class FocusPreviousSearchMatch:
    pass


@dataclass(frozen=True)
class FollowHyperlink:
    pass


@dataclass(frozen=True)
class IncreaseFontSize:
    pass


@dataclass(frozen=True)
class IncreaseOpacity:
    pass


@dataclass(frozen=True)
class MoveTabTo:
    position: int


@dataclass(frozen=True)
class MoveTabToLeft:
    pass


@dataclass(frozen=True)
class MoveTabToRight:
    pass


@dataclass(frozen=True)
class NewTerminal:
    profile: str | None = None


@dataclass(frozen=True)
class NoSearchHighlight:
    pass


@dataclass(frozen=True)
class OpenConfiguration:
    pass


@dataclass(frozen=True)
class OpenFileManager:
    pass


@dataclass(frozen=True)
class OpenSelection:
    pass


@dataclass(frozen=True)
class PasteClipboard:
    strip: bool = False


@dataclass(frozen=True)
class PasteSelection:
    evaluate_in_shell: bool = False


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ReloadConfig:
    profile: str | None = None


@dataclass(frozen=True)
class ResetConfig:
    pass


@dataclass(frozen=True)
class ResetFontSize:
    pass


@dataclass(frozen=True)
class ScreenshotVT:
    pass


@dataclass(frozen=True)
class ScrollDown:
    pass


@dataclass(frozen=True)
class ScrollMarkDown:
    pass


@dataclass(frozen=True)
class ScrollMarkUp:
    pass


@dataclass(frozen=True)
class ScrollOneDown:
    pass


@dataclass(frozen=True)
class ScrollOneUp:
    pass


@dataclass(frozen=True)
class ScrollPageDown:
    pass


@dataclass(frozen=True)
class ScrollPageUp:
    pass


@dataclass(frozen=True)
class ScrollToBottom:
    pass


@dataclass(frozen=True)
class ScrollToTop:
    pass


@dataclass(frozen=True)
class ScrollUp:
    pass


@dataclass(frozen=True)
class SearchReverse:
    pass


@dataclass(frozen=True)
class SendChars:
    chars: str


@dataclass(frozen=True)
class SwitchToPreviousTab:
    pass


@dataclass(frozen=True)
class SwitchToTab:
    position: int


@dataclass(frozen=True)
class SwitchToTabLeft:
    pass


@dataclass(frozen=True)
class SwitchToTabRight:
    pass


@dataclass(frozen=True)
class ToggleAllKeyMaps:
    pass


@dataclass(frozen=True)
class ToggleFullscreen:
    pass


@dataclass(frozen=True)
class ToggleInputProtection:
    pass


@dataclass(frozen=True)
class ToggleStatusLine:
    pass


@dataclass(frozen=True)
class ToggleTitleBar:
    pass


@dataclass(frozen=True)
class TraceBreakAtEmptyQueue:
    pass


@dataclass(frozen=True)
class TraceEnter:
    pass


@dataclass(frozen=True)
class TraceLeave:
    pass


@dataclass(frozen=True)
class TraceStep:
    pass


@dataclass(frozen=True)
class ViNormalMode:
    pass


@dataclass(frozen=True)
class WriteScreen:
    chars: str


Action = Union[
    CancelSelection,
    ChangeProfile,
    ClearHistoryAndReset,
    CloseTab,
    CopyPreviousMarkRange,
    CopySelection,
    CreateDebugDump,
    CreateNewTab,
    DecreaseFontSize,
    DecreaseOpacity,
    FocusNextSearchMatch,
    FocusPreviousSearchMatch,
    FollowHyperlink,
    IncreaseFontSize,
    IncreaseOpacity,
    MoveTabTo,
    MoveTabToLeft,
    MoveTabToRight,
    NewTerminal,
    NoSearchHighlight,
    OpenConfiguration,
    OpenFileManager,
    OpenSelection,
    PasteClipboard,
    PasteSelection,
    Quit,
    ReloadConfig,
    ResetConfig,
    ResetFontSize,
    ScreenshotVT,
    ScrollDown,
    ScrollMarkDown,
    ScrollMarkUp,
    ScrollOneDown,
    ScrollOneUp,
    ScrollPageDown,
    ScrollPageUp,
    ScrollToBottom,
    ScrollToTop,
    ScrollUp,
    SearchReverse,
    SendChars,
    SwitchToPreviousTab,
    SwitchToTab,
    SwitchToTabLeft,
    SwitchToTabRight,
    ToggleAllKeyMaps,
    ToggleFullscreen,
    ToggleInputProtection,
    ToggleStatusLine,
    ToggleTitleBar,
    TraceBreakAtEmptyQueue,
    TraceEnter,
    TraceLeave,
    TraceStep,
    ViNormalMode,
    WriteScreen,
]

ACTION_TYPES: tuple[type, ...] = Action.__args__
_ACTIONS_BY_NAME: dict[str, type] = {cls.__name__.lower(): cls for cls in ACTION_TYPES}


def _text(rule: Mapping[str, object], key: str) -> str:
    value = rule.get(key)
    if not isinstance(value, str):
        raise ConfigValueError(f"Action payload '{key}' must be a string")
    return value


def _optional_text(rule: Mapping[str, object], key: str) -> str | None:
    value = rule.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigValueError(f"Action payload '{key}' must be a string")
    return value or None


def _flag(rule: Mapping[str, object], key: str) -> bool:
    value = rule.get(key, False)
    if not isinstance(value, bool):
        raise ConfigValueError(f"Action payload '{key}' must be true or false")
    return value


def _position(rule: Mapping[str, object]) -> int:
    value = rule.get("position")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigValueError("Action payload 'position' must be a positive integer")
    return value


def _copy_format(rule: Mapping[str, object]) -> CopyFormat:
    raw = rule.get("format", CopyFormat.TEXT.value)
    for candidate in CopyFormat:
        if isinstance(raw, str) and raw.strip().lower() == candidate.value.lower():
            return candidate
    raise ConfigValueError(f"Unknown copy format: {raw!r}")


_PAYLOAD_DECODERS: dict[type, Callable[[Mapping[str, object]], Action]] = {
    ChangeProfile: lambda rule: ChangeProfile(name=_text(rule, "name")),
    CopySelection: lambda rule: CopySelection(format=_copy_format(rule)),
    MoveTabTo: lambda rule: MoveTabTo(position=_position(rule)),
    NewTerminal: lambda rule: NewTerminal(profile=_optional_text(rule, "profile")),
    PasteClipboard: lambda rule: PasteClipboard(strip=_flag(rule, "strip")),
    PasteSelection: lambda rule: PasteSelection(evaluate_in_shell=_flag(rule, "evaluate_in_shell")),
    ReloadConfig: lambda rule: ReloadConfig(profile=_optional_text(rule, "profile")),
    SendChars: lambda rule: SendChars(chars=_text(rule, "chars")),
    SwitchToTab: lambda rule: SwitchToTab(position=_position(rule)),
    WriteScreen: lambda rule: WriteScreen(chars=_text(rule, "chars")),
}

_PAYLOAD_ENCODERS: dict[type, Callable[[Action], dict[str, object]]] = {
    ChangeProfile: lambda action: {"name": action.name},
    CopySelection: lambda action: {"format": action.format.value},
    MoveTabTo: lambda action: {"position": action.position},
    NewTerminal: lambda action: {"profile": action.profile} if action.profile else {},
    PasteClipboard: lambda action: {"strip": action.strip},
    PasteSelection: lambda action: {"evaluate_in_shell": action.evaluate_in_shell},
    ReloadConfig: lambda action: {"profile": action.profile} if action.profile else {},
    SendChars: lambda action: {"chars": action.chars},
    SwitchToTab: lambda action: {"position": action.position},
    WriteScreen: lambda action: {"chars": action.chars},
}


def action_name(action: Action) -> str:
    return type(action).__name__


def action_from_rule(name: object, rule: Mapping[str, object]) -> Action:
    """Build the action called ``name``, reading payload keys from ``rule``."""
    if not isinstance(name, str) or not name.strip():
        raise ConfigValueError("Input mapping rule has no action name")
    cls = _ACTIONS_BY_NAME.get(name.strip().lower())
    if cls is None:
        raise ConfigValueError(f"Unknown action: {name!r}")
    decoder = _PAYLOAD_DECODERS.get(cls)
    if decoder is None:
        return cls()
    return decoder(rule)


def action_payload(action: Action) -> dict[str, object]:
    encoder = _PAYLOAD_ENCODERS.get(type(action))
    if encoder is None:
        return {}
    return encoder(action)


def describe_action(action: Action) -> str:
    payload = action_payload(action)
    if not payload:
        return action_name(action)
    details = ", ".join(f"{key}={value!r}" for key, value in payload.items())
    return f"{action_name(action)}({details})"
