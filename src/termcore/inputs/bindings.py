"""Input binding tables and first-match resolution of live input events."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from .actions import Action
from .keys import Key, Modifier, MouseButton
from .modes import ANY_MODE, MatchModes, ModeFlag, matches

InputT = TypeVar("InputT", Key, str, MouseButton)
InputValue = Union[Key, str, MouseButton]


@dataclass
class InputBinding(Generic[InputT]):
    modes: MatchModes
    modifiers: Modifier
    input: InputT
    actions: list[Action] = field(default_factory=list)

    def trigger(self) -> tuple[MatchModes, Modifier, InputT]:
        return (self.modes, self.modifiers, self.input)

    def accepts(self, input: InputT, modifiers: Modifier, actual_modes: ModeFlag) -> bool:
        return (
            self.modifiers == modifiers
            and self.input == input
            and matches(actual_modes, self.modes)
        )


KeyBinding = InputBinding[Key]
CharBinding = InputBinding[str]
MouseBinding = InputBinding[MouseButton]


def resolve(
    bindings: Sequence[InputBinding[InputT]],
    input: InputT,
    modifiers: Modifier,
    actual_modes: ModeFlag,
) -> list[Action] | None:
    """Return the actions of the first binding accepting the event, else ``None``."""
    for binding in bindings:
        if binding.accepts(input, modifiers, actual_modes):
            return binding.actions
    return None


def append_or_create_binding(
    bindings: list[InputBinding[InputT]],
    modes: MatchModes,
    modifiers: Modifier,
    input: InputT,
    action: Action,
) -> InputBinding[InputT]:
    for binding in bindings:
        if binding.trigger() == (modes, modifiers, input):
            binding.actions.append(action)
            return binding
    binding = InputBinding(modes=modes, modifiers=modifiers, input=input, actions=[action])
    bindings.append(binding)
    return binding


def _channel_of(input: object) -> str:
    if isinstance(input, Key):
        return "key"
    if isinstance(input, MouseButton):
        return "mouse"
    if isinstance(input, str) and len(input) == 1:
        return "char"
    raise TypeError(f"Unsupported input trigger: {input!r}")


class InputMappings:
    """The three binding channels: named keys, characters and mouse buttons.

    Insertion order is precedence order. Once a ``Config`` is published the
    mappings are only read; resolution never mutates them.
    """

    def __init__(
        self,
        key_mappings: list[KeyBinding] | None = None,
        char_mappings: list[CharBinding] | None = None,
        mouse_mappings: list[MouseBinding] | None = None,
    ) -> None:
        self.key_mappings: list[KeyBinding] = list(key_mappings or [])
        self.char_mappings: list[CharBinding] = list(char_mappings or [])
        self.mouse_mappings: list[MouseBinding] = list(mouse_mappings or [])

    def add(
        self,
        input: InputValue,
        action: Action,
        *,
        modifiers: Modifier = Modifier.NONE,
        modes: MatchModes = ANY_MODE,
    ) -> InputBinding:
        channel = _channel_of(input)
        if channel == "key":
            return append_or_create_binding(self.key_mappings, modes, modifiers, input, action)
        if channel == "mouse":
            return append_or_create_binding(self.mouse_mappings, modes, modifiers, input, action)
        return append_or_create_binding(self.char_mappings, modes, modifiers, input, action)

    def resolve_key(
        self, key: Key, modifiers: Modifier, modes: ModeFlag = ModeFlag.NONE
    ) -> list[Action] | None:
        return resolve(self.key_mappings, key, modifiers, modes)

    def resolve_char(
        self, char: str, modifiers: Modifier, modes: ModeFlag = ModeFlag.NONE
    ) -> list[Action] | None:
        return resolve(self.char_mappings, char, modifiers, modes)

    def resolve_mouse(
        self, button: MouseButton, modifiers: Modifier, modes: ModeFlag = ModeFlag.NONE
    ) -> list[Action] | None:
        return resolve(self.mouse_mappings, button, modifiers, modes)

    def iter_bindings(self) -> Iterator[InputBinding]:
        yield from self.key_mappings
        yield from self.char_mappings
        yield from self.mouse_mappings

    def binding_count(self) -> int:
        return len(self.key_mappings) + len(self.char_mappings) + len(self.mouse_mappings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMappings):
            return NotImplemented
        return (
            self.key_mappings == other.key_mappings
            and self.char_mappings == other.char_mappings
            and self.mouse_mappings == other.mouse_mappings
        )

    def __repr__(self) -> str:
        return (
            f"InputMappings(keys={len(self.key_mappings)}, "
            f"chars={len(self.char_mappings)}, mice={len(self.mouse_mappings)})"
        )
