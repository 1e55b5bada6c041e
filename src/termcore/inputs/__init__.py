"""Input-dispatch core: mode predicates, binding tables and actions."""

from .actions import Action, action_from_rule, action_name, action_payload, describe_action
from .bindings import (
    CharBinding,
    InputBinding,
    InputMappings,
    KeyBinding,
    MouseBinding,
    append_or_create_binding,
    resolve,
)
from .defaults import default_input_mappings
from .keys import Key, Modifier, MouseButton, parse_key, parse_modifiers, parse_mouse_button
from .modes import (
    ANY_MODE,
    MatchModes,
    MatchStatus,
    ModeFlag,
    format_match_modes,
    matches,
    parse_match_modes,
)

__all__ = [
    "ANY_MODE",
    "Action",
    "action_from_rule",
    "action_name",
    "action_payload",
    "append_or_create_binding",
    "CharBinding",
    "default_input_mappings",
    "describe_action",
    "format_match_modes",
    "InputBinding",
    "InputMappings",
    "Key",
    "KeyBinding",
    "MatchModes",
    "MatchStatus",
    "matches",
    "ModeFlag",
    "Modifier",
    "MouseBinding",
    "MouseButton",
    "parse_key",
    "parse_match_modes",
    "parse_modifiers",
    "parse_mouse_button",
    "resolve",
]
