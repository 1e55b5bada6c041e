"""Commented YAML emitter for ``Config``.

Every field is written, documentation first, so a generated file doubles as
reference documentation. The output is read back by ``DocumentReader`` into
an equal ``Config``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from datetime import timedelta
from enum import Enum
from typing import Any, Union

from termcore.inputs import (
    Action,
    InputBinding,
    Key,
    Modifier,
    MouseButton,
    action_name,
    action_payload,
    format_match_modes,
)
from termcore.inputs.keys import modifier_names

from . import docs
from .entry import COMMENT_PLACEHOLDER
from .models import (
    ANSI_COLOR_NAMES,
    BellConfig,
    ColorPalette,
    Config,
    CursorConfig,
    DualColorConfig,
    FontDescription,
    Margins,
    ShellSpec,
    SimpleColorConfig,
    SshHostConfig,
    TerminalSize,
)
from .schema import GLOBAL_FIELDS, PALETTE_COLORS, PALETTE_TABLES, PROFILE_FIELDS, FieldKind, Leaf, Node, Section

_PLAIN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
_RESERVED = frozenset({"true", "false", "yes", "no", "on", "off", "y", "n", "null", "none"})
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}
_ALWAYS_ESCAPED = frozenset({0x7F, 0x85, 0x2028, 0x2029, 0xFEFF})

Rendered = Union[str, Mapping[str, Any]]


def _escape(value: str) -> str:
    parts: list[str] = []
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
            continue
        code = ord(char)
        if code >= 0x20 and code not in _ALWAYS_ESCAPED and char.isprintable():
            parts.append(char)
        elif code <= 0xFF:
            parts.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return "".join(parts)


def _quote(value: str) -> str:
    return f'"{_escape(value)}"'


def _symbol(value: str) -> str:
    """Identifier-like text is written plain, anything else quoted."""
    if _PLAIN.fullmatch(value) and value.lower() not in _RESERVED:
        return value
    return _quote(value)


def _float(value: float) -> str:
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text = repr(value)
    if "e" in text and "." not in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}.0e{exponent}"
    return text


def _flow(items: Iterable[Any], render: Callable[[Any], str]) -> str:
    return "[" + ", ".join(render(item) for item in items) + "]"


def _scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _symbol(str(value.value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (list, tuple)):
        return _flow(value, _scalar)
    raise TypeError(f"Unsupported YAML scalar type: {type(value)!r}")


def _milliseconds(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


def _modifiers(value: Modifier) -> str:
    return _flow(modifier_names(value), _symbol)


def _font(value: FontDescription) -> Rendered:
    return {
        "family": value.family,
        "weight": value.weight,
        "slant": value.slant,
        "features": list(value.features),
    }


def _shell(value: ShellSpec) -> Rendered:
    return {
        "program": value.program,
        "arguments": list(value.arguments),
        "initial_working_directory": value.working_directory,
        "environment": dict(value.environment),
    }


def _ssh(value: SshHostConfig) -> Rendered:
    return {
        "host": value.host,
        "port": value.port,
        "user": value.user,
        "private_key": value.private_key,
        "public_key": value.public_key,
        "known_hosts": value.known_hosts,
        "forward_agent": value.forward_agent,
    }


def _terminal_size(value: TerminalSize) -> Rendered:
    return {"columns": value.columns, "lines": value.lines}


def _margins(value: Margins) -> Rendered:
    return {"horizontal": value.horizontal, "vertical": value.vertical}


def _bell(value: BellConfig) -> Rendered:
    return {"sound": value.sound, "alert": value.alert, "volume": value.volume}


def _cursor(value: CursorConfig) -> Rendered:
    return {
        "shape": value.shape,
        "blinking": value.blinking,
        "blinking_interval": _milliseconds(value.blinking_interval),
    }


def _colors(value: SimpleColorConfig | DualColorConfig) -> Rendered:
    if isinstance(value, DualColorConfig):
        return {"dark": value.dark, "light": value.light}
    return _quote(value.scheme)


_RENDERERS: dict[FieldKind, Callable[[Any], Rendered]] = {
    FieldKind.BOOL: _scalar,
    FieldKind.INT: _scalar,
    FieldKind.FLOAT: lambda value: _float(float(value)),
    FieldKind.STRING: _quote,
    FieldKind.DURATION: lambda value: str(_milliseconds(value)),
    FieldKind.HISTORY_LIMIT: lambda value: "-1" if value is None else str(value),
    FieldKind.ENUM: _scalar,
    FieldKind.PERMISSION: _scalar,
    FieldKind.MODIFIER: _modifiers,
    FieldKind.FONT: _font,
    FieldKind.SHELL: _shell,
    FieldKind.SSH: _ssh,
    FieldKind.TERMINAL_SIZE: _terminal_size,
    FieldKind.MARGINS: _margins,
    FieldKind.BELL: _bell,
    FieldKind.CURSOR: _cursor,
    FieldKind.COLORS: _colors,
}


def _palette(palette: ColorPalette) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    for section, key, attr in PALETTE_COLORS:
        sections.setdefault(section, {})[key] = getattr(palette, attr).hex()
    for section, attr in PALETTE_TABLES:
        colors = getattr(palette, attr)
        sections[section] = {name: color.hex() for name, color in zip(ANSI_COLOR_NAMES, colors)}
    return sections


def _rule(binding: InputBinding, action: Action) -> str:
    parts: list[str] = []
    if binding.modifiers != Modifier.NONE:
        parts.append(f"mods: {_modifiers(binding.modifiers)}")
    if isinstance(binding.input, MouseButton):
        parts.append(f"mouse: {_symbol(binding.input.value)}")
    elif isinstance(binding.input, Key):
        parts.append(f"key: {_symbol(binding.input.value)}")
    else:
        parts.append(f"key: {_quote(binding.input)}")
    if not binding.modes.any:
        parts.append(f"mode: {_quote(format_match_modes(binding.modes))}")
    parts.append(f"action: {_symbol(action_name(action))}")
    for name, value in action_payload(action).items():
        parts.append(f"{name}: {_scalar(value)}")
    return "- { " + ", ".join(parts) + " }"


class DocumentWriter:
    def __init__(self, comment: str = "#", indent_width: int = 4) -> None:
        self.comment = comment
        self.indent_width = indent_width
        self._lines: list[str] = []
        self._depth = 0

    def serialize(self, config: Config) -> str:
        self._lines = []
        self._depth = 0
        self._documentation(docs.HEADER)
        self._write_nodes(GLOBAL_FIELDS, config)

        self._lines.append("")
        self._documentation(docs.PROFILES)
        self._line("profiles:")
        with self._indented():
            for name, profile in config.profiles.items():
                self._line(f"{_symbol(name)}:")
                with self._indented():
                    self._write_nodes(PROFILE_FIELDS, profile)

        self._lines.append("")
        self._documentation(docs.COLOR_SCHEMES)
        self._line("color_schemes:")
        with self._indented():
            for name, palette in config.color_schemes.items():
                self._write_mapping(_symbol(name), _palette(palette))

        self._lines.append("")
        self._documentation(docs.INPUT_MAPPING)
        rules = list(self._rules(config))
        if not rules:
            self._line("input_mapping: []")
        else:
            self._line("input_mapping:")
            with self._indented():
                for rule in rules:
                    self._line(rule)
        return "\n".join(self._lines) + "\n"

    @contextmanager
    def _indented(self) -> Iterator[None]:
        previous = self._depth
        self._depth += 1
        try:
            yield
        finally:
            self._depth = previous

    def _line(self, text: str) -> None:
        self._lines.append(" " * (self._depth * self.indent_width) + text)

    def _documentation(self, template: str) -> None:
        for line in template.replace(COMMENT_PLACEHOLDER, self.comment).splitlines():
            self._line(line)

    def _write_nodes(self, fields: tuple[Node, ...], target: Any) -> None:
        for field in fields:
            if self._depth == 0:
                self._lines.append("")
            if isinstance(field, Section):
                self._documentation(field.documentation)
                self._line(f"{field.key}:")
                with self._indented():
                    self._write_nodes(field.children, target)
                continue
            self._write_leaf(field, target)

    def _write_leaf(self, leaf: Leaf, target: Any) -> None:
        entry = getattr(target, leaf.attr)
        for line in entry.render_documentation(self.comment).splitlines():
            self._line(line)
        rendered = _RENDERERS[leaf.kind](entry.value)
        if isinstance(rendered, str):
            self._line(f"{leaf.key}: {rendered}")
        else:
            self._write_mapping(leaf.key, rendered)

    def _write_mapping(self, key: str, mapping: Mapping[str, Any]) -> None:
        if not mapping:
            self._line(f"{key}: {{}}")
            return
        self._line(f"{key}:")
        with self._indented():
            for name, value in mapping.items():
                if isinstance(value, Mapping):
                    self._write_mapping(_symbol(str(name)), value)
                else:
                    self._line(f"{_symbol(str(name))}: {_scalar(value)}")

    def _rules(self, config: Config) -> Iterator[str]:
        for binding in config.input_mappings.iter_bindings():
            for action in binding.actions:
                yield _rule(binding, action)


def serialize_config(config: Config, comment: str = "#") -> str:
    return DocumentWriter(comment=comment).serialize(config)
