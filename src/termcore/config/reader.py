"""YAML document reader with field-granular fallback to defaults.

Loading never raises for bad input. A document that is not valid YAML gives
a default ``Config``; a bad field keeps its default; a bad input-mapping rule
is skipped. Each of these is recorded as a ``Diagnostic`` and logged.
"""

from __future__ import annotations

import logging as py_logging
import shlex
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Optional, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from termcore.errors import ConfigValueError
from termcore.inputs import (
    InputMappings,
    action_from_rule,
    parse_key,
    parse_match_modes,
    parse_modifiers,
    parse_mouse_button,
)

from .models import (
    ANSI_COLOR_NAMES,
    DEFAULT_COLOR_SCHEME,
    BellConfig,
    ColorConfig,
    ColorPalette,
    Config,
    CursorConfig,
    CursorShape,
    DualColorConfig,
    FontDescription,
    FontSlant,
    FontWeight,
    Margins,
    Permission,
    RGBColor,
    ShellSpec,
    SimpleColorConfig,
    SshHostConfig,
    TerminalProfile,
    TerminalSize,
)
from .schema import GLOBAL_FIELDS, PALETTE_COLORS, PALETTE_TABLES, PROFILE_FIELDS, FieldKind, Leaf, Node, Section

logger = py_logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
V = TypeVar("V")

_FONT_FEATURE_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")


@dataclass(frozen=True)
class Diagnostic:
    path: str
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path}: {self.message}"


def _type_name(raw: object) -> str:
    if raw is None:
        return "null"
    return type(raw).__name__


def to_bool(raw: object) -> bool:
    if not isinstance(raw, bool):
        raise ConfigValueError(f"expected true or false, got {_type_name(raw)} {raw!r}")
    return raw


def to_int(raw: object, minimum: Optional[float] = None, maximum: Optional[float] = None) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigValueError(f"expected an integer, got {_type_name(raw)} {raw!r}")
    if minimum is not None and raw < minimum:
        raise ConfigValueError(f"{raw} is below the minimum of {minimum:g}")
    if maximum is not None and raw > maximum:
        raise ConfigValueError(f"{raw} is above the maximum of {maximum:g}")
    return raw


def to_float(raw: object, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ConfigValueError(f"expected a number, got {_type_name(raw)} {raw!r}")
    try:
        value = float(raw)
    except OverflowError as exc:
        raise ConfigValueError(f"number is out of range: {exc}") from exc
    if value != value:
        raise ConfigValueError("expected a number, got NaN")
    if minimum is not None and value < minimum:
        raise ConfigValueError(f"{value:g} is below the minimum of {minimum:g}")
    if maximum is not None and value > maximum:
        raise ConfigValueError(f"{value:g} is above the maximum of {maximum:g}")
    return value


def to_str(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise ConfigValueError(f"expected a string, got {_type_name(raw)} {raw!r}")


def to_duration(raw: object) -> timedelta:
    """Durations are written as whole milliseconds."""
    milliseconds = to_int(raw, minimum=0)
    try:
        return timedelta(milliseconds=milliseconds)
    except OverflowError as exc:
        raise ConfigValueError(f"{milliseconds} ms is out of range") from exc


def to_enum(raw: object, choices: type[E]) -> E:
    if isinstance(raw, str):
        wanted = raw.strip().lower()
        for member in choices:
            if str(member.value).lower() == wanted:
                return member
    allowed = ", ".join(str(member.value) for member in choices)
    raise ConfigValueError(f"invalid value {raw!r}, expected one of: {allowed}")


def to_permission(raw: object) -> Permission:
    if isinstance(raw, bool):
        return Permission.ALLOW if raw else Permission.DENY
    return to_enum(raw, Permission)


def to_str_list(raw: object) -> tuple[str, ...]:
    if isinstance(raw, str):
        try:
            return tuple(shlex.split(raw))
        except ValueError as exc:
            raise ConfigValueError(f"cannot split command line: {exc}") from exc
    if not isinstance(raw, list):
        raise ConfigValueError(f"expected a list of strings, got {_type_name(raw)}")
    return tuple(to_str(item) for item in raw)


def to_font_feature(raw: object) -> str:
    text = to_str(raw).strip()
    tag = text[1:] if text[:1] in ("+", "-") else text
    if len(tag) != 4 or not set(tag.lower()) <= _FONT_FEATURE_CHARS:
        raise ConfigValueError(f"invalid font feature tag {text!r}")
    return text


def to_mapping(raw: object) -> Mapping[Any, Any]:
    if not isinstance(raw, Mapping):
        raise ConfigValueError(f"expected a mapping, got {_type_name(raw)}")
    return raw


class DocumentReader:
    """Builds a ``Config`` from YAML text, collecting diagnostics on the way."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []
        self._loaders: dict[FieldKind, Callable[[object, Leaf, Any, str], Any]] = {
            FieldKind.BOOL: lambda raw, leaf, current, path: to_bool(raw),
            FieldKind.INT: lambda raw, leaf, current, path: to_int(raw, leaf.minimum, leaf.maximum),
            FieldKind.FLOAT: lambda raw, leaf, current, path: to_float(raw, leaf.minimum, leaf.maximum),
            FieldKind.STRING: lambda raw, leaf, current, path: to_str(raw),
            FieldKind.DURATION: lambda raw, leaf, current, path: to_duration(raw),
            FieldKind.HISTORY_LIMIT: lambda raw, leaf, current, path: self._load_history_limit(raw),
            FieldKind.ENUM: lambda raw, leaf, current, path: to_enum(raw, leaf.choices),
            FieldKind.PERMISSION: lambda raw, leaf, current, path: to_permission(raw),
            FieldKind.MODIFIER: lambda raw, leaf, current, path: parse_modifiers(raw),
            FieldKind.FONT: self._load_font,
            FieldKind.SHELL: self._load_shell,
            FieldKind.SSH: self._load_ssh,
            FieldKind.TERMINAL_SIZE: self._load_terminal_size,
            FieldKind.MARGINS: self._load_margins,
            FieldKind.BELL: self._load_bell,
            FieldKind.CURSOR: self._load_cursor,
            FieldKind.COLORS: self._load_colors,
        }

    def load(self, text: str) -> Config:
        self.diagnostics = []
        config = Config()
        try:
            root = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            self._fatal(f"document is not valid YAML: {exc}")
            return Config()
        except RecursionError:
            self._fatal("document is nested too deeply")
            return Config()
        if root is None:
            return config
        if not isinstance(root, Mapping):
            self._fatal(f"document root must be a mapping, got {_type_name(root)}")
            return Config()

        self._load_nodes(root, GLOBAL_FIELDS, config, "")
        self._load_color_schemes(root, config)
        self._load_profiles(root, config)
        self._load_input_mapping(root, config)
        logger.debug(
            "Loaded config profiles=%s schemes=%s bindings=%s diagnostics=%s",
            len(config.profiles),
            len(config.color_schemes),
            config.input_mappings.binding_count(),
            len(self.diagnostics),
        )
        return config

    def _report(self, path: str, message: str) -> None:
        diagnostic = Diagnostic(path=path, message=message)
        self.diagnostics.append(diagnostic)
        logger.warning("Config %s", diagnostic)

    def _fatal(self, message: str) -> None:
        diagnostic = Diagnostic(path="", message=message)
        self.diagnostics.append(diagnostic)
        logger.error("Config %s; using built-in defaults", diagnostic)

    def _load_nodes(
        self, node: Mapping[Any, Any], fields: tuple[Node, ...], target: BaseModel, path: str
    ) -> None:
        for field in fields:
            if field.key not in node:
                continue
            raw = node[field.key]
            field_path = f"{path}.{field.key}" if path else field.key
            if isinstance(field, Section):
                if raw is None:
                    continue
                if not isinstance(raw, Mapping):
                    self._report(field_path, f"expected a mapping, got {_type_name(raw)}")
                    continue
                self._load_nodes(raw, field.children, target, field_path)
                continue
            self._load_leaf(raw, field, target, field_path)

    def _load_leaf(self, raw: object, leaf: Leaf, target: BaseModel, path: str) -> None:
        entry = getattr(target, leaf.attr)
        try:
            entry.value = self._loaders[leaf.kind](raw, leaf, entry.value, path)
        except (ConfigValueError, ValidationError) as exc:
            self._report(path, _error_text(exc))

    def _sub(
        self,
        node: Mapping[Any, Any],
        key: str,
        convert: Callable[[object], V],
        fallback: V,
        path: str,
    ) -> V:
        """Sub-field of a composite value; a bad sub-field keeps ``fallback``."""
        if key not in node:
            return fallback
        try:
            return convert(node[key])
        except ConfigValueError as exc:
            self._report(f"{path}.{key}", str(exc))
            return fallback

    def _load_history_limit(self, raw: object) -> int | None:
        value = to_int(raw, minimum=-1)
        if value == -1:
            return None
        return value

    def _load_font(self, raw: object, leaf: Leaf, current: FontDescription, path: str) -> FontDescription:
        if isinstance(raw, str):
            return current.model_copy(update={"family": raw})
        node = to_mapping(raw)
        features = self._sub(node, "features", self._font_features(path), current.features, path)
        return FontDescription(
            family=self._sub(node, "family", to_str, current.family, path),
            weight=self._sub(node, "weight", lambda v: to_enum(v, FontWeight), current.weight, path),
            slant=self._sub(node, "slant", lambda v: to_enum(v, FontSlant), current.slant, path),
            features=features,
        )

    def _font_features(self, path: str) -> Callable[[object], tuple[str, ...]]:
        def convert(raw: object) -> tuple[str, ...]:
            if not isinstance(raw, list):
                raise ConfigValueError(f"expected a list of feature tags, got {_type_name(raw)}")
            features: list[str] = []
            for index, item in enumerate(raw):
                try:
                    features.append(to_font_feature(item))
                except ConfigValueError as exc:
                    self._report(f"{path}.features[{index}]", str(exc))
            return tuple(features)

        return convert

    def _load_shell(self, raw: object, leaf: Leaf, current: ShellSpec, path: str) -> ShellSpec:
        if isinstance(raw, str):
            try:
                parts = shlex.split(raw)
            except ValueError as exc:
                raise ConfigValueError(f"cannot split command line: {exc}") from exc
            return current.model_copy(
                update={"program": parts[0] if parts else "", "arguments": tuple(parts[1:])}
            )
        node = to_mapping(raw)
        return ShellSpec(
            program=self._sub(node, "program", to_str, current.program, path),
            arguments=self._sub(node, "arguments", to_str_list, current.arguments, path),
            working_directory=self._sub(
                node, "initial_working_directory", to_str, current.working_directory, path
            ),
            environment=self._sub(node, "environment", self._environment, current.environment, path),
        )

    def _environment(self, raw: object) -> dict[str, str]:
        if raw is None:
            return {}
        node = to_mapping(raw)
        return {to_str(name): "" if value is None else to_str(value) for name, value in node.items()}

    def _load_ssh(self, raw: object, leaf: Leaf, current: SshHostConfig, path: str) -> SshHostConfig:
        node = to_mapping(raw)
        return SshHostConfig(
            host=self._sub(node, "host", to_str, current.host, path),
            port=self._sub(node, "port", lambda v: to_int(v, 1, 65535), current.port, path),
            user=self._sub(node, "user", to_str, current.user, path),
            private_key=self._sub(node, "private_key", to_str, current.private_key, path),
            public_key=self._sub(node, "public_key", to_str, current.public_key, path),
            known_hosts=self._sub(node, "known_hosts", to_str, current.known_hosts, path),
            forward_agent=self._sub(node, "forward_agent", to_bool, current.forward_agent, path),
        )

    def _load_terminal_size(
        self, raw: object, leaf: Leaf, current: TerminalSize, path: str
    ) -> TerminalSize:
        node = to_mapping(raw)
        return TerminalSize(
            columns=self._sub(node, "columns", lambda v: to_int(v, minimum=1), current.columns, path),
            lines=self._sub(node, "lines", lambda v: to_int(v, minimum=1), current.lines, path),
        )

    def _load_margins(self, raw: object, leaf: Leaf, current: Margins, path: str) -> Margins:
        node = to_mapping(raw)
        return Margins(
            horizontal=self._sub(
                node, "horizontal", lambda v: to_int(v, minimum=0), current.horizontal, path
            ),
            vertical=self._sub(node, "vertical", lambda v: to_int(v, minimum=0), current.vertical, path),
        )

    def _load_bell(self, raw: object, leaf: Leaf, current: BellConfig, path: str) -> BellConfig:
        if isinstance(raw, str):
            return current.model_copy(update={"sound": raw})
        node = to_mapping(raw)
        return BellConfig(
            sound=self._sub(node, "sound", to_str, current.sound, path),
            alert=self._sub(node, "alert", to_bool, current.alert, path),
            volume=self._sub(node, "volume", lambda v: to_float(v, 0.0, 1.0), current.volume, path),
        )

    def _load_cursor(self, raw: object, leaf: Leaf, current: CursorConfig, path: str) -> CursorConfig:
        node = to_mapping(raw)
        return CursorConfig(
            shape=self._sub(node, "shape", lambda v: to_enum(v, CursorShape), current.shape, path),
            blinking=self._sub(node, "blinking", to_bool, current.blinking, path),
            blinking_interval=self._sub(
                node, "blinking_interval", to_duration, current.blinking_interval, path
            ),
        )

    def _load_colors(self, raw: object, leaf: Leaf, current: ColorConfig, path: str) -> ColorConfig:
        if isinstance(raw, str):
            return SimpleColorConfig(scheme=raw)
        node = to_mapping(raw)
        if "dark" not in node and "light" not in node:
            raise ConfigValueError("expected a scheme name or a mapping with dark and light")
        dark = self._sub(node, "dark", to_str, DEFAULT_COLOR_SCHEME, path)
        light = self._sub(node, "light", to_str, DEFAULT_COLOR_SCHEME, path)
        return DualColorConfig(dark=dark, light=light)

    def _load_color_schemes(self, root: Mapping[Any, Any], config: Config) -> None:
        raw = root.get("color_schemes")
        if raw is None:
            return
        if not isinstance(raw, Mapping):
            self._report("color_schemes", f"expected a mapping, got {_type_name(raw)}")
            return
        schemes: dict[str, ColorPalette] = {DEFAULT_COLOR_SCHEME: ColorPalette()}
        for name, subtree in raw.items():
            key = str(name)
            schemes[key] = self._load_palette(subtree, f"color_schemes.{key}")
        config.color_schemes = schemes

    def _load_palette(self, raw: object, path: str) -> ColorPalette:
        palette = ColorPalette()
        if raw is None:
            return palette
        if not isinstance(raw, Mapping):
            self._report(path, f"expected a mapping, got {_type_name(raw)}")
            return palette

        updates: dict[str, object] = {}
        for section, key, attr in PALETTE_COLORS:
            node = raw.get(section)
            if not isinstance(node, Mapping) or key not in node:
                continue
            try:
                updates[attr] = RGBColor.from_value(node[key])
            except (ConfigValueError, ValidationError) as exc:
                self._report(f"{path}.{section}.{key}", _error_text(exc))

        for section, attr in PALETTE_TABLES:
            node = raw.get(section)
            if node is None:
                continue
            if not isinstance(node, Mapping):
                self._report(f"{path}.{section}", f"expected a mapping, got {_type_name(node)}")
                continue
            colors = list(getattr(palette, attr))
            for index, color_name in enumerate(ANSI_COLOR_NAMES):
                if color_name not in node:
                    continue
                try:
                    colors[index] = RGBColor.from_value(node[color_name])
                except (ConfigValueError, ValidationError) as exc:
                    self._report(f"{path}.{section}.{color_name}", _error_text(exc))
            updates[attr] = tuple(colors)

        return palette.model_copy(update=updates)

    def _load_profiles(self, root: Mapping[Any, Any], config: Config) -> None:
        """Load the default profile first, then every other profile onto a copy of it."""
        default_name = config.default_profile.value
        raw = root.get("profiles")
        if raw is not None and not isinstance(raw, Mapping):
            self._report("profiles", f"expected a mapping, got {_type_name(raw)}")
            raw = None
        subtrees = {str(name): subtree for name, subtree in (raw or {}).items()}
        if not subtrees:
            config.profiles = {default_name: TerminalProfile()}
            return

        if default_name not in subtrees:
            fallback = next(iter(subtrees))
            self._report(
                "default_profile",
                f"profile {default_name!r} is not defined, using {fallback!r}",
            )
            default_name = fallback
            config.default_profile.value = fallback

        default_profile = self._load_profile(default_name, subtrees[default_name], TerminalProfile())
        profiles: dict[str, TerminalProfile] = {}
        for name, subtree in subtrees.items():
            if name == default_name:
                profiles[name] = default_profile
            else:
                profiles[name] = self._load_profile(name, subtree, default_profile.model_copy(deep=True))
        config.profiles = profiles

    def _load_profile(self, name: str, raw: object, base: TerminalProfile) -> TerminalProfile:
        path = f"profiles.{name}"
        if raw is None:
            return base
        if not isinstance(raw, Mapping):
            self._report(path, f"expected a mapping, got {_type_name(raw)}")
            return base
        self._load_nodes(raw, PROFILE_FIELDS, base, path)
        return base

    def _load_input_mapping(self, root: Mapping[Any, Any], config: Config) -> None:
        if "input_mapping" not in root:
            return
        raw = root["input_mapping"]
        if raw is None:
            config.input_mappings = InputMappings()
            return
        if not isinstance(raw, list):
            self._report("input_mapping", f"expected a list of rules, got {_type_name(raw)}")
            return
        mappings = InputMappings()
        for index, rule in enumerate(raw):
            try:
                self._load_rule(rule, mappings)
            except ConfigValueError as exc:
                self._report(f"input_mapping[{index}]", f"{exc}; rule skipped")
        config.input_mappings = mappings

    def _load_rule(self, rule: object, mappings: InputMappings) -> None:
        node = to_mapping(rule)
        has_key = "key" in node
        has_mouse = "mouse" in node
        if has_key == has_mouse:
            raise ConfigValueError("a rule needs exactly one of 'key' or 'mouse'")

        modifiers = parse_modifiers(node.get("mods"))
        modes = parse_match_modes(node.get("mode"))
        action = action_from_rule(node.get("action"), node)

        if has_mouse:
            mappings.add(parse_mouse_button(to_str(node["mouse"])), action, modifiers=modifiers, modes=modes)
            return
        key = to_str(node["key"])
        if len(key) == 1:
            mappings.add(key, action, modifiers=modifiers, modes=modes)
        else:
            mappings.add(parse_key(key), action, modifiers=modifiers, modes=modes)


def _error_text(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        errors = exc.errors()
        if errors:
            return str(errors[0].get("msg", exc))
    return str(exc)


def load_document(text: str) -> tuple[Config, list[Diagnostic]]:
    reader = DocumentReader()
    config = reader.load(text)
    return config, list(reader.diagnostics)
