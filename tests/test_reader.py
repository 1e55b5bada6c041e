from __future__ import annotations

from datetime import timedelta

from termcore.config import (
    Config,
    CursorShape,
    DocumentReader,
    DualColorConfig,
    Permission,
    RGBColor,
    SimpleColorConfig,
    load_document,
)
from termcore.config.models import FontSlant, FontWeight, RenderingBackend, ScrollBarPosition, VTType
from termcore.inputs import Modifier


def test_empty_document_gives_defaults() -> None:
    config, diagnostics = load_document("")

    assert diagnostics == []
    assert config == Config()


def test_global_settings_are_loaded() -> None:
    config, diagnostics = load_document(
        """
live_config: true
renderer:
    backend: OpenGL
    tile_cache_count: 2000
word_delimiters: " ,;"
read_buffer_size: 4096
bypass_mouse_protocol_modifier: [Alt, Control]
on_mouse_select: CopyToClipboard
images:
    sixel_scrolling: false
    max_width: 1920
"""
    )

    assert diagnostics == []
    assert config.live_config.value is True
    assert config.renderer_backend.value is RenderingBackend.OPENGL
    assert config.tile_cache_count.value == 2000
    assert config.tile_hashtable_slots.value == 4096
    assert config.word_delimiters.value == " ,;"
    assert config.read_buffer_size.value == 4096
    assert config.bypass_mouse_protocol_modifier.value == Modifier.ALT | Modifier.CONTROL
    assert config.on_mouse_select.value.value == "CopyToClipboard"
    assert config.sixel_scrolling.value is False
    assert config.max_image_width.value == 1920


def test_profile_fields_are_loaded() -> None:
    config, diagnostics = load_document(
        """
profiles:
    main:
        shell: "/bin/zsh -l"
        terminal_id: vt340
        terminal_size: {columns: 120, lines: 40}
        tab_width: 4
        history:
            limit: -1
            scroll_multiplier: 5
        scrollbar:
            position: Left
        permissions:
            capture_buffer: true
            change_font: deny
        font:
            size: 14
            regular:
                family: Iosevka
                weight: medium
                features: [ss01, "-liga"]
            italic: Fira Code
        cursor:
            shape: underscore
            blinking: false
            blinking_interval: 250
        vi_mode_highlight_timeout: 150
        bell: "off"
        colors: {dark: night, light: day}
"""
    )
    profile = config.profile()

    assert diagnostics == []
    assert profile.shell.value.program == "/bin/zsh"
    assert profile.shell.value.arguments == ("-l",)
    assert profile.terminal_id.value is VTType.VT340
    assert (profile.terminal_size.value.columns, profile.terminal_size.value.lines) == (120, 40)
    assert profile.tab_width.value == 4
    assert profile.history_limit.value is None
    assert profile.history_scroll_multiplier.value == 5
    assert profile.scrollbar_position.value is ScrollBarPosition.LEFT
    assert profile.capture_buffer.value is Permission.ALLOW
    assert profile.change_font.value is Permission.DENY
    assert profile.font_size.value == 14.0
    assert profile.font_regular.value.family == "Iosevka"
    assert profile.font_regular.value.weight is FontWeight.MEDIUM
    assert profile.font_regular.value.features == ("ss01", "-liga")
    assert profile.font_italic.value.family == "Fira Code"
    assert profile.font_italic.value.slant is FontSlant.ITALIC
    assert profile.insert_mode_cursor.value.shape is CursorShape.UNDERSCORE
    assert profile.insert_mode_cursor.value.blinking_interval == timedelta(milliseconds=250)
    assert profile.vi_mode_highlight_timeout.value == timedelta(milliseconds=150)
    assert profile.bell.value.sound == "off"
    assert profile.colors.value == DualColorConfig(dark="night", light="day")
    assert profile.color_scheme_name(dark=False) == "day"


def test_shell_mapping_form() -> None:
    config, diagnostics = load_document(
        """
profiles:
    main:
        shell:
            program: bash
            arguments: ["-c", "echo hi"]
            initial_working_directory: /tmp
            environment:
                TERM: xterm-256color
                EMPTY:
"""
    )
    shell = config.profile().shell.value

    assert diagnostics == []
    assert shell.program == "bash"
    assert shell.arguments == ("-c", "echo hi")
    assert shell.working_directory == "/tmp"
    assert shell.environment == {"TERM": "xterm-256color", "EMPTY": ""}


def test_color_schemes_are_loaded_over_builtin_palette() -> None:
    config, diagnostics = load_document(
        """
color_schemes:
    night:
        default:
            background: "#000000"
            foreground: 0xffffff
        normal:
            red: "#ff0000"
profiles:
    main:
        colors: night
"""
    )
    palette = config.color_palette()

    assert diagnostics == []
    assert set(config.color_schemes) == {"default", "night"}
    assert palette.default_background == RGBColor(red=0, green=0, blue=0)
    assert palette.default_foreground.hex() == "#ffffff"
    assert palette.normal_colors[1].hex() == "#ff0000"
    assert palette.normal_colors[0] == config.color_schemes["default"].normal_colors[0]


def test_unknown_color_scheme_falls_back_to_default_palette() -> None:
    config, _ = load_document("profiles:\n    main:\n        colors: missing\n")

    assert config.profile().colors.value == SimpleColorConfig(scheme="missing")
    assert config.color_palette() == config.color_schemes["default"]


def test_reader_instance_resets_diagnostics_between_loads() -> None:
    reader = DocumentReader()

    reader.load("live_config: maybe\n")
    assert len(reader.diagnostics) == 1

    reader.load("live_config: true\n")
    assert reader.diagnostics == []
