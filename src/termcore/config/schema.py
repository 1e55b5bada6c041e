"""Document layout: which YAML key maps to which model attribute and loader.

Reader and writer walk the same trees, so a field added here is loaded and
serialized without further changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import docs
from .models import (
    FontLocator,
    Permission,
    RenderingBackend,
    RenderMode,
    ScrollBarPosition,
    SelectionAction,
    StatusDisplay,
    StatusPosition,
    TextShapingEngine,
    VTType,
)


class FieldKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    DURATION = "duration"
    HISTORY_LIMIT = "history_limit"
    ENUM = "enum"
    PERMISSION = "permission"
    MODIFIER = "modifier"
    FONT = "font"
    SHELL = "shell"
    SSH = "ssh"
    TERMINAL_SIZE = "terminal_size"
    MARGINS = "margins"
    BELL = "bell"
    CURSOR = "cursor"
    COLORS = "colors"


@dataclass(frozen=True)
class Leaf:
    key: str
    attr: str
    kind: FieldKind
    choices: Optional[type[Enum]] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None


@dataclass(frozen=True)
class Section:
    key: str
    documentation: str
    children: tuple[Node, ...]


Node = Union[Leaf, Section]


GLOBAL_FIELDS: tuple[Node, ...] = (
    Leaf("live_config", "live_config", FieldKind.BOOL),
    Section(
        "renderer",
        docs.RENDERER,
        (
            Leaf("backend", "renderer_backend", FieldKind.ENUM, choices=RenderingBackend),
            Leaf("tile_hashtable_slots", "tile_hashtable_slots", FieldKind.INT, minimum=1),
            Leaf("tile_cache_count", "tile_cache_count", FieldKind.INT, minimum=1),
        ),
    ),
    Leaf("word_delimiters", "word_delimiters", FieldKind.STRING),
    Leaf("read_buffer_size", "read_buffer_size", FieldKind.INT, minimum=1),
    Leaf("pty_buffer_size", "pty_buffer_size", FieldKind.INT, minimum=1),
    Leaf("default_profile", "default_profile", FieldKind.STRING),
    Leaf("spawn_new_process", "spawn_new_process", FieldKind.BOOL),
    Leaf("reflow_on_resize", "reflow_on_resize", FieldKind.BOOL),
    Leaf("bypass_mouse_protocol_modifier", "bypass_mouse_protocol_modifier", FieldKind.MODIFIER),
    Leaf("on_mouse_select", "on_mouse_select", FieldKind.ENUM, choices=SelectionAction),
    Leaf("mouse_block_selection_modifier", "mouse_block_selection_modifier", FieldKind.MODIFIER),
    Section(
        "images",
        docs.IMAGES,
        (
            Leaf("sixel_scrolling", "sixel_scrolling", FieldKind.BOOL),
            Leaf("sixel_register_count", "sixel_register_count", FieldKind.INT, minimum=1),
            Leaf("max_width", "max_image_width", FieldKind.INT, minimum=0),
            Leaf("max_height", "max_image_height", FieldKind.INT, minimum=0),
        ),
    ),
)


PROFILE_FIELDS: tuple[Node, ...] = (
    Leaf("shell", "shell", FieldKind.SHELL),
    Leaf("ssh", "ssh", FieldKind.SSH),
    Leaf("escape_sandbox", "escape_sandbox", FieldKind.BOOL),
    Leaf("maximized", "maximized", FieldKind.BOOL),
    Leaf("fullscreen", "fullscreen", FieldKind.BOOL),
    Leaf("show_title_bar", "show_title_bar", FieldKind.BOOL),
    Leaf("size_indicator_on_resize", "size_indicator_on_resize", FieldKind.BOOL),
    Leaf("wm_class", "wm_class", FieldKind.STRING),
    Leaf("terminal_id", "terminal_id", FieldKind.ENUM, choices=VTType),
    Leaf("terminal_size", "terminal_size", FieldKind.TERMINAL_SIZE),
    Leaf("margins", "margins", FieldKind.MARGINS),
    Leaf("tab_width", "tab_width", FieldKind.INT, minimum=1),
    Section(
        "history",
        docs.HISTORY,
        (
            Leaf("limit", "history_limit", FieldKind.HISTORY_LIMIT),
            Leaf("auto_scroll_on_update", "auto_scroll_on_update", FieldKind.BOOL),
            Leaf("scroll_multiplier", "history_scroll_multiplier", FieldKind.INT, minimum=1),
        ),
    ),
    Section(
        "scrollbar",
        docs.SCROLLBAR,
        (
            Leaf("position", "scrollbar_position", FieldKind.ENUM, choices=ScrollBarPosition),
            Leaf("hide_in_alt_screen", "hide_scrollbar_in_alt_screen", FieldKind.BOOL),
        ),
    ),
    Section(
        "mouse",
        docs.MOUSE,
        (Leaf("hide_while_typing", "hide_mouse_while_typing", FieldKind.BOOL),),
    ),
    Section(
        "permissions",
        docs.PERMISSIONS,
        (
            Leaf("capture_buffer", "capture_buffer", FieldKind.PERMISSION, choices=Permission),
            Leaf("change_font", "change_font", FieldKind.PERMISSION, choices=Permission),
            Leaf(
                "display_host_writable_statusline",
                "display_host_writable_statusline",
                FieldKind.PERMISSION,
                choices=Permission,
            ),
        ),
    ),
    Leaf("highlight_word_and_matches_on_double_click", "highlight_double_click", FieldKind.BOOL),
    Section(
        "font",
        docs.FONT,
        (
            Leaf("size", "font_size", FieldKind.FLOAT, minimum=4.0, maximum=256.0),
            Leaf("dpi_scale", "font_dpi_scale", FieldKind.FLOAT, minimum=0.1, maximum=10.0),
            Leaf("locator", "font_locator", FieldKind.ENUM, choices=FontLocator),
            Section(
                "text_shaping",
                docs.TEXT_SHAPING,
                (Leaf("engine", "text_shaping_engine", FieldKind.ENUM, choices=TextShapingEngine),),
            ),
            Leaf("render_mode", "font_render_mode", FieldKind.ENUM, choices=RenderMode),
            Leaf("builtin_box_drawing", "builtin_box_drawing", FieldKind.BOOL),
            Leaf("regular", "font_regular", FieldKind.FONT),
            Leaf("bold", "font_bold", FieldKind.FONT),
            Leaf("italic", "font_italic", FieldKind.FONT),
            Leaf("bold_italic", "font_bold_italic", FieldKind.FONT),
            Leaf("emoji", "font_emoji", FieldKind.STRING),
        ),
    ),
    Leaf("draw_bold_text_with_bright_colors", "draw_bold_text_with_bright_colors", FieldKind.BOOL),
    Leaf("cursor", "insert_mode_cursor", FieldKind.CURSOR),
    Section("normal_mode", docs.NORMAL_MODE, (Leaf("cursor", "normal_mode_cursor", FieldKind.CURSOR),)),
    Section("visual_mode", docs.VISUAL_MODE, (Leaf("cursor", "visual_mode_cursor", FieldKind.CURSOR),)),
    Leaf("vi_mode_highlight_timeout", "vi_mode_highlight_timeout", FieldKind.DURATION),
    Leaf("vi_mode_scrolloff", "vi_mode_scrolloff", FieldKind.INT, minimum=0),
    Section(
        "status_line",
        docs.STATUS_LINE,
        (
            Leaf("display", "status_line_display", FieldKind.ENUM, choices=StatusDisplay),
            Leaf("position", "status_line_position", FieldKind.ENUM, choices=StatusPosition),
            Leaf("sync_to_window_title", "status_line_sync_to_window_title", FieldKind.BOOL),
        ),
    ),
    Section(
        "background",
        docs.BACKGROUND,
        (
            Leaf("opacity", "background_opacity", FieldKind.FLOAT, minimum=0.0, maximum=1.0),
            Leaf("blur", "background_blur", FieldKind.BOOL),
        ),
    ),
    Leaf("bell", "bell", FieldKind.BELL),
    Leaf("colors", "colors", FieldKind.COLORS),
)


# (section, key, ColorPalette attribute)
PALETTE_COLORS: tuple[tuple[str, str, str], ...] = (
    ("default", "foreground", "default_foreground"),
    ("default", "background", "default_background"),
    ("default", "bright_foreground", "bright_foreground"),
    ("default", "dimmed_foreground", "dimmed_foreground"),
    ("cursor", "default", "cursor_color"),
    ("cursor", "text", "cursor_text_color"),
    ("selection", "foreground", "selection_foreground"),
    ("selection", "background", "selection_background"),
)

# (section, ColorPalette attribute holding the 8 ANSI colors)
PALETTE_TABLES: tuple[tuple[str, str], ...] = (
    ("normal", "normal_colors"),
    ("bright", "bright_colors"),
    ("dim", "dim_colors"),
)
