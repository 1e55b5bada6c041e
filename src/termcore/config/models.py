"""Configuration value types, terminal profiles and the top-level Config."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from termcore.errors import ConfigValueError
from termcore.inputs import InputMappings, Modifier, default_input_mappings

from . import docs
from .entry import ConfigEntry, entry

DEFAULT_PROFILE_NAME = "main"
DEFAULT_COLOR_SCHEME = "default"


class CursorShape(str, Enum):
    BLOCK = "block"
    RECTANGLE = "rectangle"
    UNDERSCORE = "underscore"
    BAR = "bar"


class RenderingBackend(str, Enum):
    DEFAULT = "default"
    SOFTWARE = "software"
    OPENGL = "opengl"


class Permission(str, Enum):
    ALLOW = "allow"
    DENY = "deny"
    ASK = "ask"


class ScrollBarPosition(str, Enum):
    HIDDEN = "Hidden"
    LEFT = "Left"
    RIGHT = "Right"


class StatusDisplay(str, Enum):
    NONE = "none"
    INDICATOR = "indicator"


class StatusPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class VTType(str, Enum):
    VT100 = "VT100"
    VT220 = "VT220"
    VT240 = "VT240"
    VT330 = "VT330"
    VT340 = "VT340"
    VT320 = "VT320"
    VT420 = "VT420"
    VT510 = "VT510"
    VT520 = "VT520"
    VT525 = "VT525"


class FontLocator(str, Enum):
    NATIVE = "native"
    FONTCONFIG = "fontconfig"
    CORETEXT = "coretext"
    DWRITE = "dwrite"
    MOCK = "mock"


class TextShapingEngine(str, Enum):
    NATIVE = "native"
    OPEN_SHAPER = "open_shaper"
    DWRITE = "dwrite"
    CORETEXT = "coretext"


class RenderMode(str, Enum):
    LCD = "lcd"
    LIGHT = "light"
    GRAY = "gray"
    MONOCHROME = "monochrome"


class FontWeight(str, Enum):
    THIN = "thin"
    EXTRA_LIGHT = "extra_light"
    LIGHT = "light"
    DEMILIGHT = "demilight"
    BOOK = "book"
    NORMAL = "normal"
    MEDIUM = "medium"
    DEMIBOLD = "demibold"
    BOLD = "bold"
    EXTRA_BOLD = "extra_bold"
    BLACK = "black"
    EXTRA_BLACK = "extra_black"


class FontSlant(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class SelectionAction(str, Enum):
    COPY_TO_SELECTION_CLIPBOARD = "CopyToSelectionClipboard"
    COPY_TO_CLIPBOARD = "CopyToClipboard"
    NOTHING = "None"


class TerminalSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=80, ge=1)
    lines: int = Field(default=25, ge=1)


class Margins(BaseModel):
    model_config = ConfigDict(frozen=True)

    horizontal: int = Field(default=0, ge=0)
    vertical: int = Field(default=0, ge=0)


class FontDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    family: str = "monospace"
    weight: FontWeight = FontWeight.NORMAL
    slant: FontSlant = FontSlant.NORMAL
    features: tuple[str, ...] = ()


class ShellSpec(BaseModel):
    """Process launch descriptor handed to the PTY layer."""

    model_config = ConfigDict(frozen=True)

    program: str = ""
    arguments: tuple[str, ...] = ()
    working_directory: str = "~"
    environment: dict[str, str] = Field(default_factory=dict)


class SshHostConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = Field(default=22, ge=1, le=65535)
    user: str = ""
    private_key: str = ""
    public_key: str = ""
    known_hosts: str = "~/.ssh/known_hosts"
    forward_agent: bool = False


class BellConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    sound: str = "default"
    alert: bool = True
    volume: float = Field(default=1.0, ge=0.0, le=1.0)


class CursorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: CursorShape = CursorShape.BLOCK
    blinking: bool = False
    blinking_interval: timedelta = timedelta(milliseconds=500)


class SimpleColorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheme: str = DEFAULT_COLOR_SCHEME


class DualColorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    dark: str = DEFAULT_COLOR_SCHEME
    light: str = DEFAULT_COLOR_SCHEME


ColorConfig = Union[SimpleColorConfig, DualColorConfig]


class RGBColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)

    @classmethod
    def from_value(cls, value: object) -> RGBColor:
        """Accepts ``"#rrggbb"``, ``"0xrrggbb"`` or an integer ``0xrrggbb``."""
        if isinstance(value, bool):
            raise ConfigValueError(f"Invalid color: {value!r}")
        if isinstance(value, int):
            number = value
        elif isinstance(value, str):
            text = value.strip().lower()
            if text.startswith("#"):
                digits = text[1:]
            elif text.startswith("0x"):
                digits = text[2:]
            else:
                raise ConfigValueError(f"Invalid color: {value!r}")
            if len(digits) != 6:
                raise ConfigValueError(f"Invalid color: {value!r}")
            try:
                number = int(digits, 16)
            except ValueError as exc:
                raise ConfigValueError(f"Invalid color: {value!r}") from exc
        else:
            raise ConfigValueError(f"Invalid color: {value!r}")
        if number < 0 or number > 0xFFFFFF:
            raise ConfigValueError(f"Color out of range: {value!r}")
        return cls(red=(number >> 16) & 0xFF, green=(number >> 8) & 0xFF, blue=number & 0xFF)

    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def _rgb(value: int) -> RGBColor:
    return RGBColor.from_value(value)


ANSI_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

_NORMAL_COLORS = (0x000000, 0xCD0000, 0x00CD00, 0xCDCD00, 0x0000EE, 0xCD00CD, 0x00CDCD, 0xE5E5E5)
_BRIGHT_COLORS = (0x7F7F7F, 0xFF0000, 0x00FF00, 0xFFFF00, 0x5C5CFF, 0xFF00FF, 0x00FFFF, 0xFFFFFF)
_DIM_COLORS = (0x000000, 0x660000, 0x006600, 0x666600, 0x000077, 0x660066, 0x006666, 0x727272)


class ColorPalette(BaseModel):
    """Named color scheme consumed by the renderer."""

    model_config = ConfigDict(frozen=True)

    default_foreground: RGBColor = Field(default_factory=lambda: _rgb(0xD0D0D0))
    default_background: RGBColor = Field(default_factory=lambda: _rgb(0x1A1716))
    bright_foreground: RGBColor = Field(default_factory=lambda: _rgb(0xFFFFFF))
    dimmed_foreground: RGBColor = Field(default_factory=lambda: _rgb(0x808080))
    cursor_color: RGBColor = Field(default_factory=lambda: _rgb(0xBBBBBB))
    cursor_text_color: RGBColor = Field(default_factory=lambda: _rgb(0x1A1716))
    selection_foreground: RGBColor = Field(default_factory=lambda: _rgb(0xC0C0C0))
    selection_background: RGBColor = Field(default_factory=lambda: _rgb(0x404040))
    normal_colors: tuple[RGBColor, ...] = Field(
        default_factory=lambda: tuple(_rgb(value) for value in _NORMAL_COLORS),
        min_length=8,
        max_length=8,
    )
    bright_colors: tuple[RGBColor, ...] = Field(
        default_factory=lambda: tuple(_rgb(value) for value in _BRIGHT_COLORS),
        min_length=8,
        max_length=8,
    )
    dim_colors: tuple[RGBColor, ...] = Field(
        default_factory=lambda: tuple(_rgb(value) for value in _DIM_COLORS),
        min_length=8,
        max_length=8,
    )


def _cursor(shape: CursorShape, blinking: bool = False) -> CursorConfig:
    return CursorConfig(shape=shape, blinking=blinking)


class TerminalProfile(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    shell: ConfigEntry[ShellSpec] = entry(ShellSpec, ShellSpec(), docs.SHELL)
    ssh: ConfigEntry[SshHostConfig] = entry(SshHostConfig, SshHostConfig(), docs.SSH)
    escape_sandbox: ConfigEntry[bool] = entry(bool, True, docs.ESCAPE_SANDBOX)
    maximized: ConfigEntry[bool] = entry(bool, False, docs.MAXIMIZED)
    fullscreen: ConfigEntry[bool] = entry(bool, False, docs.FULLSCREEN)
    show_title_bar: ConfigEntry[bool] = entry(bool, True, docs.SHOW_TITLE_BAR)
    size_indicator_on_resize: ConfigEntry[bool] = entry(bool, True, docs.SIZE_INDICATOR_ON_RESIZE)
    wm_class: ConfigEntry[str] = entry(str, "termcore", docs.WM_CLASS)
    terminal_id: ConfigEntry[VTType] = entry(VTType, VTType.VT525, docs.TERMINAL_ID)
    terminal_size: ConfigEntry[TerminalSize] = entry(TerminalSize, TerminalSize(), docs.TERMINAL_SIZE)
    margins: ConfigEntry[Margins] = entry(Margins, Margins(), docs.MARGINS)
    tab_width: ConfigEntry[int] = entry(int, 8, docs.TAB_WIDTH)
    history_limit: ConfigEntry[Optional[int]] = entry(Optional[int], 1000, docs.HISTORY_LIMIT)
    auto_scroll_on_update: ConfigEntry[bool] = entry(bool, True, docs.AUTO_SCROLL_ON_UPDATE)
    history_scroll_multiplier: ConfigEntry[int] = entry(int, 3, docs.HISTORY_SCROLL_MULTIPLIER)
    scrollbar_position: ConfigEntry[ScrollBarPosition] = entry(
        ScrollBarPosition, ScrollBarPosition.RIGHT, docs.SCROLLBAR_POSITION
    )
    hide_scrollbar_in_alt_screen: ConfigEntry[bool] = entry(
        bool, True, docs.HIDE_SCROLLBAR_IN_ALT_SCREEN
    )
    hide_mouse_while_typing: ConfigEntry[bool] = entry(bool, True, docs.HIDE_MOUSE_WHILE_TYPING)
    capture_buffer: ConfigEntry[Permission] = entry(Permission, Permission.ASK, docs.CAPTURE_BUFFER)
    change_font: ConfigEntry[Permission] = entry(Permission, Permission.ASK, docs.CHANGE_FONT)
    display_host_writable_statusline: ConfigEntry[Permission] = entry(
        Permission, Permission.ASK, docs.DISPLAY_HOST_WRITABLE_STATUSLINE
    )
    highlight_double_click: ConfigEntry[bool] = entry(bool, True, docs.HIGHLIGHT_DOUBLE_CLICK)
    font_size: ConfigEntry[float] = entry(float, 12.0, docs.FONT_SIZE)
    font_dpi_scale: ConfigEntry[float] = entry(float, 1.0, docs.FONT_DPI_SCALE)
    font_locator: ConfigEntry[FontLocator] = entry(FontLocator, FontLocator.NATIVE, docs.FONT_LOCATOR)
    text_shaping_engine: ConfigEntry[TextShapingEngine] = entry(
        TextShapingEngine, TextShapingEngine.NATIVE, docs.TEXT_SHAPING_ENGINE
    )
    font_render_mode: ConfigEntry[RenderMode] = entry(RenderMode, RenderMode.GRAY, docs.FONT_RENDER_MODE)
    builtin_box_drawing: ConfigEntry[bool] = entry(bool, True, docs.BUILTIN_BOX_DRAWING)
    font_regular: ConfigEntry[FontDescription] = entry(
        FontDescription, FontDescription(), docs.FONT_REGULAR
    )
    font_bold: ConfigEntry[FontDescription] = entry(
        FontDescription, FontDescription(weight=FontWeight.BOLD), docs.FONT_BOLD
    )
    font_italic: ConfigEntry[FontDescription] = entry(
        FontDescription, FontDescription(slant=FontSlant.ITALIC), docs.FONT_ITALIC
    )
    font_bold_italic: ConfigEntry[FontDescription] = entry(
        FontDescription,
        FontDescription(weight=FontWeight.BOLD, slant=FontSlant.ITALIC),
        docs.FONT_BOLD_ITALIC,
    )
    font_emoji: ConfigEntry[str] = entry(str, "emoji", docs.FONT_EMOJI)
    draw_bold_text_with_bright_colors: ConfigEntry[bool] = entry(
        bool, False, docs.DRAW_BOLD_TEXT_WITH_BRIGHT_COLORS
    )
    insert_mode_cursor: ConfigEntry[CursorConfig] = entry(
        CursorConfig, _cursor(CursorShape.BAR, blinking=True), docs.CURSOR
    )
    normal_mode_cursor: ConfigEntry[CursorConfig] = entry(
        CursorConfig, _cursor(CursorShape.BLOCK), docs.MODAL_CURSOR
    )
    visual_mode_cursor: ConfigEntry[CursorConfig] = entry(
        CursorConfig, _cursor(CursorShape.BLOCK), docs.MODAL_CURSOR
    )
    vi_mode_highlight_timeout: ConfigEntry[timedelta] = entry(
        timedelta, timedelta(milliseconds=300), docs.VI_MODE_HIGHLIGHT_TIMEOUT
    )
    vi_mode_scrolloff: ConfigEntry[int] = entry(int, 8, docs.VI_MODE_SCROLLOFF)
    status_line_display: ConfigEntry[StatusDisplay] = entry(
        StatusDisplay, StatusDisplay.NONE, docs.STATUS_LINE_DISPLAY
    )
    status_line_position: ConfigEntry[StatusPosition] = entry(
        StatusPosition, StatusPosition.BOTTOM, docs.STATUS_LINE_POSITION
    )
    status_line_sync_to_window_title: ConfigEntry[bool] = entry(
        bool, False, docs.STATUS_LINE_SYNC_TO_WINDOW_TITLE
    )
    background_opacity: ConfigEntry[float] = entry(float, 1.0, docs.BACKGROUND_OPACITY)
    background_blur: ConfigEntry[bool] = entry(bool, False, docs.BACKGROUND_BLUR)
    bell: ConfigEntry[BellConfig] = entry(BellConfig, BellConfig(), docs.BELL)
    colors: ConfigEntry[ColorConfig] = entry(ColorConfig, SimpleColorConfig(), docs.COLORS)

    def color_scheme_name(self, *, dark: bool = True) -> str:
        colors = self.colors.value
        if isinstance(colors, DualColorConfig):
            return colors.dark if dark else colors.light
        return colors.scheme


class Config(BaseModel):
    """Fully resolved configuration snapshot.

    A loaded ``Config`` is shared read-only by the input, rendering and
    session layers; reloading builds a new instance instead of mutating this
    one.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    live_config: ConfigEntry[bool] = entry(bool, False, docs.LIVE_CONFIG)
    renderer_backend: ConfigEntry[RenderingBackend] = entry(
        RenderingBackend, RenderingBackend.DEFAULT, docs.RENDERER_BACKEND
    )
    tile_hashtable_slots: ConfigEntry[int] = entry(int, 4096, docs.TILE_HASHTABLE_SLOTS)
    tile_cache_count: ConfigEntry[int] = entry(int, 4000, docs.TILE_CACHE_COUNT)
    word_delimiters: ConfigEntry[str] = entry(str, " /\\()\"'-.,:;<>~!@#$%^&*+=[]{}~?|│", docs.WORD_DELIMITERS)
    read_buffer_size: ConfigEntry[int] = entry(int, 16384, docs.READ_BUFFER_SIZE)
    pty_buffer_size: ConfigEntry[int] = entry(int, 1048576, docs.PTY_BUFFER_SIZE)
    default_profile: ConfigEntry[str] = entry(str, DEFAULT_PROFILE_NAME, docs.DEFAULT_PROFILE)
    spawn_new_process: ConfigEntry[bool] = entry(bool, False, docs.SPAWN_NEW_PROCESS)
    reflow_on_resize: ConfigEntry[bool] = entry(bool, True, docs.REFLOW_ON_RESIZE)
    bypass_mouse_protocol_modifier: ConfigEntry[Modifier] = entry(
        Modifier, Modifier.SHIFT, docs.BYPASS_MOUSE_PROTOCOL_MODIFIER
    )
    on_mouse_select: ConfigEntry[SelectionAction] = entry(
        SelectionAction, SelectionAction.COPY_TO_SELECTION_CLIPBOARD, docs.ON_MOUSE_SELECT
    )
    mouse_block_selection_modifier: ConfigEntry[Modifier] = entry(
        Modifier, Modifier.CONTROL, docs.MOUSE_BLOCK_SELECTION_MODIFIER
    )
    sixel_scrolling: ConfigEntry[bool] = entry(bool, True, docs.SIXEL_SCROLLING)
    sixel_register_count: ConfigEntry[int] = entry(int, 4096, docs.SIXEL_REGISTER_COUNT)
    max_image_width: ConfigEntry[int] = entry(int, 0, docs.MAX_IMAGE_WIDTH)
    max_image_height: ConfigEntry[int] = entry(int, 0, docs.MAX_IMAGE_HEIGHT)

    profiles: dict[str, TerminalProfile] = Field(
        default_factory=lambda: {DEFAULT_PROFILE_NAME: TerminalProfile()}
    )
    color_schemes: dict[str, ColorPalette] = Field(
        default_factory=lambda: {DEFAULT_COLOR_SCHEME: ColorPalette()}
    )
    input_mappings: InputMappings = Field(default_factory=default_input_mappings)

    def profile(self, name: str | None = None) -> TerminalProfile:
        """Profile by name; unknown or missing names give the default profile.

        A ``default_profile`` naming no defined profile falls back to the
        first profile, and a config without profiles to a built-in one.
        """
        if name and name in self.profiles:
            return self.profiles[name]
        default = self.profiles.get(self.default_profile.value)
        if default is not None:
            return default
        return next(iter(self.profiles.values()), None) or TerminalProfile()

    def color_palette(self, profile_name: str | None = None, *, dark: bool = True) -> ColorPalette:
        scheme = self.profile(profile_name).color_scheme_name(dark=dark)
        return self.color_schemes.get(scheme) or self.color_schemes[DEFAULT_COLOR_SCHEME]
