"""Documentation templates emitted above each field of the YAML document.

``{comment}`` is replaced by the comment marker of the destination format.
"""

HEADER = """\
{comment} termcore configuration file
{comment}
{comment} Every field below is optional. A field that is missing or holds an
{comment} invalid value keeps its built-in default; the problem is logged and
{comment} loading continues with the next field.
"""

LIVE_CONFIG = """\
{comment} Reload the configuration automatically when this file changes.
"""

RENDERER = """\
{comment} Text rendering backend settings.
"""

RENDERER_BACKEND = """\
{comment} Backend used to draw the terminal grid.
{comment} One of: default, software, opengl.
"""

TILE_HASHTABLE_SLOTS = """\
{comment} Number of hashtable slots used to look up cached glyph tiles.
{comment} Must be a power of two.
"""

TILE_CACHE_COUNT = """\
{comment} Number of glyph tiles the texture atlas can hold.
"""

WORD_DELIMITERS = """\
{comment} Characters that delimit words when selecting by double-click.
"""

READ_BUFFER_SIZE = """\
{comment} Size in bytes of the buffer used per read from the PTY.
"""

PTY_BUFFER_SIZE = """\
{comment} Size in bytes of the ring buffer holding PTY output before parsing.
"""

DEFAULT_PROFILE = """\
{comment} Name of the profile used for new terminals. All other profiles
{comment} inherit every field they do not set from this one.
"""

SPAWN_NEW_PROCESS = """\
{comment} Open new windows in a separate process instead of a new thread.
"""

REFLOW_ON_RESIZE = """\
{comment} Rewrap wrapped lines when the terminal width changes.
"""

BYPASS_MOUSE_PROTOCOL_MODIFIER = """\
{comment} Modifier that forces local mouse handling (selection) while an
{comment} application has enabled mouse reporting.
"""

ON_MOUSE_SELECT = """\
{comment} What happens to text selected with the mouse.
{comment} One of: CopyToSelectionClipboard, CopyToClipboard, None.
"""

MOUSE_BLOCK_SELECTION_MODIFIER = """\
{comment} Modifier that switches mouse selection to rectangular blocks.
"""

IMAGES = """\
{comment} Inline image protocol settings.
"""

SIXEL_SCROLLING = """\
{comment} Scroll the screen when a sixel image reaches the bottom.
"""

SIXEL_REGISTER_COUNT = """\
{comment} Number of color registers available to sixel images.
"""

MAX_IMAGE_WIDTH = """\
{comment} Maximum accepted image width in pixels, 0 means unlimited.
"""

MAX_IMAGE_HEIGHT = """\
{comment} Maximum accepted image height in pixels, 0 means unlimited.
"""

PROFILES = """\
{comment} Terminal profiles, keyed by name.
"""

SHELL = """\
{comment} Process started in the terminal. Either a command line string or a
{comment} mapping with program, arguments, initial_working_directory and
{comment} environment. An empty program starts the login shell.
"""

SSH = """\
{comment} Connect to a remote host over SSH instead of spawning a local
{comment} process. Leave host empty to disable.
"""

ESCAPE_SANDBOX = """\
{comment} Spawn the shell outside of the application sandbox (Flatpak).
"""

MAXIMIZED = """\
{comment} Start the window maximized.
"""

FULLSCREEN = """\
{comment} Start the window in fullscreen mode.
"""

SHOW_TITLE_BAR = """\
{comment} Show the window title bar.
"""

SIZE_INDICATOR_ON_RESIZE = """\
{comment} Show the grid size in the window center while resizing.
"""

WM_CLASS = """\
{comment} Window class reported to the window manager.
"""

TERMINAL_ID = """\
{comment} Terminal type reported to applications (DA1/DA2).
{comment} One of: VT100, VT220, VT240, VT330, VT340, VT320, VT420, VT510,
{comment} VT520, VT525.
"""

TERMINAL_SIZE = """\
{comment} Initial size of the grid in columns and lines.
"""

MARGINS = """\
{comment} Padding in pixels between the window border and the grid.
"""

TAB_WIDTH = """\
{comment} Number of columns between horizontal tab stops.
"""

HISTORY = """\
{comment} Scrollback history settings.
"""

HISTORY_LIMIT = """\
{comment} Number of lines kept in scrollback; -1 keeps unlimited history.
"""

AUTO_SCROLL_ON_UPDATE = """\
{comment} Jump back to the bottom when new output arrives.
"""

HISTORY_SCROLL_MULTIPLIER = """\
{comment} Number of lines moved per scroll step.
"""

SCROLLBAR = """\
{comment} Scrollbar settings.
"""

SCROLLBAR_POSITION = """\
{comment} One of: Hidden, Left, Right.
"""

HIDE_SCROLLBAR_IN_ALT_SCREEN = """\
{comment} Hide the scrollbar while the alternate screen is active.
"""

MOUSE = """\
{comment} Mouse settings.
"""

HIDE_MOUSE_WHILE_TYPING = """\
{comment} Hide the mouse cursor while typing.
"""

PERMISSIONS = """\
{comment} How to answer requests from applications that need consent.
{comment} Each one of: allow, deny, ask.
"""

CAPTURE_BUFFER = """\
{comment} Allow applications to read back the screen contents.
"""

CHANGE_FONT = """\
{comment} Allow applications to change the font.
"""

DISPLAY_HOST_WRITABLE_STATUSLINE = """\
{comment} Allow applications to show the host-writable status line.
"""

HIGHLIGHT_DOUBLE_CLICK = """\
{comment} Highlight the double-clicked word and all of its other matches.
"""

FONT = """\
{comment} Font settings.
"""

FONT_SIZE = """\
{comment} Font size in points.
"""

FONT_DPI_SCALE = """\
{comment} Multiplier applied to the DPI reported by the display.
"""

FONT_LOCATOR = """\
{comment} Font discovery backend.
{comment} One of: native, fontconfig, coretext, dwrite, mock.
"""

TEXT_SHAPING = """\
{comment} Text shaping settings.
"""

TEXT_SHAPING_ENGINE = """\
{comment} One of: native, open_shaper, dwrite, coretext.
"""

FONT_RENDER_MODE = """\
{comment} Glyph rasterization mode.
{comment} One of: lcd, light, gray, monochrome.
"""

BUILTIN_BOX_DRAWING = """\
{comment} Draw box drawing characters without using the font.
"""

FONT_DESCRIPTION = """\
{comment} Either a family name or a mapping with family, weight, slant and
{comment} features (OpenType feature tags such as ss01 or -liga).
"""

FONT_REGULAR = """\
{comment} Font used for regular text.
"""

FONT_BOLD = """\
{comment} Font used for bold text.
"""

FONT_ITALIC = """\
{comment} Font used for italic text.
"""

FONT_BOLD_ITALIC = """\
{comment} Font used for bold italic text.
"""

FONT_EMOJI = """\
{comment} Font family used for emoji presentation.
"""

DRAW_BOLD_TEXT_WITH_BRIGHT_COLORS = """\
{comment} Render bold text in the bright variant of its color.
"""

CURSOR = """\
{comment} Cursor appearance in insert (normal terminal) mode.
{comment} shape is one of: block, rectangle, underscore, bar.
{comment} blinking_interval is in milliseconds.
"""

NORMAL_MODE = """\
{comment} Vi-like normal mode settings.
"""

VISUAL_MODE = """\
{comment} Vi-like visual mode settings.
"""

MODAL_CURSOR = """\
{comment} Cursor appearance while this mode is active.
"""

VI_MODE_HIGHLIGHT_TIMEOUT = """\
{comment} Time in milliseconds a yanked range stays highlighted.
"""

VI_MODE_SCROLLOFF = """\
{comment} Lines kept visible above and below the cursor in normal mode.
"""

STATUS_LINE = """\
{comment} Status line settings.
"""

STATUS_LINE_DISPLAY = """\
{comment} One of: none, indicator.
"""

STATUS_LINE_POSITION = """\
{comment} One of: top, bottom.
"""

STATUS_LINE_SYNC_TO_WINDOW_TITLE = """\
{comment} Mirror the status line into the window title.
"""

BACKGROUND = """\
{comment} Window background settings.
"""

BACKGROUND_OPACITY = """\
{comment} Background opacity between 0.0 (transparent) and 1.0 (opaque).
"""

BACKGROUND_BLUR = """\
{comment} Blur what is behind the window, where the platform supports it.
"""

BELL = """\
{comment} Bell settings. sound is "default", "off" or a path to a sound file;
{comment} alert requests attention from the window manager; volume is
{comment} between 0.0 and 1.0.
"""

COLORS = """\
{comment} Color scheme name, or a mapping with a dark and a light scheme
{comment} picked by the desktop color preference.
"""

COLOR_SCHEMES = """\
{comment} Color schemes, keyed by name. Colors are written as "#rrggbb".
"""

INPUT_MAPPING = """\
{comment} Input bindings, checked from top to bottom; the first rule matching
{comment} the key (or mouse button), the exact modifier set and the mode wins.
{comment} Rules with the same trigger run all their actions in order.
{comment}
{comment}   key:    named key (Enter, F1, PageUp, ...) or a single character
{comment}   mouse:  Left, Middle, Right, WheelUp, WheelDown, ...
{comment}   mods:   list of Alt, Control, Shift, Meta
{comment}   mode:   flags joined by |, prefixed with ~ when they must be off:
{comment}           Alt, AppCursor, AppKeypad, Insert, Select, Search, Trace
{comment}   action: action name, plus its parameters if it takes any
"""
