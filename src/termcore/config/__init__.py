"""Configuration model, YAML reader/writer and the config file store."""

from .entry import ConfigEntry
from .models import (
    DEFAULT_COLOR_SCHEME,
    DEFAULT_PROFILE_NAME,
    BellConfig,
    ColorPalette,
    Config,
    CursorConfig,
    CursorShape,
    DualColorConfig,
    FontDescription,
    Margins,
    Permission,
    RGBColor,
    ShellSpec,
    SimpleColorConfig,
    SshHostConfig,
    TerminalProfile,
    TerminalSize,
)
from .reader import Diagnostic, DocumentReader, load_document
from .store import (
    ConfigStore,
    default_config_path,
    ensure_config_file,
    load_config,
    read_config,
    save_config,
)
from .writer import DocumentWriter, serialize_config

__all__ = [
    "BellConfig",
    "ColorPalette",
    "Config",
    "ConfigEntry",
    "ConfigStore",
    "CursorConfig",
    "CursorShape",
    "DEFAULT_COLOR_SCHEME",
    "DEFAULT_PROFILE_NAME",
    "default_config_path",
    "Diagnostic",
    "DocumentReader",
    "DocumentWriter",
    "DualColorConfig",
    "ensure_config_file",
    "FontDescription",
    "load_config",
    "load_document",
    "Margins",
    "Permission",
    "read_config",
    "RGBColor",
    "save_config",
    "serialize_config",
    "ShellSpec",
    "SimpleColorConfig",
    "SshHostConfig",
    "TerminalProfile",
    "TerminalSize",
]
