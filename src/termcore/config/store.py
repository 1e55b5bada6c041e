"""XDG config file location, loading, saving and the live snapshot holder."""

from __future__ import annotations

import logging as py_logging
import os
import threading
from contextlib import suppress
from pathlib import Path

from .models import Config
from .reader import Diagnostic, DocumentReader
from .writer import serialize_config

logger = py_logging.getLogger(__name__)

CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
CONFIG_FILE_NAME = "termcore.yml"


def default_config_path() -> Path:
    config_home = os.getenv(CONFIG_HOME_ENV, "").strip()
    if config_home:
        return Path(config_home).expanduser() / "termcore" / CONFIG_FILE_NAME
    return Path("~/.config/termcore").expanduser() / CONFIG_FILE_NAME


def get_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        return default_config_path()
    return Path(path).expanduser()


def read_config(path: str | Path | None = None) -> tuple[Config, list[Diagnostic]]:
    """Load the document at ``path`` and return it with the reader's diagnostics."""
    resolved = get_config_path(path)
    if not resolved.exists():
        logger.debug("No config file at %s, using defaults", resolved)
        return Config(), []
    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read config file %s: %s", resolved, exc)
        return Config(), [Diagnostic(path="", message=f"cannot read {resolved}: {exc}")]
    reader = DocumentReader()
    config = reader.load(text)
    return config, list(reader.diagnostics)


def load_config(path: str | Path | None = None) -> Config:
    config, _ = read_config(path)
    return config


def save_config(config: Config, path: str | Path | None = None) -> Path:
    resolved = get_config_path(path)
    resolved.parent.mkdir(parents=True, exist_ok=True)
    resolved.write_text(serialize_config(config), encoding="utf-8")
    with suppress(OSError):
        resolved.chmod(0o600)
    logger.debug("Wrote config file %s", resolved)
    return resolved


def ensure_config_file(path: str | Path | None = None) -> Path:
    resolved = get_config_path(path)
    if resolved.exists():
        return resolved
    logger.info("Creating default config file at %s", resolved)
    return save_config(Config(), resolved)


class ConfigStore:
    """Holds the published ``Config`` snapshot.

    ``reload()`` builds a complete new ``Config`` before swapping it in, so a
    caller that already took ``current`` keeps a consistent snapshot.
    """

    def __init__(self, path: str | Path | None = None, config: Config | None = None) -> None:
        self.path = get_config_path(path)
        self._lock = threading.Lock()
        self._config = config if config is not None else Config()
        self._diagnostics: list[Diagnostic] = []

    @property
    def current(self) -> Config:
        with self._lock:
            return self._config

    @property
    def diagnostics(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._diagnostics)

    def reload(self) -> Config:
        config, diagnostics = read_config(self.path)
        with self._lock:
            self._config = config
            self._diagnostics = diagnostics
        logger.info(
            "Config reloaded from %s (%s diagnostics)", self.path, len(diagnostics)
        )
        return config

    def replace(self, config: Config) -> None:
        with self._lock:
            self._config = config
            self._diagnostics = []
        logger.info("Config snapshot replaced")
