"""Logging setup for the termcore logger tree."""

from __future__ import annotations

import logging as py_logging
import os
import sys
from pathlib import Path
from typing import TextIO

LOG_LEVELS = {
    "DEBUG": py_logging.DEBUG,
    "INFO": py_logging.INFO,
    "WARN": py_logging.WARNING,
    "WARNING": py_logging.WARNING,
    "ERROR": py_logging.ERROR,
}
LOGGER_NAME = "termcore"
STATE_HOME_ENV = "XDG_STATE_HOME"
_LOG_FILE_NAME = "termcore.log"
_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def resolve_level(level: str) -> int:
    return LOG_LEVELS.get(level.strip().upper(), py_logging.INFO)


def default_log_path() -> Path:
    state_home = os.getenv(STATE_HOME_ENV, "").strip()
    if state_home:
        base = Path(state_home)
    else:
        try:
            base = Path("~/.local/state").expanduser()
        except RuntimeError:
            base = Path.cwd() / ".termcore"
    return (base / "termcore" / _LOG_FILE_NAME).resolve()


def _file_handler(log_file: str | Path, formatter: py_logging.Formatter) -> py_logging.Handler | None:
    try:
        log_path = Path(log_file).expanduser()
    except RuntimeError:
        log_path = Path(log_file)
    try:
        log_path.resolve().parent.mkdir(parents=True, exist_ok=True)
        handler = py_logging.FileHandler(log_path.resolve(), encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(py_logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: str = "INFO",
    stream: TextIO | None = None,
    *,
    log_file: str | Path | None = None,
) -> py_logging.Logger:
    """Reset the ``termcore`` logger to a stderr handler and an optional file.

    Config diagnostics are emitted at WARNING, so ``--log-level ERROR`` hides
    them from the terminal while the file handler still records them.
    """
    resolved = resolve_level(level)
    logger = py_logging.getLogger(LOGGER_NAME)
    logger.setLevel(py_logging.DEBUG if log_file else resolved)
    logger.handlers.clear()
    formatter = py_logging.Formatter(_FORMAT)

    console = py_logging.StreamHandler(stream or sys.stderr)
    console.setLevel(resolved)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = _file_handler(log_file, formatter)
        if file_handler is not None:
            logger.addHandler(file_handler)
        else:
            logger.setLevel(resolved)

    logger.propagate = False
    return logger
