from __future__ import annotations

import io
import logging as py_logging
from pathlib import Path

import pytest

import termcore.logging as tc_logging


def test_default_log_path_uses_xdg_state_home(tmp_path: Path) -> None:
    path = tc_logging.default_log_path()

    assert path.is_absolute()
    assert path == (tmp_path / "state" / "termcore" / "termcore.log").resolve()


def test_default_log_path_falls_back_to_local_state(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_STATE_HOME", raising=False)

    path = tc_logging.default_log_path()

    assert path.name == "termcore.log"
    assert path.parent.name == "termcore"


def test_warning_alias_maps_to_warning_level() -> None:
    logger = tc_logging.configure_logging("warning")

    assert logger.level == tc_logging.LOG_LEVELS["WARN"]


def test_unknown_log_level_falls_back_to_info() -> None:
    assert tc_logging.resolve_level("not-a-level") == py_logging.INFO
    assert tc_logging.configure_logging("not-a-level").level == py_logging.INFO


def test_configure_logging_resets_existing_handlers() -> None:
    logger = tc_logging.configure_logging("INFO")
    assert len(logger.handlers) == 1

    logger = tc_logging.configure_logging("INFO")

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_child_loggers_write_to_configured_stream() -> None:
    stream = io.StringIO()
    tc_logging.configure_logging("WARN", stream=stream)

    py_logging.getLogger("termcore.config.reader").warning("Config %s", "live_config: bad")
    py_logging.getLogger("termcore.config.reader").info("hidden")

    assert "live_config: bad" in stream.getvalue()
    assert "hidden" not in stream.getvalue()


def test_configure_logging_adds_debug_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "termcore.log"

    logger = tc_logging.configure_logging("ERROR", log_file=log_file)
    file_handlers = [
        handler for handler in logger.handlers if isinstance(handler, py_logging.FileHandler)
    ]

    assert len(file_handlers) == 1
    assert file_handlers[0].level == py_logging.DEBUG
    assert logger.level == py_logging.DEBUG
    assert log_file.exists()


def test_configure_logging_ignores_file_handler_oserror(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def raise_os_error(*args: object, **kwargs: object) -> py_logging.Handler:
        raise OSError("disk full")

    monkeypatch.setattr(tc_logging.py_logging, "FileHandler", raise_os_error)

    logger = tc_logging.configure_logging("INFO", log_file=tmp_path / "nope" / "termcore.log")

    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is py_logging.StreamHandler
    assert logger.level == py_logging.INFO
