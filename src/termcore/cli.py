"""Command line entrypoint for generating and checking config files."""

from __future__ import annotations

import argparse
import logging as py_logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from termcore.config import Config, read_config, save_config, serialize_config
from termcore.config.store import get_config_path
from termcore.inputs import InputBinding, Key, MouseButton, describe_action, format_match_modes
from termcore.inputs.keys import format_modifiers

from .errors import ExitCode, TermCoreError, user_facing_error
from .logging import configure_logging, default_log_path

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def _log_level_type(value: str) -> str:
    normalized = value.upper()
    if normalized == "WARNING":
        normalized = "WARN"
    if normalized not in _VALID_LOG_LEVELS:
        accepted = ", ".join(_VALID_LOG_LEVELS)
        raise argparse.ArgumentTypeError(f"--log-level must be one of: {accepted}")
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termcore")
    parser.add_argument("--log-level", type=_log_level_type, default="WARN")
    parser.add_argument("--log-file", type=Path, default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Print or write the default config document")
    generate.add_argument("--output", type=Path, default=None)

    check = commands.add_parser("check", help="Load a config file and report problems")
    check.add_argument("path", type=Path, nargs="?", default=None)

    bindings = commands.add_parser("bindings", help="List the resolved input bindings")
    bindings.add_argument("path", type=Path, nargs="?", default=None)
    return parser


def format_binding(binding: InputBinding) -> list[str]:
    if isinstance(binding.input, (Key, MouseButton)):
        trigger = binding.input.value
    else:
        trigger = repr(binding.input)
    if binding.modifiers:
        trigger = f"{format_modifiers(binding.modifiers)}+{trigger}"
    if not binding.modes.any:
        trigger = f"{trigger} [{format_match_modes(binding.modes)}]"
    return [f"{trigger} -> {describe_action(action)}" for action in binding.actions]


def run_generate(namespace: argparse.Namespace, out: TextIO) -> int:
    if namespace.output is None:
        out.write(serialize_config(Config()))
        return int(ExitCode.SUCCESS)
    target = namespace.output.expanduser()
    if target.exists():
        raise TermCoreError(
            f"Refusing to overwrite {target}",
            code=ExitCode.INVALID_ARGS,
            hint="Choose another --output path or remove the existing file.",
        )
    try:
        written = save_config(Config(), target)
    except OSError as exc:
        raise TermCoreError(
            f"Cannot write {target}: {exc.strerror or exc}",
            code=ExitCode.RUNTIME_ERROR,
            hint="Check that the directory is writable.",
        ) from exc
    print(f"Wrote {written}", file=out)
    return int(ExitCode.SUCCESS)


def run_check(namespace: argparse.Namespace, out: TextIO) -> int:
    path = get_config_path(namespace.path)
    if not path.exists():
        raise TermCoreError(
            f"Config file not found: {path}",
            code=ExitCode.CONFIG_ERROR,
            hint=f"Run 'termcore generate --output {path}' to create one.",
        )
    config, diagnostics = read_config(path)
    for diagnostic in diagnostics:
        print(diagnostic, file=out)
    if diagnostics:
        print(f"{path}: {len(diagnostics)} problem(s) found", file=out)
        return int(ExitCode.CONFIG_ERROR)
    print(
        f"{path}: OK ({len(config.profiles)} profile(s), "
        f"{config.input_mappings.binding_count()} binding(s))",
        file=out,
    )
    return int(ExitCode.SUCCESS)


def run_bindings(namespace: argparse.Namespace, out: TextIO) -> int:
    config, _ = read_config(namespace.path)
    for binding in config.input_mappings.iter_bindings():
        for line in format_binding(binding):
            print(line, file=out)
    return int(ExitCode.SUCCESS)


_COMMANDS = {
    "generate": run_generate,
    "check": run_check,
    "bindings": run_bindings,
}


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    log_path = default_log_path()
    logger = configure_logging(log_file=log_path)
    parser = build_parser()
    try:
        namespace = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code not in (None, 0):
            logger.warning("Argument parsing failed with exit code %s", exc.code)
        return int(exc.code or 0)

    if namespace.log_file is not None:
        log_path = namespace.log_file.expanduser()
    logger = configure_logging(level=namespace.log_level, log_file=log_path)
    stream = out or sys.stdout

    try:
        logger.debug("Running command %s", namespace.command)
        return _COMMANDS[namespace.command](namespace, stream)
    except TermCoreError as exc:
        logger.error(
            "Handled TermCoreError (code=%s): %s",
            int(exc.code),
            exc.message,
            exc_info=logger.isEnabledFor(py_logging.DEBUG),
        )
        print(user_facing_error(exc.message, hint=exc.hint), file=sys.stderr)
        return int(exc.code)
    except Exception:
        logger.exception("Unhandled exception in CLI entrypoint")
        hint = f"Inspect logs: {log_path}"
        print(user_facing_error("Unexpected runtime failure", hint=hint), file=sys.stderr)
        return int(ExitCode.RUNTIME_ERROR)


def run(argv: Sequence[str] | None = None) -> int:
    return main(argv)
