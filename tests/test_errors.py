from __future__ import annotations

import pytest

from termcore.errors import ConfigValueError, ExitCode, TermCoreError, user_facing_error


def test_exit_code_values_are_stable() -> None:
    assert int(ExitCode.SUCCESS) == 0
    assert int(ExitCode.INVALID_ARGS) == 2
    assert int(ExitCode.CONFIG_ERROR) == 3
    assert int(ExitCode.RUNTIME_ERROR) == 4


def test_termcore_error_defaults_to_runtime_error() -> None:
    error = TermCoreError("broken")

    assert error.code == ExitCode.RUNTIME_ERROR
    assert str(error) == "broken"


def test_termcore_error_string_includes_hint() -> None:
    error = TermCoreError("Config file not found", code=ExitCode.CONFIG_ERROR, hint="Create one.")

    assert str(error) == "Config file not found Hint: Create one."
    with pytest.raises(TermCoreError):
        raise error


def test_config_value_error_is_a_value_error() -> None:
    assert issubclass(ConfigValueError, ValueError)


def test_user_facing_error_formats_hint() -> None:
    assert user_facing_error("Bad input") == "Error: Bad input."
    assert user_facing_error("Bad input", hint="fix it") == "Error: Bad input. Next step: fix it"
