from __future__ import annotations

import runpy

import pytest

from termcore import cli


def test_module_entrypoint_exits_with_cli_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "run", lambda: 3)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("termcore.__main__", run_name="__main__")

    assert excinfo.value.code == 3
