"""Module entrypoint for `python -m termcore`."""

from termcore.cli import run

if __name__ == "__main__":
    raise SystemExit(run())
