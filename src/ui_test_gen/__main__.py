"""Module entry point for `python -m ui_test_gen`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
