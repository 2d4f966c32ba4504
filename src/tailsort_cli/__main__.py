"""Entry point for ``python -m tailsort_cli``."""

from __future__ import annotations


def main() -> None:
    from tailsort_cli.cli import app

    app()


if __name__ == "__main__":
    main()
