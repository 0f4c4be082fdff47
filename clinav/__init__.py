"""clinav: browse directories in the terminal, then ``cd`` the shell there."""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    # Imported on call so ``import clinav`` does not pull in termios.
    from .cli import main as cli_main

    cli_main(argv=argv)


__all__ = ["__version__", "main"]
