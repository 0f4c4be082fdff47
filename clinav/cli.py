"""Command-line front door for clinav.

Parses options, sets up logging, runs the browser on the start directory,
then hands the final directory to the shell.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .app import run_browser
from .logs import configure_logging
from .shell import hand_off, shell_function
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _log_level(value: str) -> int:
    """argparse type for logging level names."""
    level = config.parse_log_level(value)
    if level is None:
        raise argparse.ArgumentTypeError(f"invalid log level: {value!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clinav",
        description="Browse directories in the terminal and cd the shell into the last one.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    # The shell function always passes --cd-file, so it overrides --clipboard
    # rather than conflicting with it.
    parser.add_argument(
        "--cd-file",
        type=Path,
        default=None,
        help="Write the final cd command to this file. Takes precedence over --clipboard.",
    )
    parser.add_argument(
        "--clipboard", action="store_true", default=None, help="Copy the final cd command to the clipboard."
    )
    parser.add_argument(
        "--print-shell-function",
        metavar="NAME",
        nargs="?",
        const="cn",
        default=None,
        help="Print a shell function (default name: cn) that follows the final directory, then exit.",
    )
    parser.add_argument("--log-level", type=_log_level, default=None, help="Log level for the log file.")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the browser, and hand off the final directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if args.print_shell_function is not None:
        sys.stdout.write(shell_function(args.print_shell_function))
        return

    level = args.log_level if args.log_level is not None else config.load_log_level()
    configure_logging(level if level is not None else logging.WARNING)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color)
    clipboard = args.clipboard if args.clipboard is not None else config.load_clipboard_default()

    try:
        final_dir = run_browser(path, theme)
    except Exception:
        logger.exception("browser session crashed")
        raise
    hand_off(final_dir, cd_file=args.cd_file, clipboard=bool(clipboard))


if __name__ == "__main__":
    main()
