"""Hand the final directory back to the invoking shell.

A child process cannot change its parent's working directory, so the browser
emits a ``cd`` command instead: on stdout for ``eval``, into a file read by a
shell function, or onto the clipboard.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

SHELL_FUNCTION_TEMPLATE = """\
{name}() {{
    local cd_file
    cd_file="$(mktemp)" || return
    command {program} --cd-file "$cd_file" "$@"
    if [ -s "$cd_file" ]; then
        eval "$(cat "$cd_file")"
    fi
    rm -f "$cd_file"
}}
"""


def shell_cd_command(path: Path) -> str:
    """Return a POSIX ``cd`` command for ``path`` with safe quoting."""
    return f"cd {shlex.quote(str(path))}"


def shell_function(name: str = "cn", program: str = "clinav") -> str:
    """Return a shell function that follows the browser's final directory."""
    return SHELL_FUNCTION_TEMPLATE.format(name=name, program=shlex.quote(program))


def clipboard_commands() -> list[list[str]]:
    """Return clipboard writer commands to try for this platform, in order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
        ["clip.exe"],
    ]


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy; return whether some tool accepted the text."""
    if not text:
        return False
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(command, input=text, text=True, check=False)
        except OSError as exc:
            logger.info("clipboard command %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return True
    return False


def hand_off(
    path: Path,
    *,
    cd_file: Path | None = None,
    clipboard: bool = False,
    stream: TextIO | None = None,
) -> str:
    """Emit the ``cd`` command for ``path`` to the chosen sink and return it.

    ``cd_file`` wins over ``clipboard``; with neither the command is printed
    to ``stream`` (stdout by default). Failures of the clipboard sink fall
    back to printing.
    """
    command = shell_cd_command(path)
    if cd_file is not None:
        cd_file.write_text(command + "\n", encoding="utf-8")
        logger.debug("wrote %r to %s", command, cd_file)
        return command
    if clipboard:
        if copy_text_to_clipboard(command):
            logger.debug("copied %r to clipboard", command)
            return command
        logger.warning("no clipboard tool accepted the cd command; printing it")
    out = stream if stream is not None else sys.stdout
    out.write(command + "\n")
    out.flush()
    return command
