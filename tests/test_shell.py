"""Shell hand-off tests: quoting, sinks, and clipboard fallback."""

from __future__ import annotations

import io
import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from clinav import shell


class ShellCommandTests(unittest.TestCase):
    def test_plain_path_is_quoted_only_when_needed(self) -> None:
        self.assertEqual(shell.shell_cd_command(Path("/home/user/src")), "cd /home/user/src")

    def test_spaces_and_quotes_are_escaped(self) -> None:
        command = shell.shell_cd_command(Path("/tmp/it's a dir"))
        self.assertEqual(command, "cd '/tmp/it'\"'\"'s a dir'")

    def test_shell_function_uses_cd_file(self) -> None:
        text = shell.shell_function("cn", "clinav")
        self.assertTrue(text.startswith("cn() {"))
        self.assertIn('command clinav --cd-file "$cd_file" "$@"', text)
        self.assertIn('eval "$(cat "$cd_file")"', text)


class HandOffTests(unittest.TestCase):
    def test_default_sink_prints_to_stream(self) -> None:
        stream = io.StringIO()

        command = shell.hand_off(Path("/srv/data"), stream=stream)

        self.assertEqual(command, "cd /srv/data")
        self.assertEqual(stream.getvalue(), "cd /srv/data\n")

    def test_cd_file_sink_writes_command(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cd_file = Path(tmp) / "cd"
            stream = io.StringIO()

            shell.hand_off(Path("/srv/data"), cd_file=cd_file, clipboard=True, stream=stream)

            self.assertEqual(cd_file.read_text(encoding="utf-8"), "cd /srv/data\n")
            self.assertEqual(stream.getvalue(), "")

    def test_clipboard_sink_uses_first_available_tool(self) -> None:
        stream = io.StringIO()
        completed = subprocess.CompletedProcess(["wl-copy"], 0)
        with mock.patch("clinav.shell.clipboard_commands", return_value=[["missing-tool"], ["wl-copy"]]), mock.patch(
            "clinav.shell.shutil.which", side_effect=lambda name: None if name == "missing-tool" else f"/usr/bin/{name}"
        ), mock.patch("clinav.shell.subprocess.run", return_value=completed) as run_mock:
            shell.hand_off(Path("/srv/data"), clipboard=True, stream=stream)

        run_mock.assert_called_once_with(["wl-copy"], input="cd /srv/data", text=True, check=False)
        self.assertEqual(stream.getvalue(), "")

    def test_clipboard_failure_falls_back_to_stream(self) -> None:
        stream = io.StringIO()
        with mock.patch("clinav.shell.clipboard_commands", return_value=[["xclip"]]), mock.patch(
            "clinav.shell.shutil.which", return_value="/usr/bin/xclip"
        ), mock.patch("clinav.shell.subprocess.run", side_effect=OSError("exec format error")):
            shell.hand_off(Path("/srv/data"), clipboard=True, stream=stream)

        self.assertEqual(stream.getvalue(), "cd /srv/data\n")

    def test_copy_rejects_empty_text(self) -> None:
        self.assertFalse(shell.copy_text_to_clipboard(""))

    def test_platform_specific_clipboard_commands(self) -> None:
        with mock.patch("clinav.shell.sys.platform", "darwin"):
            self.assertEqual(shell.clipboard_commands(), [["pbcopy"]])
        with mock.patch("clinav.shell.sys.platform", "linux"), mock.patch("clinav.shell.os.name", "posix"):
            commands = shell.clipboard_commands()
        self.assertEqual(commands[0], ["wl-copy"])
        self.assertIn(["clip.exe"], commands)


if __name__ == "__main__":
    unittest.main()
