"""CLI argument and default-path behavior tests.

Verifies how ``clinav.cli.main`` picks the start directory, theme, and
hand-off sink before and after the browser session.
"""

from __future__ import annotations

import io
import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from clinav import cli
from clinav.shell import shell_cd_command


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        patchers = [
            mock.patch("clinav.cli.configure_logging"),
            mock.patch("clinav.cli.config.load_config", return_value={}),
        ]
        self.configure_logging = patchers[0].start()
        patchers[1].start()
        for patcher in patchers:
            self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()


class CliDefaultPathTests(CliTestCase):
    def test_main_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            with mock.patch("clinav.cli.run_browser", return_value=self.root) as run_browser, mock.patch(
                "clinav.cli.hand_off"
            ) as hand_off:
                cli.main(argv=[])
        finally:
            os.chdir(previous_cwd)

        path, theme = run_browser.call_args.args
        self.assertEqual(path.resolve(), self.root)
        self.assertEqual(theme.name, "default")
        hand_off.assert_called_once_with(self.root, cd_file=None, clipboard=False)
        self.configure_logging.assert_called_once_with(logging.WARNING)

    def test_explicit_path_wins_over_default(self) -> None:
        target = self.root / "target"
        target.mkdir()

        with mock.patch("clinav.cli.run_browser", return_value=target) as run_browser, mock.patch(
            "clinav.cli.hand_off"
        ):
            cli.main(default_path=self.root / "unused", argv=[str(target)])

        self.assertEqual(run_browser.call_args.args[0], target)

    def test_missing_path_exits_with_message(self) -> None:
        with mock.patch("clinav.cli.run_browser") as run_browser:
            with self.assertRaises(SystemExit) as ctx:
                cli.main(argv=[str(self.root / "nope")])

        self.assertIn("Path not found", str(ctx.exception))
        run_browser.assert_not_called()

    def test_file_path_exits_with_message(self) -> None:
        target = self.root / "file.txt"
        target.write_text("", encoding="utf-8")

        with self.assertRaises(SystemExit) as ctx:
            cli.main(argv=[str(target)])

        self.assertIn("Not a directory", str(ctx.exception))


class CliOptionTests(CliTestCase):
    def test_cd_file_and_theme_options_are_forwarded(self) -> None:
        cd_file = self.root / "cd.txt"
        with mock.patch("clinav.cli.run_browser", return_value=self.root) as run_browser, mock.patch(
            "clinav.cli.hand_off"
        ) as hand_off:
            cli.main(argv=[str(self.root), "--theme", "ocean", "--cd-file", str(cd_file), "--log-level", "debug"])

        self.assertEqual(run_browser.call_args.args[1].name, "ocean")
        hand_off.assert_called_once_with(self.root, cd_file=cd_file, clipboard=False)
        self.configure_logging.assert_called_once_with(logging.DEBUG)

    def test_no_color_selects_plain_theme(self) -> None:
        with mock.patch("clinav.cli.run_browser", return_value=self.root) as run_browser, mock.patch(
            "clinav.cli.hand_off"
        ):
            cli.main(argv=[str(self.root), "--no-color"])

        self.assertEqual(run_browser.call_args.args[1].name, "plain")

    def test_config_supplies_theme_clipboard_and_log_level(self) -> None:
        settings = {"theme": "ocean", "clipboard": True, "log_level": "INFO"}
        with mock.patch("clinav.cli.config.load_config", return_value=settings), mock.patch(
            "clinav.cli.run_browser", return_value=self.root
        ) as run_browser, mock.patch("clinav.cli.hand_off") as hand_off:
            cli.main(argv=[str(self.root)])

        self.assertEqual(run_browser.call_args.args[1].name, "ocean")
        hand_off.assert_called_once_with(self.root, cd_file=None, clipboard=True)
        self.configure_logging.assert_called_once_with(logging.INFO)

    def test_shell_function_style_args_accept_clipboard_alongside_cd_file(self) -> None:
        cd_file = self.root / "cd.txt"
        argv = ["--cd-file", str(cd_file), str(self.root), "--clipboard"]
        with mock.patch("clinav.cli.run_browser", return_value=self.root), mock.patch(
            "clinav.shell.copy_text_to_clipboard"
        ) as copy_mock:
            cli.main(argv=argv)

        self.assertEqual(cd_file.read_text(encoding="utf-8"), shell_cd_command(self.root) + "\n")
        copy_mock.assert_not_called()

    def test_invalid_log_level_is_rejected(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit):
                cli.main(argv=["--log-level", "loud"])

        self.assertIn("invalid log level", stderr.getvalue())

    def test_print_shell_function_skips_browser(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("clinav.cli.run_browser") as run_browser:
            cli.main(argv=["--print-shell-function", "jump"])

        run_browser.assert_not_called()
        self.assertTrue(stdout.getvalue().startswith("jump() {"))

    def test_crash_is_logged_and_reraised_without_hand_off(self) -> None:
        with mock.patch("clinav.cli.run_browser", side_effect=RuntimeError("boom")), mock.patch(
            "clinav.cli.hand_off"
        ) as hand_off:
            with self.assertLogs("clinav.cli", level="ERROR") as logs:
                with self.assertRaises(RuntimeError):
                    cli.main(argv=[str(self.root)])

        hand_off.assert_not_called()
        self.assertIn("browser session crashed", logs.output[0])


if __name__ == "__main__":
    unittest.main()
