import subprocess
import unittest
from pathlib import Path
from unittest import mock

from renamer.cli.editor import EditorLaunchError, build_editor_command, launch_editor


class EditorCommandTests(unittest.TestCase):
    def test_command_is_split_and_target_appended(self) -> None:
        cmd = build_editor_command("code --wait", Path("/tmp/list.ini"))
        self.assertEqual(cmd, ["code", "--wait", str(Path("/tmp/list.ini"))])

    def test_empty_or_malformed_command_is_rejected(self) -> None:
        with self.assertRaises(EditorLaunchError):
            build_editor_command("   ", Path("x"))
        with self.assertRaises(EditorLaunchError):
            build_editor_command("vim 'unclosed", Path("x"))


class LaunchEditorTests(unittest.TestCase):
    def test_waits_for_editor_and_returns_status(self) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=0)
        with mock.patch("renamer.cli.editor.subprocess.run", return_value=completed) as run:
            self.assertEqual(launch_editor("vim", Path("list.ini")), 0)
        run.assert_called_once_with(["vim", "list.ini"], check=False)

    def test_nonzero_exit_is_not_fatal(self) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=1)
        with mock.patch("renamer.cli.editor.subprocess.run", return_value=completed):
            self.assertEqual(launch_editor("vim", Path("list.ini")), 1)

    def test_missing_editor_raises_launch_error(self) -> None:
        with mock.patch("renamer.cli.editor.subprocess.run", side_effect=FileNotFoundError(2, "No such file")):
            with self.assertRaises(EditorLaunchError) as ctx:
                launch_editor("no-such-editor", Path("list.ini"))
        self.assertIn("no-such-editor", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
