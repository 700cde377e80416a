import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from renamer.cli import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_file_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("renamer.cli.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})

    def test_malformed_file_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("renamer.cli.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("renamer.cli.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_saved_editor_wins_over_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("renamer.cli.config.CONFIG_PATH", config_path), \
                    mock.patch.dict(os.environ, {"EDITOR": "nano"}):
                self.assertEqual(config.save_editor("code --wait"), config_path)
                self.assertEqual(config.load_editor(), "code --wait")
                self.assertEqual(config.load_config(), {"editor": "code --wait"})

    def test_environment_then_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("renamer.cli.config.CONFIG_PATH", Path(tmp) / "config.json"):
                with mock.patch.dict(os.environ, {"VISUAL": "", "EDITOR": "nano"}):
                    self.assertEqual(config.load_editor(), "nano")
                with mock.patch.dict(os.environ, {"VISUAL": "emacs", "EDITOR": "nano"}):
                    self.assertEqual(config.load_editor(), "emacs")
                with mock.patch.dict(os.environ, {"VISUAL": "", "EDITOR": ""}):
                    self.assertEqual(config.load_editor(), config.DEFAULT_EDITOR)


if __name__ == "__main__":
    unittest.main()
