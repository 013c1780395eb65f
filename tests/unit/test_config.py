import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from project_init.config import BUNDLED_ASSETS_DIR, InitSettings, load_settings


class LoadSettingsTests(unittest.TestCase):
    def test_defaults_when_nothing_set(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, {}, clear=True):
            settings = load_settings(temp_dir)
        self.assertEqual(settings.python_version, "3.12")
        self.assertEqual(settings.tool, "uv")
        self.assertEqual(settings.sync_extra, "dev")
        self.assertEqual(settings.venv_dir, ".venv")
        self.assertEqual(settings.assets_dir, BUNDLED_ASSETS_DIR)
        self.assertEqual(settings.install_url, "https://github.com/astral-sh/uv")

    def test_env_overrides_default(self) -> None:
        env = {"PROJECT_INIT_PYTHON": "3.11", "PROJECT_INIT_SYNC_EXTRA": "test"}
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, env, clear=True):
            settings = load_settings(temp_dir)
        self.assertEqual(settings.python_version, "3.11")
        self.assertEqual(settings.sync_extra, "test")

    def test_explicit_override_wins_over_env(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(
            os.environ, {"PROJECT_INIT_PYTHON": "3.11"}, clear=True
        ):
            settings = load_settings(temp_dir, python_version="3.13")
        self.assertEqual(settings.python_version, "3.13")

    def test_none_override_falls_through_to_env(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(
            os.environ, {"PROJECT_INIT_PYTHON": "3.11"}, clear=True
        ):
            settings = load_settings(temp_dir, python_version=None)
        self.assertEqual(settings.python_version, "3.11")

    def test_blank_env_value_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(
            os.environ, {"PROJECT_INIT_TOOL": "  "}, clear=True
        ):
            settings = load_settings(temp_dir)
        self.assertEqual(settings.tool, "uv")

    def test_dotenv_in_project_dir_is_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, {}, clear=True):
            Path(temp_dir, ".env").write_text("PROJECT_INIT_VENV_DIR=env312\n")
            settings = load_settings(temp_dir)
        self.assertEqual(settings.venv_dir, "env312")

    def test_process_env_beats_dotenv(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir, patch.dict(
            os.environ, {"PROJECT_INIT_VENV_DIR": "from-env"}, clear=True
        ):
            Path(temp_dir, ".env").write_text("PROJECT_INIT_VENV_DIR=from-file\n")
            settings = load_settings(temp_dir)
        self.assertEqual(settings.venv_dir, "from-env")

    def test_unknown_override_rejected(self) -> None:
        with self.assertRaises(TypeError):
            load_settings(".", colour="red")


class InitSettingsTests(unittest.TestCase):
    def test_blank_python_version_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            InitSettings(python_version="   ")

    def test_values_are_stripped(self) -> None:
        settings = InitSettings(python_version=" 3.12 ", sync_extra=" dev ")
        self.assertEqual(settings.python_version, "3.12")
        self.assertEqual(settings.sync_extra, "dev")

    def test_unknown_tool_has_no_install_url(self) -> None:
        self.assertIsNone(InitSettings(tool="pdm").install_url)


if __name__ == "__main__":
    unittest.main()
