import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from game_context import ConfigError, Settings, build_requester, load_api_key, load_settings  # noqa: E402
from ai.scene_requester import DEFAULT_MODEL, DEFAULT_TEMPERATURE  # noqa: E402


class TestGameContext(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.key_path = Path(self.tmp.name) / "apiKey"

    def test_env_key_wins(self):
        self.key_path.write_text("file-key", encoding="utf-8")
        with patch.dict(os.environ, {"OPENAI_API_KEY": "env-key"}):
            self.assertEqual(load_api_key(self.key_path), "env-key")

    def test_file_key_fallback(self):
        self.key_path.write_text("  file-key\n", encoding="utf-8")
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(load_api_key(self.key_path), "file-key")

    def test_missing_key_is_fatal(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigError):
                load_settings(key_path=self.key_path)

    def test_settings_defaults_and_model_override(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "k"}, clear=True):
            settings = load_settings(key_path=self.key_path)
            self.assertEqual(settings.model, DEFAULT_MODEL)
            self.assertEqual(settings.temperature, DEFAULT_TEMPERATURE)
        with patch.dict(os.environ, {"OPENAI_API_KEY": "k", "SURVIVAL_GM_MODEL": "env-model"}, clear=True):
            self.assertEqual(load_settings(key_path=self.key_path).model, "env-model")
            self.assertEqual(load_settings(model="cli-model", key_path=self.key_path).model, "cli-model")

    def test_build_requester_uses_settings(self):
        requester = build_requester(Settings(api_key="sk-test", model="m", temperature=0.5))
        self.assertEqual(requester.model, "m")
        self.assertEqual(requester.temperature, 0.5)


if __name__ == "__main__":
    unittest.main()
