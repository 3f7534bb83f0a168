import json
import os
import tempfile
import unittest
from unittest.mock import patch

from artwork_browser.config import DEFAULT_CONFIG, load_config
from artwork_browser.errors import ConfigError


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.json")
        env = {k: v for k, v in os.environ.items() if not k.startswith("ARTWORK_")}
        self.env_patch = patch.dict(os.environ, env, clear=True)
        self.env_patch.start()

    def tearDown(self):
        self.env_patch.stop()
        self.tmpdir.cleanup()

    def _write(self, data):
        with open(self.path, "w") as f:
            json.dump(data, f)

    def test_defaults_without_file(self):
        config = load_config(self.path)
        self.assertEqual(config["ui"]["per_page"], 10)
        self.assertEqual(config["api"]["base_url"], DEFAULT_CONFIG["api"]["base_url"])

    def test_file_merges_nested_sections(self):
        self._write({"ui": {"per_page": 25}})
        config = load_config(self.path)
        self.assertEqual(config["ui"]["per_page"], 25)
        self.assertEqual(config["ui"]["title"], DEFAULT_CONFIG["ui"]["title"])
        self.assertIn("fields", config["api"])

    def test_loading_does_not_mutate_defaults(self):
        self._write({"api": {"base_url": "http://changed"}})
        load_config(self.path)
        self.assertNotEqual(DEFAULT_CONFIG["api"]["base_url"], "http://changed")

    def test_environment_overrides_file(self):
        self._write({"ui": {"per_page": 25}})
        with patch.dict(os.environ, {"ARTWORK_PER_PAGE": "5", "ARTWORK_API_URL": "http://localhost:8000"}):
            config = load_config(self.path)
        self.assertEqual(config["ui"]["per_page"], 5)
        self.assertEqual(config["api"]["base_url"], "http://localhost:8000")

    def test_invalid_per_page_raises(self):
        with patch.dict(os.environ, {"ARTWORK_PER_PAGE": "lots"}):
            with self.assertRaises(ConfigError):
                load_config(self.path)
        self._write({"ui": {"per_page": 0}})
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_broken_file_raises(self):
        with open(self.path, "w") as f:
            f.write("{not json")
        with self.assertRaises(ConfigError):
            load_config(self.path)


if __name__ == "__main__":
    unittest.main()
