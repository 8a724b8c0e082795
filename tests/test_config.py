from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazydict import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: object):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if payload is not None:
            config_path.write_text(json.dumps(payload), encoding="utf-8")
        patcher = mock.patch("lazydict.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        return config_path

    def test_missing_config_falls_back_to_defaults(self) -> None:
        self._with_config(None)

        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_dictionary_dir(), config.DEFAULT_DICTIONARY_DIR)
        self.assertEqual(config.load_dictionary_extension(), ".db")
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_page_step(), 10)

    def test_malformed_config_is_ignored(self) -> None:
        config_path = self._with_config(None)
        config_path.write_text("{not json", encoding="utf-8")

        self.assertEqual(config.load_config(), {})

    def test_non_object_config_is_ignored(self) -> None:
        self._with_config(["theme", "ocean"])

        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())

    def test_configured_values_are_loaded(self) -> None:
        self._with_config(
            {
                "dictionary_dir": "~/dictionaries",
                "dictionary_extension": "sqlite",
                "theme": " ocean ",
                "page_step": 25,
            }
        )

        self.assertEqual(config.load_dictionary_dir(), Path("~/dictionaries").expanduser())
        self.assertEqual(config.load_dictionary_extension(), ".sqlite")
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_page_step(), 25)

    def test_invalid_page_step_values_fall_back(self) -> None:
        for value in (0, -3, True, "12", 2.5):
            with self.subTest(value=value):
                self._with_config({"page_step": value})
                self.assertEqual(config.load_page_step(), config.DEFAULT_PAGE_STEP)


if __name__ == "__main__":
    unittest.main()
