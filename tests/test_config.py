"""
Tests for language preference configuration and OS detection.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from nls.config import LanguageConfig
from nls.detector import detect_os_languages, parse_locale


class TestParseLocale(unittest.TestCase):
    """Tests for parse_locale."""

    def test_formats(self):
        self.assertEqual(parse_locale("en_US.UTF-8"), "en")
        self.assertEqual(parse_locale("nl_BE"), "nl")
        self.assertEqual(parse_locale("fr.UTF-8"), "fr")
        self.assertEqual(parse_locale("de"), "de")
        self.assertEqual(parse_locale("zh-CN.utf8"), "zh")
        self.assertEqual(parse_locale("sr_RS@latin"), "sr")

    def test_c_and_posix_are_english(self):
        self.assertEqual(parse_locale("C"), "en")
        self.assertEqual(parse_locale("POSIX"), "en")

    def test_unparseable(self):
        self.assertIsNone(parse_locale(""))
        self.assertIsNone(parse_locale("   "))
        self.assertIsNone(parse_locale("123"))


class TestDetectOsLanguages(unittest.TestCase):
    """Tests for detect_os_languages."""

    def test_order_and_duplicates(self):
        env = {"LANGUAGE": "nl:de", "LC_ALL": "", "LANG": "en_US.UTF-8", "LC_MESSAGES": "nl_NL"}
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(detect_os_languages(), ["nl", "de", "en"])

    def test_nothing_set(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(detect_os_languages(), [])


class TestLanguageConfig(unittest.TestCase):
    """Tests for LanguageConfig."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.preferences = Path(self.temp_dir.name) / "nls" / "preferences.yaml"

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, content: str) -> None:
        self.preferences.parent.mkdir(parents=True, exist_ok=True)
        self.preferences.write_text(content)

    def test_default(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["en"])

    def test_environment_variable(self):
        with patch.dict(os.environ, {"NLS_LANGUAGES": "nl, EN,nl"}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["nl", "en"])

    def test_environment_beats_file(self):
        self._write("languages: [de]\n")
        with patch.dict(os.environ, {"NLS_LANGUAGES": "fr"}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["fr"])

    def test_preferences_file(self):
        self._write("languages:\n  - de\n  - en\n")
        with patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["de", "en"])

    def test_os_detection(self):
        with patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["fr"])

    def test_supported_filter(self):
        with patch.dict(os.environ, {"NLS_LANGUAGES": "fr,nl"}, clear=True):
            config = LanguageConfig(self.preferences)
            self.assertEqual(config.get_languages(supported=["en", "nl"]), ["nl"])
            self.assertEqual(config.get_languages(supported=["de"]), ["en"])

    def test_malformed_yaml_is_ignored(self):
        """Test a broken preferences file does not crash."""
        self._write("languages: [broken")
        with patch.dict(os.environ, {}, clear=True):
            with self.assertLogs("nls.config", level="WARNING"):
                self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["en"])

    def test_invalid_root_type_is_ignored(self):
        self._write("- item1\n- item2\n")
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["en"])

    def test_invalid_languages_value_is_ignored(self):
        self._write("languages: 123\n")
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["en"])

    def test_set_and_clear_languages(self):
        """Test the preference persists across instances."""
        with patch.dict(os.environ, {}, clear=True):
            LanguageConfig(self.preferences).set_languages(["NL", "en"])
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["nl", "en"])

            LanguageConfig(self.preferences).clear_languages()
            self.assertEqual(LanguageConfig(self.preferences).get_languages(), ["en"])

    def test_set_empty_raises(self):
        with self.assertRaises(ValueError):
            LanguageConfig(self.preferences).set_languages([" "])


if __name__ == "__main__":
    unittest.main()
