"""
Language preference configuration.

Handles:
- Resolving which languages a localizer should try, in order
- Reading/writing the preference in ~/.nls/preferences.yaml
- Thread-safe file access
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from nls.detector import detect_os_languages

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES = ["en"]
LANGUAGES_ENV = "NLS_LANGUAGES"


def _normalize(languages: Iterable[Any]) -> list[str]:
    result: list[str] = []
    for language in languages:
        if not isinstance(language, str):
            continue
        language = language.strip().lower()
        if language and language not in result:
            result.append(language)
    return result


class LanguageConfig:
    """
    Resolves the preferred language order.

    Preference resolution order:
    1. NLS_LANGUAGES environment variable, e.g. "nl,en"
    2. 'languages' list in the preferences file
    3. OS-detected languages
    4. Default (English)
    """

    def __init__(self, preferences_file: str | Path | None = None) -> None:
        """
        Args:
            preferences_file: YAML file holding the preference,
                defaults to ~/.nls/preferences.yaml
        """
        if preferences_file is None:
            preferences_file = Path.home() / ".nls" / "preferences.yaml"
        self.preferences_file = Path(preferences_file)
        self._thread_lock = threading.Lock()

    def _load_preferences(self) -> dict[str, Any]:
        """
        Load preferences from file.

        Returns:
            Dictionary of preferences, or empty dict when the file is
            missing, empty, malformed or not a mapping
        """
        try:
            with self._thread_lock:
                if not self.preferences_file.exists():
                    return {}
                with open(self.preferences_file, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Malformed YAML in preferences file: {e}. Using defaults.")
            return {}
        except OSError as e:
            logger.debug(f"Could not read preferences file: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                f"Preferences file contains invalid type: {type(data).__name__}, "
                "expected dict. Using defaults."
            )
            return {}
        return data

    def _save_preferences(self, preferences: dict[str, Any]) -> None:
        """
        Save preferences, writing a temp file first and then renaming it.

        Raises:
            OSError: If the preferences cannot be saved
        """
        with self._thread_lock:
            self.preferences_file.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            temp_file = self.preferences_file.with_suffix(".yaml.tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                yaml.safe_dump(preferences, f, default_flow_style=False, allow_unicode=True)
            os.replace(temp_file, self.preferences_file)

    def get_languages(self, supported: Iterable[str] | None = None) -> list[str]:
        """
        Get the preferred languages.

        Args:
            supported: If given, only these languages are returned

        Returns:
            Language tags in order of preference, never empty
        """
        allowed = set(supported) if supported is not None else None

        def accept(languages: list[str]) -> list[str]:
            if allowed is None:
                return languages
            return [language for language in languages if language in allowed]

        env_value = os.environ.get(LANGUAGES_ENV, "")
        from_env = accept(_normalize(env_value.split(",")))
        if from_env:
            return from_env

        saved = self._load_preferences().get("languages")
        if isinstance(saved, str):
            saved = saved.split(",")
        if isinstance(saved, list):
            from_file = accept(_normalize(saved))
            if from_file:
                return from_file

        detected = accept(detect_os_languages())
        if detected:
            return detected

        return list(DEFAULT_LANGUAGES)

    def set_languages(self, languages: Iterable[str]) -> None:
        """
        Persist the preferred languages.

        Raises:
            ValueError: If no valid language tag is given
        """
        normalized = _normalize(languages)
        if not normalized:
            raise ValueError("at least one language tag is required")
        preferences = self._load_preferences()
        preferences["languages"] = normalized
        self._save_preferences(preferences)
        logger.debug(f"language preference set to {normalized}")

    def clear_languages(self) -> None:
        """Clear the saved preference (use auto-detection instead)."""
        preferences = self._load_preferences()
        if "languages" in preferences:
            del preferences["languages"]
            self._save_preferences(preferences)
