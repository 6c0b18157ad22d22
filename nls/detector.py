"""
OS language auto-detection.

Detects the preferred languages from environment variables:
- LANGUAGE
- LC_ALL
- LC_MESSAGES
- LANG
"""

from __future__ import annotations

import os
import re

# Environment variables to check, in priority order
LOCALE_VARIABLES = ["LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"]


def parse_locale(locale_string: str) -> str | None:
    """
    Parse a locale string and extract the language tag.

    Handles formats like:
    - en_US.UTF-8
    - nl_BE
    - fr.UTF-8
    - de
    - zh-CN.utf8
    - sr_RS@latin (with modifier)

    Args:
        locale_string: Raw locale string from environment

    Returns:
        Lowercase language tag such as 'nl', or None if it cannot be parsed.
        The C and POSIX locales map to 'en'.
    """
    if not locale_string:
        return None

    locale_lower = locale_string.lower().strip()
    if not locale_lower:
        return None
    if locale_lower in ("c", "posix"):
        return "en"

    # Remove encoding suffix (e.g., .UTF-8) and @modifier
    locale_lower = re.sub(r"\.[a-z0-9_-]+(@[a-z]+)?$", "", locale_lower)
    locale_lower = re.sub(r"@[a-z]+$", "", locale_lower)

    language = re.split(r"[_-]", locale_lower, maxsplit=1)[0]
    if not re.fullmatch(r"[a-z]{2,3}", language):
        return None
    return language


def detect_os_languages() -> list[str]:
    """
    Detect the OS languages from environment variables.

    LANGUAGE may list several languages separated by ':'; all of them are
    kept in order. The other variables contribute one language each.

    Returns:
        Distinct language tags in order of preference, possibly empty

    Examples:
        With LANGUAGE=nl:de and LANG=en_US.UTF-8: returns ['nl', 'de', 'en']
    """
    languages: list[str] = []
    for var in LOCALE_VARIABLES:
        value = os.environ.get(var, "")
        if not value:
            continue
        parts = value.split(":") if var == "LANGUAGE" else [value]
        for part in parts:
            parsed = parse_locale(part)
            if parsed and parsed not in languages:
                languages.append(parsed)
    return languages
