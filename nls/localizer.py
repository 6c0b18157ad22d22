"""
Runtime lookup of localized messages.

A Localizer resolves a message key against an ordered list of languages:

    loc = TemplatedLocalizer(catalog, "nl", "en")
    loc.get("hello")                      # "Hallo", or "Hello" when nl lacks it
    loc.get("sky", "Sky")                 # fallback when nobody has it
    loc.format("sea", "name", "Noord")    # "Noord zee"
    loc.replaced("cats", {"count": 3})    # "3 katten"

No lookup ever raises. Template errors come back as the returned text and
unresolved keys are recorded in the missing tracker.
"""

from __future__ import annotations

from typing import Any

from nls.catalog import Catalog
from nls.entry import catalog_key
from nls.errors import TemplateError
from nls.missing import MISSING, MissingTracker

DEFAULT_LANGUAGE = "en"
BAD_ARGUMENTS = "bad arguments: format expects [string, any] pairs"


class Localizer:
    """Interface shared by all localizers."""

    def get(self, key: str, fallback: str | None = None) -> str:
        """
        Return the text for a key in the first language that has a non-empty one.

        Returns the fallback, or else the key itself, when none does.
        """
        raise NotImplementedError

    def format(self, key: str, *kv: Any) -> str:
        """Return the text after substituting alternating field names and values."""
        raise NotImplementedError

    def replaced(self, key: str, data: dict[str, Any] | None = None) -> str:
        """Return the text after substituting the fields in data."""
        raise NotImplementedError

    def report_missing(self) -> str:
        """Return a report of all unresolved lookups."""
        raise NotImplementedError


class NoLocalizer(Localizer):
    """Localizer used when none is configured; passes keys through unchanged."""

    def get(self, key: str, fallback: str | None = None) -> str:
        return key if fallback is None else fallback

    def format(self, key: str, *kv: Any) -> str:
        return key

    def replaced(self, key: str, data: dict[str, Any] | None = None) -> str:
        return key

    def report_missing(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "NoLocalizer()"


class TemplatedLocalizer(Localizer):
    """
    Localizer over a compiled Catalog.

    The catalog is shared and read-only; the language order belongs to the
    instance, so one localizer per request or user is cheap.
    """

    def __init__(self, catalog: Catalog, *languages: str, tracker: MissingTracker | None = None):
        """
        Args:
            catalog: Compiled templates
            *languages: Language tags in order of preference, defaults to English
            tracker: Where misses are recorded, defaults to the process-wide one
        """
        self._catalog = catalog
        self._languages = tuple(languages) or (DEFAULT_LANGUAGE,)
        self._tracker = MISSING if tracker is None else tracker

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def __repr__(self) -> str:
        return f"TemplatedLocalizer(languages={list(self._languages)})"

    def _render(self, template: Any, data: dict[str, Any] | None) -> str:
        try:
            return self._catalog.renderer.render(template, data)
        except TemplateError as e:
            return str(e)

    def _find_template(self, key: str) -> Any:
        for language in self._languages:
            template = self._catalog.get(catalog_key(language, key))
            if template is not None:
                return template
        return None

    def get(self, key: str, fallback: str | None = None) -> str:
        for language in self._languages:
            template = self._catalog.get(catalog_key(language, key))
            if template is None:
                continue
            text = self._render(template, None)
            if text:
                return text
        self._tracker.add(self._languages[0], key, fallback or "")
        return key if fallback is None else fallback

    def format(self, key: str, *kv: Any) -> str:
        if len(kv) % 2 != 0:
            return BAD_ARGUMENTS
        data = {}
        for name, value in zip(kv[::2], kv[1::2]):
            if not isinstance(name, str):
                return BAD_ARGUMENTS
            data[name] = value
        return self.replaced(key, data)

    def replaced(self, key: str, data: dict[str, Any] | None = None) -> str:
        template = self._find_template(key)
        if template is None:
            return ""
        return self._render(template, data)

    def report_missing(self) -> str:
        return self._tracker.report()
