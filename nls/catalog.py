"""
The lookup catalog and the builder that produces it from merged entries.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from nls.entry import Entry, sort_key
from nls.templating import Renderer, default_renderer


class Catalog(Mapping):
    """
    Read-only mapping of "language.key" to a compiled template.

    All templates are compiled when the catalog is created, after which
    the catalog never changes and can be shared by any number of
    localizers and threads.
    """

    def __init__(self, sources: Mapping[str, str], renderer: Renderer | None = None):
        """
        Compile a catalog.

        Args:
            sources: Template source per "language.key"
            renderer: Template engine, defaults to the shared JinjaRenderer

        Raises:
            TemplateError: If any source has invalid syntax
        """
        self._renderer = renderer or default_renderer()
        self._sources = dict(sources)
        self._templates = {
            name: self._renderer.compile(source, name) for name, source in self._sources.items()
        }
        self._languages = tuple(sorted({name.split(".", 1)[0] for name in self._sources}))

    def __getitem__(self, name: str) -> Any:
        return self._templates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} templates, languages={list(self._languages)})"

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    def source(self, name: str) -> str:
        """Return the template source stored under "language.key"."""
        return self._sources[name]


class CatalogBuilder:
    """
    Turns merged entries into a Catalog and the per-key entries used to
    emit constants.
    """

    def __init__(self, entries: Iterable[Entry], renderer: Renderer | None = None):
        self._entries = sorted(entries, key=sort_key)
        self._renderer = renderer

    @property
    def entries(self) -> list[Entry]:
        return list(self._entries)

    def languages(self) -> list[str]:
        return sorted({entry.language for entry in self._entries})

    def sources(self) -> dict[str, str]:
        """Template source per "language.key", ordered by language then key."""
        return {entry.catalog_key: entry.text for entry in self._entries}

    def build(self) -> Catalog:
        return Catalog(self.sources(), self._renderer)

    def representatives(self) -> list[Entry]:
        """
        Pick one entry per key, sorted by key.

        An entry with a description is preferred, then one with text, then
        the one with the lowest language tag.
        """
        chosen: dict[str, Entry] = {}
        for entry in self._entries:
            current = chosen.get(entry.key)
            if current is None or _rank(entry) < _rank(current):
                chosen[entry.key] = entry
        return [chosen[key] for key in sorted(chosen)]


def _rank(entry: Entry) -> tuple[bool, bool]:
    return (not entry.description, not entry.text)
