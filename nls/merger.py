"""
Unifying entries across languages.

After merging, every language holds exactly one entry for every key that
any language defines. Keys a language lacks get a placeholder entry with
empty text that carries the description and comment of the key, so the
rewritten document shows translators what still needs work.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nls.entry import Entry, sort_key

logger = logging.getLogger(__name__)


def deduplicate(entries: Iterable[Entry]) -> dict[tuple[str, str], Entry]:
    """
    Collapse entries with the same (language, key).

    The first entry is kept; a later one replaces it only when its text is
    not empty, and then keeps the comment of the first.
    """
    unique: dict[tuple[str, str], Entry] = {}
    for entry in entries:
        pair = sort_key(entry)
        existing = unique.get(pair)
        if existing is None:
            unique[pair] = entry
        elif entry.text:
            unique[pair] = Entry(
                entry.language,
                entry.key,
                text=entry.text,
                description=entry.description,
                comment=existing.comment,
            )
    return unique


def info_sources(entries: Iterable[Entry]) -> dict[str, Entry]:
    """
    Pick, per key, the entry whose description and comment are shared.

    Entries are considered in language tag order; the first one with a
    description wins, otherwise the one with the lowest language tag.
    """
    chosen: dict[str, Entry] = {}
    for entry in sorted(entries, key=sort_key):
        current = chosen.get(entry.key)
        if current is None or (entry.description and not current.description):
            chosen[entry.key] = entry
    return chosen


def merge(entries: Iterable[Entry]) -> list[Entry]:
    """
    Merge entries of all languages and fill in missing (language, key) pairs.

    Args:
        entries: Entries as extracted, in any order

    Returns:
        One entry per (language, key), sorted by language then key.
        Merging the result again returns an equal list.
    """
    unique = deduplicate(entries)
    sources = info_sources(unique.values())
    languages = sorted({language for language, _ in unique})

    for language in languages:
        for key in sorted(sources):
            if (language, key) in unique:
                continue
            logger.debug(f"language [{language}] is missing key [{key}]")
            info = sources[key]
            unique[(language, key)] = Entry(
                language,
                key,
                description=info.description,
                comment=info.comment,
            )

    return [unique[pair] for pair in sorted(unique)]


def group_by_language(entries: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Split merged entries per language, each list sorted by key."""
    grouped: dict[str, list[Entry]] = {}
    for entry in sorted(entries, key=sort_key):
        grouped.setdefault(entry.language, []).append(entry)
    return grouped
