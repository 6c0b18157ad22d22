"""
Message definition records.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """
    One message definition for a (language, key) pair.

    Attributes:
        language: Language tag, e.g. 'en' or 'nl'
        key: Message key, never empty
        text: Template source, may be empty
        description: Context for translators
        comment: Comment block found directly above the key, verbatim
    """

    language: str
    key: str
    text: str = ""
    description: str = ""
    comment: str = ""

    @property
    def catalog_key(self) -> str:
        """Key under which this entry is stored in a Catalog."""
        return catalog_key(self.language, self.key)

    def is_placeholder(self) -> bool:
        return self.text == ""


def catalog_key(language: str, key: str) -> str:
    return f"{language}.{key}"


def sort_key(entry: Entry) -> tuple[str, str]:
    return (entry.language, entry.key)
