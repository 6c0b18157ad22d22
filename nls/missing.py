"""
Process-wide record of lookups that could not be resolved.

Every unresolved Get adds a record under the first language of the
localizer. The report doubles as a starting point for translators: it
is a YAML document with the fallback text as suggested message.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from nls.writer import yaml_string


@dataclass(frozen=True)
class Fallback:
    """An unresolved lookup and the text that was used instead."""

    language: str
    key: str
    fallback_text: str = ""


class MissingTracker:
    """
    Thread-safe ledger of unresolved lookups.

    Records are keyed by "language::key"; a later miss for the same pair
    replaces the fallback text. Nothing is evicted until reset().
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, Fallback] = {}

    def add(self, language: str, key: str, fallback_text: str = "") -> None:
        record = Fallback(language, key, fallback_text)
        with self._lock:
            self._records[f"{language}::{key}"] = record

    def records(self) -> list[Fallback]:
        """Snapshot of all records sorted by language and key."""
        with self._lock:
            snapshot = list(self._records.values())
        return sorted(snapshot, key=lambda r: (r.language, r.key))

    def reset(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def report(self) -> str:
        """
        Render all records grouped by language.

        Returns:
            YAML text such as:

                nl:
                  sky:
                    msg: Sky
                    desc:
        """
        lines = []
        language = None
        for record in self.records():
            if record.language != language:
                language = record.language
                lines.append(f"{language}:")
            lines.append(f"  {record.key}:")
            lines.append(f"    msg:{yaml_string(record.fallback_text, indent=6)}")
            lines.append("    desc:")
        return "".join(line + "\n" for line in lines)


MISSING = MissingTracker()


def report_missing() -> str:
    """Report the process-wide missing lookups."""
    return MISSING.report()


def reset_missing() -> None:
    MISSING.reset()
