"""
Which localizer to use when the caller does not pass one.

Prefer passing a localizer explicitly. For code paths where that is not
practical (a request handler deep in a call chain), bind one for the
current thread or asyncio task:

    with using_localizer(TemplatedLocalizer(CATALOG, "nl", "en")):
        get("hello")

Outside such a block the process-wide default is used. It starts out as
a NoLocalizer, so keys are returned unchanged until set_default() is called.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from nls.localizer import Localizer, NoLocalizer

_default_localizer: Localizer = NoLocalizer()
_current: ContextVar[Localizer | None] = ContextVar("nls_localizer", default=None)


def set_default(localizer: Localizer) -> None:
    """Set the localizer used when no other one is bound."""
    global _default_localizer
    _default_localizer = localizer


def default_localizer() -> Localizer:
    return _default_localizer


def current_localizer() -> Localizer:
    """Return the localizer bound by using_localizer(), or the default."""
    localizer = _current.get()
    return _default_localizer if localizer is None else localizer


@contextmanager
def using_localizer(localizer: Localizer) -> Iterator[Localizer]:
    """Bind a localizer for the current thread or task within a with-block."""
    token = _current.set(localizer)
    try:
        yield localizer
    finally:
        _current.reset(token)


def get(key: str, fallback: str | None = None, localizer: Localizer | None = None) -> str:
    return (localizer or current_localizer()).get(key, fallback)


def replaced(
    key: str, data: dict[str, Any] | None = None, localizer: Localizer | None = None
) -> str:
    return (localizer or current_localizer()).replaced(key, data)


def format(key: str, *kv: Any, localizer: Localizer | None = None) -> str:
    return (localizer or current_localizer()).format(key, *kv)
