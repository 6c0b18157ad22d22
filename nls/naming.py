"""
Constant names for generated message keys.

The name encodes the key and the number of fields its text needs:

    hello  (no fields)   -> M_hello
    cats   (1 field)     -> M_cats1
    trends2 (3 fields)   -> M_trends2_3

A key ending in a digit gets an underscore before the count, otherwise
'trends2' with 3 fields and 'trends' with 23 fields would both read M_trends23.
"""

from __future__ import annotations

from collections.abc import Iterable

from nls.entry import Entry
from nls.errors import GenerationError, TemplateError
from nls.templating import Renderer, default_renderer

PREFIX = "M_"


def constant_name(key: str, placeholders: int) -> str:
    """
    Build the constant name for a key.

    Args:
        key: Message key
        placeholders: Number of distinct fields the message text reads

    Returns:
        Identifier such as 'M_cats1'
    """
    name = PREFIX + key
    if placeholders == 0:
        return name
    if key[-1:].isdigit():
        return f"{name}_{placeholders}"
    return f"{name}{placeholders}"


def count_placeholders(text: str, renderer: Renderer | None = None) -> int:
    """Count distinct fields of a text; 0 when the text does not compile."""
    renderer = renderer or default_renderer()
    try:
        return len(renderer.placeholders(text))
    except TemplateError:
        return 0


def entry_constant_name(entry: Entry, renderer: Renderer | None = None) -> str:
    return constant_name(entry.key, count_placeholders(entry.text, renderer))


def assign_names(entries: Iterable[Entry], renderer: Renderer | None = None) -> dict[str, str]:
    """
    Name the representative entry of each key.

    Args:
        entries: One entry per key whose text decides the field count

    Returns:
        Mapping of key to constant name

    Raises:
        GenerationError: If a name is not a valid identifier or two keys share one
    """
    names: dict[str, str] = {}
    owners: dict[str, str] = {}
    for entry in entries:
        name = entry_constant_name(entry, renderer)
        if not name.isidentifier():
            raise GenerationError(f"key [{entry.key}] does not make a valid name: {name}")
        if name in owners and owners[name] != entry.key:
            raise GenerationError(
                f"keys [{owners[name]}] and [{entry.key}] both map to constant {name}"
            )
        owners[name] = entry.key
        names[entry.key] = name
    return names
