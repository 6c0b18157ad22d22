r"""
Writing merged entries back to definition documents.

Output is sorted by key and uses a small, fixed set of YAML forms so that
reading a written document gives back exactly the same entries:

    # comment kept from the source
    cats:
      msg: "{{ count }} ..."      <- nested form when there is a description
      desc: number of cats
    hello: Hello                  <- flat form otherwise
    intro: |-                     <- block form for multi-line text
      first line
      second line
    win: "one\r\ntwo"             <- escaped when YAML cannot hold the text as is
"""

from __future__ import annotations

import io
import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from nls.entry import Entry
from nls.extractor import DESCRIPTION_FIELD, MESSAGE_FIELD
from nls.merger import group_by_language

logger = logging.getLogger(__name__)

# characters that change the meaning of, or end, a plain YAML scalar
QUOTE_CHARACTERS = "{}[],&*#?|-<>=!%@:'\"`\t"
# line breaks other than \n, and characters YAML cannot print, need escapes
ESCAPED_CHARACTERS = re.compile(
    r"[^\t\n\x20-\x7e\xa0-\u2027\u202a-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)
ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\x85": "\\N",
    "\u2028": "\\L",
    "\u2029": "\\P",
}
BLOCK_INDENT_STEP = 2
DEFAULT_FILENAME = "messages.yaml"


def needs_quotes(text: str) -> bool:
    return text != text.strip() or any(c in QUOTE_CHARACTERS for c in text)


def quoted(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def needs_escapes(text: str) -> bool:
    return ESCAPED_CHARACTERS.search(text) is not None


def _escape(ch: str) -> str:
    if ch in ESCAPES:
        return ESCAPES[ch]
    if not needs_escapes(ch):
        return ch
    code = ord(ch)
    if code <= 0xFF:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def double_quoted(text: str) -> str:
    return '"' + "".join(_escape(ch) for ch in text) + '"'


def _block(text: str, indent: int) -> str:
    lines = text.split("\n")
    # a final line break leaves one empty element behind
    if lines[-1] == "":
        lines.pop()
    if not text.endswith("\n"):
        chomping = "-"
    elif text.endswith("\n\n") or text == "\n":
        chomping = "+"
    else:
        chomping = ""
    first = next((line for line in lines if line), "")
    indicator = str(BLOCK_INDENT_STEP) if first.startswith(" ") else ""
    pad = " " * indent
    body = "\n".join(pad + line if line else "" for line in lines)
    return f" |{indicator}{chomping}\n{body}"


def yaml_string(text: str, indent: int = BLOCK_INDENT_STEP) -> str:
    """
    Format a text as the value part of a 'key:' line.

    Args:
        text: Text to write
        indent: Column at which block lines start; the key itself sits
            BLOCK_INDENT_STEP columns to the left

    Returns:
        The value including its leading space, '' for empty text.
        Multi-line values span several lines without a final line break.
    """
    if text == "":
        return ""
    if needs_escapes(text):
        return " " + double_quoted(text)
    if "\n" in text:
        return _block(text, indent)
    if needs_quotes(text):
        return " " + quoted(text)
    return " " + text


def _key(key: str) -> str:
    if needs_escapes(key):
        return double_quoted(key)
    return quoted(key) if needs_quotes(key) else key


def write_entry(entry: Entry, out: TextIO) -> None:
    if entry.comment:
        out.write(entry.comment + "\n")
    if entry.description:
        nested = BLOCK_INDENT_STEP * 2
        out.write(f"{_key(entry.key)}:\n")
        out.write(f"  {MESSAGE_FIELD}:{yaml_string(entry.text, nested)}\n")
        out.write(f"  {DESCRIPTION_FIELD}:{yaml_string(entry.description, nested)}\n")
    else:
        out.write(f"{_key(entry.key)}:{yaml_string(entry.text)}\n")


def write_entries(entries: Iterable[Entry], out: TextIO) -> None:
    """
    Write the entries of one language as a definition document.

    Args:
        entries: Merged entries of a single language
        out: Text stream to write to
    """
    for entry in sorted(entries, key=lambda e: e.key):
        write_entry(entry, out)


def dump_entries(entries: Iterable[Entry]) -> str:
    out = io.StringIO()
    write_entries(entries, out)
    return out.getvalue()


def write_language_files(
    entries: Iterable[Entry], root: str | Path, filename: str = DEFAULT_FILENAME
) -> list[Path]:
    """
    Rewrite the definition document of every language.

    Writes <root>/<language>/<filename> for each language found in the
    entries. Each file is written to a temporary name first and then
    renamed, so a failure never leaves a half-written document.

    Returns:
        Paths of the written files

    Raises:
        OSError: If a file cannot be written
    """
    root = Path(root)
    written = []
    for language, language_entries in group_by_language(entries).items():
        path = root / language / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = path.with_suffix(path.suffix + ".tmp")
        logger.debug(f"writing {len(language_entries)} messages to {path}")
        with open(temp_file, "w", encoding="utf-8") as f:
            write_entries(language_entries, f)
        os.replace(temp_file, path)
        written.append(path)
    return written
