"""
Reading message definition documents.

A definition document holds the messages of one language:

    # shown on the start page
    hello: Hello
    sea:
      msg: "{{ name }} sea"
      desc: name is the name of a sea

Scalars become simple entries, mappings with msg/desc sub-fields become
entries with a description. The comment block directly above a key is
kept so the document can be written back without losing it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from nls.entry import Entry
from nls.errors import ParseError

logger = logging.getLogger(__name__)

MESSAGE_FIELD = "msg"
DESCRIPTION_FIELD = "desc"
DEFINITION_SUFFIX = ".yaml"


def _comment_above(lines: list[str], line: int, floor: int) -> str:
    """Collect the '#' lines directly above a line, stopping at floor."""
    collected = []
    index = line - 1
    while index >= floor and lines[index].lstrip().startswith("#"):
        collected.append(lines[index])
        index -= 1
    return "\n".join(reversed(collected))


def _first_line_after(node: yaml.Node) -> int:
    # a block collection ends at the next token, past any comments in between
    while isinstance(node, (yaml.MappingNode, yaml.SequenceNode)) and node.value:
        last = node.value[-1]
        node = last[1] if isinstance(node, yaml.MappingNode) else last
    end = node.end_mark
    return end.line + 1 if end.column > 0 else end.line


def extract_text(language: str, text: str, source: str = "<string>") -> list[Entry]:
    """
    Parse one definition document into entries.

    Scalar values are taken as written, without YAML type resolution, so
    'yes' stays 'yes' and an empty value is the empty string.

    Args:
        language: Language tag of the document
        text: YAML content
        source: Name of the document used in errors

    Returns:
        Entries in document order

    Raises:
        ParseError: If the YAML is malformed or its top level is not a mapping
    """
    try:
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise ParseError(source, str(e)) from e

    if root is None:
        return []
    if not isinstance(root, yaml.MappingNode):
        raise ParseError(source, f"top level must be a mapping, found {root.id}")

    lines = text.splitlines()
    entries = []
    floor = 0
    for key_node, value_node in root.value:
        comment = _comment_above(lines, key_node.start_mark.line, floor)
        floor = _first_line_after(value_node)

        if not isinstance(key_node, yaml.ScalarNode) or not key_node.value:
            raise ParseError(source, f"invalid key at line {key_node.start_mark.line + 1}")
        key = key_node.value

        if isinstance(value_node, yaml.ScalarNode):
            entries.append(Entry(language, key, text=value_node.value, comment=comment))
        elif isinstance(value_node, yaml.MappingNode):
            fields = {}
            for field_node, field_value in value_node.value:
                if isinstance(field_node, yaml.ScalarNode) and isinstance(
                    field_value, yaml.ScalarNode
                ):
                    fields[field_node.value] = field_value.value
            entries.append(
                Entry(
                    language,
                    key,
                    text=fields.get(MESSAGE_FIELD, ""),
                    description=fields.get(DESCRIPTION_FIELD, ""),
                    comment=comment,
                )
            )
        else:
            logger.warning(f"{source}: skipping [{key}], value is a {value_node.id}")

    logger.debug(f"{len(entries)} messages found in {source}")
    return entries


def extract_file(language: str, path: str | Path) -> list[Entry]:
    """
    Parse a definition file.

    Raises:
        ParseError: If the content is not a valid definition document
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.debug(f"processing {path} in [{language}]")
    with open(path, encoding="utf-8") as f:
        content = f.read()
    return extract_text(language, content, source=str(path))


def extract_directory(root: str | Path) -> list[Entry]:
    """
    Parse all definition files below a messages directory.

    Each sub-directory is named after a language tag and holds one or more
    .yaml files. Files that fail to parse are logged and skipped.

    Args:
        root: Messages directory, e.g. 'messages' holding 'en/' and 'nl/'

    Returns:
        Entries of all languages, directories and files visited in sorted order
    """
    root = Path(root)
    entries: list[Entry] = []
    for language_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        for path in sorted(language_dir.glob(f"*{DEFINITION_SUFFIX}")):
            try:
                entries.extend(extract_file(language_dir.name, path))
            except ParseError as e:
                logger.warning(f"skipping {path}: {e.reason}")
    return entries
