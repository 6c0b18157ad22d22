"""
Tests for writing definition documents.
"""

import tempfile
import unittest
from pathlib import Path

from nls.entry import Entry
from nls.extractor import extract_file, extract_text
from nls.merger import merge
from nls.writer import dump_entries, write_language_files, yaml_string

TRICKY_TEXTS = [
    "",
    "plain text",
    "Note: colon",
    "it's {{ name }}",
    "{{ count }} {{ plural(count, 'cat', 'cats') }}",
    "line1\nline2",
    "line1\nline2\n",
    "trailing breaks\n\n",
    "a\n\nb",
    "multi\n  indented\nback",
    "  first indented\nsecond",
    "  leading",
    "trailing ",
    "#hash",
    "- dash",
    "yes",
    "null",
    "~",
    "[x]",
    "100%",
    'quote "double"',
    "tab\there",
    "Dag ölijk",
    "a # not a comment",
    "ends with colon:",
    "\n",
    "line1\rline2",
    "x\r\ny",
    "a\u2028b",
    "a\u2029b",
    "a\x85b",
    "a\x1bb",
    'back\\slash "q"\r',
    "bell\x07 and del\x7f",
]


class TestYamlString(unittest.TestCase):
    """Tests for the value emission rules."""

    def test_empty(self):
        self.assertEqual(yaml_string(""), "")

    def test_plain(self):
        self.assertEqual(yaml_string("Hello"), " Hello")

    def test_quoted(self):
        self.assertEqual(yaml_string("{{ name }} sea"), " '{{ name }} sea'")
        self.assertEqual(yaml_string("it's"), " 'it''s'")

    def test_block_with_final_line_break(self):
        """Test the last line break drops exactly one empty line."""
        self.assertEqual(yaml_string("one\ntwo\n"), " |\n  one\n  two")

    def test_block_without_final_line_break(self):
        self.assertEqual(yaml_string("one\ntwo"), " |-\n  one\n  two")

    def test_block_indent(self):
        self.assertEqual(yaml_string("one\ntwo\n", indent=4), " |\n    one\n    two")

    def test_escaped(self):
        """Test other line breaks and control characters are written as escapes."""
        self.assertEqual(yaml_string("x\r\ny"), ' "x\\r\\ny"')
        self.assertEqual(yaml_string("a\u2028b"), ' "a\\Lb"')
        self.assertEqual(yaml_string("a\x1bb"), ' "a\\x1bb"')
        self.assertEqual(yaml_string('say "hi"\r'), ' "say \\"hi\\"\\r"')


class TestWriteEntries(unittest.TestCase):
    """Tests for dump_entries."""

    def test_layout(self):
        """Test sorting, comments and the flat/nested forms."""
        entries = [
            Entry("en", "sea", "{{ name }} sea", description="name of a sea"),
            Entry("en", "hello", "Hello", comment="# greeting"),
            Entry("en", "intro", "one\ntwo\n"),
            Entry("en", "empty", ""),
        ]

        self.assertEqual(
            dump_entries(entries),
            "empty:\n"
            "# greeting\n"
            "hello: Hello\n"
            "intro: |\n"
            "  one\n"
            "  two\n"
            "sea:\n"
            "  msg: '{{ name }} sea'\n"
            "  desc: name of a sea\n",
        )

    def test_round_trip_flat(self):
        """Test writing then reading gives back every text."""
        entries = [Entry("en", f"k{i:02d}", text) for i, text in enumerate(TRICKY_TEXTS)]

        self.assertEqual(extract_text("en", dump_entries(entries)), entries)

    def test_round_trip_nested(self):
        """Test texts and descriptions survive the msg/desc form."""
        entries = [
            Entry("en", f"k{i:02d}", text, description=TRICKY_TEXTS[-1 - i] or "context")
            for i, text in enumerate(TRICKY_TEXTS)
        ]

        self.assertEqual(extract_text("en", dump_entries(entries)), entries)

    def test_rewrite_keeps_carriage_return(self):
        """Test a document holding a carriage return can be read again after rewriting."""
        entries = extract_text("en", 'hello: Hello\nwin: "line1\\rline2"\nzeta: Z\n')

        self.assertEqual(entries[1].text, "line1\rline2")
        self.assertEqual(extract_text("en", dump_entries(entries)), entries)

    def test_round_trip_comments(self):
        entries = [
            Entry("en", "a", "line1\nline2\n", comment="# about a"),
            Entry("en", "b", "B", description="d", comment="# about b\n# more"),
            Entry("en", "c", "C", comment="# about c"),
        ]

        self.assertEqual(extract_text("en", dump_entries(entries)), entries)


class TestWriteLanguageFiles(unittest.TestCase):
    """Tests for rewriting a messages directory."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_writes_each_language(self):
        merged = merge([Entry("en", "hello", "Hello"), Entry("nl", "sky", "Lucht")])

        paths = write_language_files(merged, self.root)

        self.assertEqual(
            paths, [self.root / "en" / "messages.yaml", self.root / "nl" / "messages.yaml"]
        )
        self.assertEqual((self.root / "en" / "messages.yaml").read_text(), "hello: Hello\nsky:\n")
        self.assertEqual(extract_file("nl", paths[1]), [e for e in merged if e.language == "nl"])
        self.assertEqual(list(self.root.glob("*/*.tmp")), [])


if __name__ == "__main__":
    unittest.main()
