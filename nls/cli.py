"""
The nls command: compile message definition files.

    nls --dir messages --pkg app/nls -v

reads messages/<language>/*.yaml, writes app/nls/generated_catalog.py and
rewrites messages/<language>/messages.yaml with every key present in
every language.
"""

from __future__ import annotations

import argparse
import logging
import sys

import jinja2

from nls import __version__
from nls.errors import NLSError
from nls.extractor import extract_directory
from nls.generator import write_module
from nls.merger import group_by_language, merge
from nls.ui import console, data_table, error, setup_logging, success
from nls.writer import write_language_files

logger = logging.getLogger(__name__)


class NlsCLI:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def compile(self, args: argparse.Namespace) -> int:
        """Extract, merge, generate and rewrite.

        Returns:
            int: 0 on success, 1 when there was nothing to compile
        """
        entries = extract_directory(args.dir)
        if not entries:
            error(f"No messages found in {args.dir}")
            return 1

        merged = merge(entries)
        if self.verbose:
            for entry in merged:
                logger.debug(f"{entry.language}.{entry.key}={entry.text}")

        module = write_module(merged, args.pkg, template=args.template)
        success(f"Wrote {module}")

        if not args.no_rewrite:
            for path in write_language_files(merged, args.dir):
                success(f"Rewrote {path}", badge=False)

        self._summary(merged)
        return 0

    def _summary(self, merged) -> None:
        rows = []
        for language, entries in group_by_language(merged).items():
            untranslated = sum(1 for entry in entries if entry.is_placeholder())
            rows.append([language, len(entries), untranslated])
        data_table(
            columns=[
                {"name": "Language", "style": "cyan"},
                {"name": "Keys", "justify": "right"},
                {"name": "Untranslated", "justify": "right", "style": "yellow"},
            ],
            rows=rows,
            title="Messages",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nls",
        description="Compile message definition files into a Python catalog module",
    )
    parser.add_argument("--version", "-V", action="version", version=f"nls {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed output")
    parser.add_argument(
        "--dir", required=True, help="directory with one sub-directory of .yaml files per language"
    )
    parser.add_argument("--pkg", default="nls", help="package directory for the generated code")
    parser.add_argument("--template", help="replacement template for the generated module")
    parser.add_argument(
        "--no-rewrite", action="store_true", help="leave the definition files untouched"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    cli = NlsCLI(verbose=args.verbose)
    try:
        return cli.compile(args)
    except KeyboardInterrupt:
        console.print()
        error("Operation cancelled")
        return 130
    except (NLSError, jinja2.TemplateError, OSError) as e:
        error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
