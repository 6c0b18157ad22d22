"""
Localized messages compiled from per-language YAML definition files.

Provides:
- Extraction of message definitions from YAML documents
- Merging across languages, with placeholders for missing translations
- Generation of a Python module with message constants and a catalog
- Rewriting of definition files in a normalized, round-trip safe form
- Runtime lookup with language preference, substitution and miss tracking

Usage:
    from app.nls.generated_catalog import CATALOG, M_hello, M_sea1
    from nls import TemplatedLocalizer

    loc = TemplatedLocalizer(CATALOG, "nl", "en")
    print(loc.get(M_hello))
    print(loc.format(M_sea1, "name", "Noord"))

    # Unresolved lookups, as a YAML starting point for translators
    print(loc.report_missing())

Generate the module with:
    nls --dir messages --pkg app/nls
"""

from nls.catalog import Catalog, CatalogBuilder
from nls.config import LanguageConfig
from nls.context import (
    current_localizer,
    default_localizer,
    format,
    get,
    replaced,
    set_default,
    using_localizer,
)
from nls.detector import detect_os_languages
from nls.entry import Entry
from nls.errors import GenerationError, NLSError, ParseError, TemplateError
from nls.extractor import extract_directory, extract_file, extract_text
from nls.generator import generate_module, write_module
from nls.localizer import Localizer, NoLocalizer, TemplatedLocalizer
from nls.merger import merge
from nls.missing import MISSING, Fallback, MissingTracker, report_missing, reset_missing
from nls.naming import constant_name
from nls.templating import JinjaRenderer, Renderer
from nls.writer import dump_entries, write_entries, write_language_files

__version__ = "0.3.0"

__all__ = [
    # Runtime lookup
    "Localizer",
    "TemplatedLocalizer",
    "NoLocalizer",
    "Catalog",
    "get",
    "replaced",
    "format",
    "set_default",
    "default_localizer",
    "current_localizer",
    "using_localizer",
    # Missing translations
    "MISSING",
    "Fallback",
    "MissingTracker",
    "report_missing",
    "reset_missing",
    # Compilation
    "Entry",
    "extract_text",
    "extract_file",
    "extract_directory",
    "merge",
    "CatalogBuilder",
    "constant_name",
    "generate_module",
    "write_module",
    "dump_entries",
    "write_entries",
    "write_language_files",
    # Templates
    "Renderer",
    "JinjaRenderer",
    # Configuration
    "LanguageConfig",
    "detect_os_languages",
    # Errors
    "NLSError",
    "ParseError",
    "TemplateError",
    "GenerationError",
]
