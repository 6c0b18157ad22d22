"""
Generating the message module of an application.

The generated module holds one constant per key, named after the key and
the number of fields its text needs, and the catalog of all languages:

    M_hello = 'hello'
    M_sea1 = 'sea'

    SOURCES = {
        'en.' + M_hello: 'Hello',
        'nl.' + M_hello: 'Hallo',
        ...
    }

The module text comes from a Jinja2 template; the default one ships with
this package and can be replaced by passing another template file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import jinja2

from nls.catalog import CatalogBuilder
from nls.entry import Entry
from nls.naming import assign_names

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "catalog.py.jinja"
GENERATED_FILENAME = "generated_catalog.py"


def _comment(text: str) -> str:
    return "\n".join(f"# {line}".rstrip() for line in text.splitlines())


def _environment(loader: jinja2.BaseLoader) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=loader,
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["pyrepr"] = repr
    env.filters["comment"] = _comment
    return env


def load_template(template: str | Path | None = None) -> jinja2.Template:
    """
    Load the module template.

    Args:
        template: Path of a template file, or None for the packaged one

    Raises:
        jinja2.TemplateError: If the template cannot be found or parsed
    """
    if template is None:
        env = _environment(jinja2.PackageLoader("nls", "templates"))
        return env.get_template(DEFAULT_TEMPLATE)
    path = Path(template)
    env = _environment(jinja2.FileSystemLoader(str(path.parent)))
    return env.get_template(path.name)


def generate_module(entries: Iterable[Entry], template: str | Path | None = None) -> str:
    """
    Render the source of the generated message module.

    Args:
        entries: Merged entries of all languages
        template: Optional replacement for the packaged template

    Returns:
        Python source text

    Raises:
        TemplateError: If a message text has invalid template syntax
        GenerationError: If keys cannot be turned into distinct constants
    """
    builder = CatalogBuilder(entries)
    # compiling the catalog reports broken message texts before anything is written
    builder.build()
    representatives = builder.representatives()
    names = assign_names(representatives)
    return load_template(template).render(
        representatives=representatives,
        entries=builder.entries,
        sources=builder.sources(),
        languages=tuple(builder.languages()),
        names=names,
        constant_name=names.__getitem__,
    )


def write_module(
    entries: Iterable[Entry], package_dir: str | Path, template: str | Path | None = None
) -> Path:
    """
    Write the generated module into a package directory.

    Creates the directory and an empty __init__.py when they do not exist.

    Returns:
        Path of the written module

    Raises:
        OSError: If the package cannot be written
    """
    package_dir = Path(package_dir)
    source = generate_module(entries, template)
    package_dir.mkdir(parents=True, exist_ok=True)
    init_file = package_dir / "__init__.py"
    if not init_file.exists():
        init_file.touch()
    out = package_dir / GENERATED_FILENAME
    logger.debug(f"writing {out}")
    out.write_text(source, encoding="utf-8")
    return out
