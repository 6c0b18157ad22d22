"""
Template substitution for message texts.

Message texts are Jinja2 templates rendered in a sandbox:

    hello: Hello
    sea: "{{ name }} sea"
    cats: "{{ count }} {{ plural(count, 'cat', 'cats') }}"

The rest of the package only talks to a Renderer, so the substitution
syntax can be swapped without touching the catalog or localizer.
"""

from __future__ import annotations

from typing import Any

import jinja2
from jinja2 import meta
from jinja2.sandbox import SandboxedEnvironment

from nls.errors import TemplateError


def plural(count: Any, singular: str, plural_form: str) -> str:
    """
    Pick the singular or plural word for a count.

    This is the English two-form rule; languages with more plural forms
    need their own conditional in the message text.
    """
    return singular if count == 1 else plural_form


class Renderer:
    """Compiles and renders message templates."""

    def compile(self, source: str, name: str = "") -> Any:
        raise NotImplementedError

    def render(self, template: Any, data: dict[str, Any] | None = None) -> str:
        raise NotImplementedError

    def placeholders(self, source: str) -> set[str]:
        raise NotImplementedError


class JinjaRenderer(Renderer):
    """
    Renderer backed by a sandboxed Jinja2 environment.

    Missing fields are errors (StrictUndefined) so that a message rendered
    without its data is reported instead of silently printing blanks.
    """

    def __init__(self) -> None:
        self._env = SandboxedEnvironment(
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._env.globals["plural"] = plural

    def compile(self, source: str, name: str = "") -> jinja2.Template:
        """
        Parse a template source.

        Args:
            source: Template text
            name: Name used in error messages, usually "language.key"

        Raises:
            TemplateError: If the source has invalid syntax
        """
        try:
            template = self._env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(name, f"line {e.lineno}: {e.message}") from e
        template.name = name
        return template

    def render(self, template: jinja2.Template, data: dict[str, Any] | None = None) -> str:
        """
        Render a compiled template.

        Raises:
            TemplateError: For any failure while rendering
        """
        try:
            return template.render(data or {})
        except Exception as e:
            # template code can raise anything, e.g. TypeError from "count > 1"
            raise TemplateError(template.name or "", str(e)) from e

    def placeholders(self, source: str) -> set[str]:
        """
        Return the distinct data fields a template reads.

        Renderer globals such as plural() are not counted.

        Raises:
            TemplateError: If the source has invalid syntax
        """
        try:
            ast = self._env.parse(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError("", f"line {e.lineno}: {e.message}") from e
        return meta.find_undeclared_variables(ast) - set(self._env.globals)


_default_renderer: Renderer | None = None


def default_renderer() -> Renderer:
    """Get or create the shared JinjaRenderer."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = JinjaRenderer()
    return _default_renderer
