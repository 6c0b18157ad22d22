"""
Exception types raised by the message compiler and runtime.

Only generation-time code raises these. Localizer lookups never raise;
template failures at lookup time are turned into inline diagnostic strings.
"""

from __future__ import annotations


class NLSError(Exception):
    """Base class for all nls errors."""


class ParseError(NLSError):
    """A message definition document could not be read into entries."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"cannot parse {source}: {reason}")


class TemplateError(NLSError):
    """A message template failed to compile or render."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"template {name}: {reason}")


class GenerationError(NLSError):
    """Code generation cannot proceed, e.g. two keys map to one constant."""
