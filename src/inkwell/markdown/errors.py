"""Markdown layer error hierarchy."""

from inkwell.errors import InkwellError


class MarkdownError(InkwellError):
    """Base for all inkwell.markdown errors."""


class MarkdownNotInstalledError(MarkdownError):
    """Raised when patitas is not installed."""
