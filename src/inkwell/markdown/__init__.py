"""Markdown rendering for inkwell via patitas.

Basic usage::

    from inkwell.markdown import MarkdownRenderer

    md = MarkdownRenderer()
    html = md.render("# Hello")
"""

from inkwell.markdown.errors import MarkdownError, MarkdownNotInstalledError
from inkwell.markdown.renderer import MarkdownRenderer

__all__ = [
    "MarkdownError",
    "MarkdownNotInstalledError",
    "MarkdownRenderer",
]
