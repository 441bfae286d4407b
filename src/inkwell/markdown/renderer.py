"""Markdown renderer wrapping patitas.

The page store treats the renderer as an opaque ``str -> str`` function:
markdown in, HTML out, no side effects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkwell.markdown.errors import MarkdownNotInstalledError

if TYPE_CHECKING:
    from patitas import Markdown


class MarkdownRenderer:
    """Render Markdown source to HTML via patitas.

    Instances hold no per-call state and are safe to share between
    worker threads.  Calling the instance is the same as ``render()``,
    so it can be handed straight to :class:`~inkwell.pages.PageStore`.

    Args:
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    __slots__ = ("_md",)

    def __init__(
        self,
        *,
        plugins: list[str] | None = None,
        highlight: bool = False,
    ) -> None:
        self._md: Markdown = _get_markdown(plugins=plugins, highlight=highlight)

    def render(self, source: str) -> str:
        """Render Markdown source to an HTML string."""
        if not source:
            return ""
        return self._md(source)

    __call__ = render


def _get_markdown(
    *,
    plugins: list[str] | None,
    highlight: bool,
) -> Markdown:
    """Create a patitas Markdown instance, raising a clear error if missing."""
    try:
        from patitas import Markdown
    except ImportError:
        msg = (
            "inkwell requires 'patitas' for Markdown rendering. "
            "Install with: pip install patitas"
        )
        raise MarkdownNotInstalledError(msg) from None

    return Markdown(plugins=plugins or ["all"], highlight=highlight)
