"""Markdown-backed page store.

Maps a validated title to ``<docs_dir>/<title>.md`` and renders it to
HTML on every call.  Nothing is cached: each request re-reads the file,
so edits on disk show up immediately.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from inkwell.errors import BadTitle, NotFound, PageReadError
from inkwell.pages.titles import is_bad_title

logger = logging.getLogger("inkwell.pages")

# Reserved title that lists every page instead of reading a file
PAGES_INDEX_TITLE = "_pages"
PAGES_INDEX_HEADING = "All pages"
NO_PAGES_FOUND = "<p>No pages found</p>"

MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True, slots=True)
class Page:
    """A rendered document. Built per request, never persisted."""

    title: str
    html: str


class PageStore:
    """Resolve page titles to rendered HTML.

    Args:
        docs_dir: Directory holding ``<title>.md`` files.
        renderer: Markdown-to-HTML function.  Defaults to
            :class:`~inkwell.markdown.MarkdownRenderer`.

    Usage::

        store = PageStore("docs")
        page = store.resolve("index")
    """

    __slots__ = ("_docs_dir", "_renderer")

    def __init__(
        self,
        docs_dir: str | Path,
        renderer: Callable[[str], str] | None = None,
    ) -> None:
        self._docs_dir = Path(docs_dir)
        if renderer is None:
            from inkwell.markdown import MarkdownRenderer

            renderer = MarkdownRenderer()
        self._renderer = renderer

    @property
    def docs_dir(self) -> Path:
        return self._docs_dir

    def resolve(self, title: str) -> Page:
        """Return the rendered page for *title*.

        Raises:
            BadTitle: *title* fails :func:`is_bad_title`.
            NotFound: No ``<title>.md`` file exists.
            PageReadError: The file exists but is unreadable or not UTF-8.
        """
        if is_bad_title(title):
            raise BadTitle(title)

        if title == PAGES_INDEX_TITLE:
            return Page(title=PAGES_INDEX_HEADING, html=self.list_pages())

        path = self._docs_dir / f"{title}{MARKDOWN_SUFFIX}"
        if not path.exists():
            raise NotFound(f"No page named {title!r}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read page {title!r} from {str(path)!r}: {exc}"
            raise PageReadError(msg) from exc

        logger.debug("rendering page %r from %s", title, path)
        return Page(title=title, html=self._renderer(text))

    def page_titles(self) -> list[str]:
        """Titles of every listable page, sorted.

        Only regular ``*.md`` files directly under the docs directory
        count, and only when their stem is a valid title.
        """
        if not self._docs_dir.is_dir():
            return []

        titles: list[str] = []
        for entry in self._docs_dir.iterdir():
            if entry.suffix != MARKDOWN_SUFFIX or not entry.is_file():
                continue
            if is_bad_title(entry.stem):
                continue
            titles.append(entry.stem)
        titles.sort()
        return titles

    def list_pages(self) -> str:
        """HTML list linking every page, or a fixed message when there are none."""
        titles = self.page_titles()
        if not titles:
            return NO_PAGES_FOUND

        items = "".join(f'<li><a href="/pages/{t}">{t}</a></li>\n' for t in titles)
        return f"<ul>\n{items}</ul>"
