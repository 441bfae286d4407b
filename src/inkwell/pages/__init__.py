"""Pages — markdown documents addressed by title."""

from inkwell.pages.store import (
    NO_PAGES_FOUND,
    PAGES_INDEX_HEADING,
    PAGES_INDEX_TITLE,
    Page,
    PageStore,
)
from inkwell.pages.titles import is_bad_title

__all__ = [
    "NO_PAGES_FOUND",
    "PAGES_INDEX_HEADING",
    "PAGES_INDEX_TITLE",
    "Page",
    "PageStore",
    "is_bad_title",
]
