"""inkwell exception hierarchy.

Shared across the decoder, router, page store, templates and the ASGI
handler so every module raises and catches the same types.
"""

from dataclasses import dataclass


class InkwellError(Exception):
    """Base for all inkwell-specific errors."""


class ConfigurationError(InkwellError):
    """Raised when server configuration is invalid.

    Typically raised during ``App._freeze()`` at startup, before any
    worker accepts a connection.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(InkwellError):
    """An error that maps directly to an HTTP status code.

    The response composer turns these into rendered error pages.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """400 — the request path could not be accepted."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route, page, or static file backs the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class DecodeError(InkwellError, ValueError):
    """A raw path held a malformed ``%XX`` escape or decoded to invalid UTF-8."""


class BadTitle(InkwellError, ValueError):
    """A page title contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class PageReadError(InkwellError, OSError):
    """A markdown file exists but could not be read as UTF-8 text."""


class RenderError(InkwellError):
    """The page template could not be rendered for this request."""
