"""Request-resolution pipeline.

Turns a ``Request`` into a ``Response``:

1. GET only; anything else is a bad request.
2. Percent-decode the raw path (``DecodeError`` -> 400).
3. Route by prefix: static file, page, or index.
4. Resolve the page or file; missing or unreadable -> 404.
5. Render page content into the shared template.

Every failure except a template render failure becomes a rendered error
page.  ``RenderError`` escapes ``compose()`` and the ASGI handler drops
the response without writing a body.
"""

import logging
from pathlib import Path

from inkwell.errors import BadRequest, BadTitle, DecodeError, HTTPError, NotFound, PageReadError
from inkwell.http.percent import percent_decode
from inkwell.http.request import Request
from inkwell.http.response import Response
from inkwell.pages.store import PageStore
from inkwell.routing.route import RouteKind, RouteMatch
from inkwell.routing.router import Router
from inkwell.templating.template import Template

logger = logging.getLogger("inkwell.server")

INDEX_TITLE = "index"

STATIC_CONTENT_TYPES: dict[str, str] = {
    "css": "text/css",
    "svg": "image/svg+xml",
}
DEFAULT_STATIC_CONTENT_TYPE = "text/plain"

# Bodies for rendered error pages
ERROR_TITLES: dict[int, str] = {400: "Bad Request", 404: "Not Found"}
ERROR_CONTENT: dict[int, str] = {
    400: "<p>The request could not be understood.</p>",
    404: "<p>The requested page does not exist.</p>",
}


def static_content_type(path: Path) -> str:
    """Content type for a static file, chosen by extension."""
    mime = STATIC_CONTENT_TYPES.get(path.suffix[1:].lower(), DEFAULT_STATIC_CONTENT_TYPE)
    return f"{mime}; charset=utf-8"


class ResponseComposer:
    """Resolve requests against the router, page store, and static root.

    All collaborators are fixed at construction and never mutated, so a
    single composer serves every worker thread.

    Args:
        template: Compiled page template (``title`` and ``content``).
        store: Page store for ``/pages/`` and the index.
        static_dir: Root directory for ``/static/`` files.
        router: Prefix router whose handlers are :class:`RouteKind` members.
        bad_title_status: Status for invalid titles, 400 or 404.
    """

    __slots__ = ("_bad_title_status", "_router", "_static_dir", "_store", "_template")

    def __init__(
        self,
        template: Template,
        store: PageStore,
        static_dir: str | Path,
        *,
        router: Router | None = None,
        bad_title_status: int = 400,
    ) -> None:
        self._template = template
        self._store = store
        self._static_dir = Path(static_dir).resolve()
        self._router = router or Router()
        self._bad_title_status = bad_title_status

    @property
    def template(self) -> Template:
        return self._template

    def compose(self, request: Request) -> Response:
        """Build the full response for *request*.

        Raises:
            RenderError: The template could not be rendered; no response
                should be sent.
        """
        try:
            return self._dispatch(request)
        except HTTPError as exc:
            logger.debug("%d %s %s: %s", exc.status, request.method, request.raw_path, exc.detail)
            return self.error_page(exc.status)

    def error_page(self, status: int) -> Response:
        """Render the error page for *status* through the page template."""
        body = self._render(ERROR_TITLES[status], ERROR_CONTENT[status])
        return Response(body=body, status=status)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, request: Request) -> Response:
        if request.method != "GET":
            raise BadRequest(f"Method {request.method} is not supported")

        try:
            path = percent_decode(request.raw_path)
        except DecodeError as exc:
            raise BadRequest(str(exc)) from exc

        try:
            match = self._router.match(path)
        except NotFound as exc:
            raise BadRequest(exc.detail) from exc

        return self._handle(match)

    def _handle(self, match: RouteMatch) -> Response:
        kind = match.handler
        if kind is RouteKind.STATIC:
            return self._handle_static(match.remainder)
        if kind is RouteKind.PAGE:
            return self._handle_page(match.remainder)
        if kind is RouteKind.INDEX:
            return self._handle_index(match.remainder)
        msg = f"Route {match.route.prefix!r} has no handler for {kind!r}"
        raise BadRequest(msg)

    def _handle_index(self, remainder: str) -> Response:
        if remainder:
            raise NotFound(f"Nothing at /{remainder}")
        return self._handle_page(INDEX_TITLE)

    def _handle_page(self, title: str) -> Response:
        logger.debug("handle page: %s", title)
        if not title:
            return self._bad_title(title)

        try:
            page = self._store.resolve(title)
        except BadTitle:
            return self._bad_title(title)
        except PageReadError as exc:
            logger.warning("%s", exc)
            raise NotFound(f"Page {title!r} is unreadable") from exc

        return Response(body=self._render(page.title, page.html))

    def _bad_title(self, title: str) -> Response:
        logger.debug("%d bad title %r", self._bad_title_status, title)
        return self.error_page(self._bad_title_status)

    def _handle_static(self, remainder: str) -> Response:
        try:
            path = (self._static_dir / remainder).resolve()
        except (OSError, ValueError) as exc:
            raise NotFound(f"No static file {remainder!r}") from exc
        if not path.is_relative_to(self._static_dir) or not path.is_file():
            raise NotFound(f"No static file {remainder!r}")

        try:
            body = path.read_bytes()
        except OSError as exc:
            logger.warning("Cannot read static file %s: %s", path, exc)
            raise NotFound(f"Static file {remainder!r} is unreadable") from exc

        return Response(body=body, content_type=static_content_type(path))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, title: str, content: str) -> str:
        return self._template.render({"title": title, "content": content})
