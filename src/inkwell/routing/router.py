"""Ordered prefix router.

Routes are checked in declaration order and the first prefix the path
starts with wins, so a more specific prefix must come before a more
general one (``/pages/`` before ``/``).  The table is validated and
frozen at construction.
"""

from collections.abc import Iterable

from inkwell.errors import ConfigurationError, NotFound
from inkwell.routing.route import Route, RouteKind, RouteMatch

DEFAULT_ROUTES: tuple[Route, ...] = (
    Route("/static/", RouteKind.STATIC),
    Route("/pages/", RouteKind.PAGE),
    Route("/", RouteKind.INDEX),
)


class Router:
    """First-match prefix router.

    Usage::

        router = Router(DEFAULT_ROUTES)
        match = router.match("/pages/foo")
        match.handler    # RouteKind.PAGE
        match.remainder  # "foo"
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[Route] = DEFAULT_ROUTES) -> None:
        self._routes: tuple[Route, ...] = tuple(routes)
        _check_routes(self._routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        """The route table in priority order."""
        return self._routes

    def match(self, path: str) -> RouteMatch:
        """Match a decoded path against the table.

        Raises ``NotFound`` if no prefix matches.
        """
        for route in self._routes:
            if path.startswith(route.prefix):
                return RouteMatch(route=route, remainder=path[len(route.prefix) :])
        raise NotFound(f"No route matches {path!r}")


def _check_routes(routes: tuple[Route, ...]) -> None:
    """Reject malformed prefixes and routes hidden behind an earlier one."""
    for index, route in enumerate(routes):
        if not route.prefix.startswith("/"):
            msg = f"Route prefix {route.prefix!r} must start with '/'."
            raise ConfigurationError(msg)
        for earlier in routes[:index]:
            if route.prefix.startswith(earlier.prefix):
                msg = (
                    f"Route {route.prefix!r} can never match: "
                    f"{earlier.prefix!r} is declared first and matches everything it would. "
                    f"Declare more specific prefixes first."
                )
                raise ConfigurationError(msg)
