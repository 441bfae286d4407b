"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RouteKind(Enum):
    """Which handler a default route dispatches to."""

    STATIC = "static"
    PAGE = "page"
    INDEX = "index"


@dataclass(frozen=True, slots=True)
class Route:
    """A ``(prefix, handler)`` pair.

    ``handler`` is opaque to the router; the default table uses
    :class:`RouteKind` members.
    """

    prefix: str
    handler: Any


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match: the route and the path after its prefix."""

    route: Route
    remainder: str

    @property
    def handler(self) -> Any:
        return self.route.handler
