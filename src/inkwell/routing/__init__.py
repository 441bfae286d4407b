"""Routing — ordered prefix table, first match wins."""

from inkwell.routing.route import Route, RouteKind, RouteMatch
from inkwell.routing.router import DEFAULT_ROUTES, Router

__all__ = ["DEFAULT_ROUTES", "Route", "RouteKind", "RouteMatch", "Router"]
