"""Route table for the page site.

Two path shapes are supported, which is all the site registers:

- fixed paths such as ``/``;
- a single captured segment, ``/{name}``.

Fixed paths win over a captured segment. A single trailing slash is
ignored, so ``/price/`` reaches the same handler as ``/price``.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from studysync.errors import ConfigurationError, MethodNotAllowed, NotFound

_CAPTURE = re.compile(r"^/\{([A-Za-z_][A-Za-z0-9_]*)\}$")


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None

    @property
    def param(self) -> str | None:
        """Name of the captured segment, or None for a fixed path."""
        found = _CAPTURE.match(self.path)
        return found.group(1) if found else None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    route: Route
    path_params: dict[str, str]


class Router:
    """Maps ``(method, path)`` to a registered Route."""

    __slots__ = ("_captures", "_fixed", "_order")

    def __init__(self) -> None:
        self._fixed: dict[str, list[Route]] = {}
        self._captures: list[Route] = []
        self._order: list[Route] = []

    def add(self, route: Route) -> None:
        if not route.path.startswith("/"):
            msg = f"Route path must start with '/': {route.path!r}"
            raise ConfigurationError(msg)
        if route.param is not None:
            self._captures.append(route)
        elif "{" in route.path or "}" in route.path:
            msg = f"Only '/{{name}}' may capture a segment, got {route.path!r}"
            raise ConfigurationError(msg)
        else:
            self._fixed.setdefault(route.path, []).append(route)
        self._order.append(route)

    @property
    def routes(self) -> list[Route]:
        """Routes in registration order."""
        return list(self._order)

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *path* that accepts *method*.

        Raises:
            NotFound: nothing is registered for the path.
            MethodNotAllowed: the path is known, the method is not.
        """
        if len(path) > 1 and path.endswith("/"):
            path = path[:-1]

        candidates = [(route, {}) for route in self._fixed.get(path, ())]
        if not candidates:
            segment = path[1:]
            if segment and "/" not in segment:
                candidates = [(route, {route.param: segment}) for route in self._captures]

        if not candidates:
            raise NotFound(f"No route for {path}")

        for route, params in candidates:
            if method in route.methods:
                return RouteMatch(route, params)

        raise MethodNotAllowed(frozenset().union(*(route.methods for route, _ in candidates)))
