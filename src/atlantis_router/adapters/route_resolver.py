"""ABOUTME: Route resolution adapters for decoupling URL generation from the routing engine
ABOUTME: Provides abstract interface and concrete werkzeug-based implementation"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from werkzeug.routing import BuildError, Map, Rule

from atlantis_router.config import RouteConfig
from atlantis_router.service_layer.exceptions import RouteResolutionError

if TYPE_CHECKING:
    from flask import Flask

JOBS_VIEW_PATH = "/jobs/<org>/<repo>/<int:pull>/<project>/<workspace>"
LOCK_VIEW_PATH = "/lock"


class RouteResolver(ABC):
    """Abstract interface for turning a named route into a path."""

    @abstractmethod
    def resolve_path(self, name: str, params: Mapping[str, str]) -> str:
        """
        Resolve the path registered under a route name.

        Args:
            name: Name the route was registered under (e.g., "lock-detail")
            params: Value for every parameter the route declares, in any order

        Returns:
            The path, including any query string, starting with "/"

        Raises:
            RouteResolutionError: if the route is unknown or the parameters don't fit it
        """
        pass


class WerkzeugRouteResolver(RouteResolver):
    """Route resolver backed by a werkzeug URL map.

    Werkzeug rules only describe paths, so query parameters a route expects are
    declared separately in ``query_params``. Their values are appended as given,
    which means callers must escape them first.
    """

    def __init__(self, url_map: Map, query_params: Mapping[str, Sequence[str]] | None = None):
        """
        Initialize with a werkzeug URL map.

        Args:
            url_map: Map holding the named rules
            query_params: Route name to the query parameter names that route declares
        """
        self.url_map = url_map
        self.query_params = {name: tuple(names) for name, names in (query_params or {}).items()}
        # paths only, the host is supplied by the caller's base URL
        self._adapter = url_map.bind("localhost")

    @classmethod
    def from_flask_app(
        cls, app: "Flask", query_params: Mapping[str, Sequence[str]] | None = None
    ) -> "WerkzeugRouteResolver":
        return cls(app.url_map, query_params)

    def resolve_path(self, name: str, params: Mapping[str, str]) -> str:
        rules = [rule for rule in self.url_map.iter_rules() if rule.endpoint == name]
        if not rules:
            raise RouteResolutionError(name, "no route registered with that name")

        query_names = self.query_params.get(name, ())
        given = set(params)
        if not any(given == rule.arguments | set(query_names) for rule in rules):
            expected = " or ".join(repr(sorted(rule.arguments | set(query_names))) for rule in rules)
            raise RouteResolutionError(name, f"got parameters {sorted(given)!r}, expected {expected}")

        path_values = {key: value for key, value in params.items() if key not in query_names}
        # an empty segment builds a path the same map can never match
        empty = sorted(key for key, value in path_values.items() if not str(value))
        if empty:
            raise RouteResolutionError(name, f"empty values for path parameters {empty!r}")
        try:
            path = self._adapter.build(name, path_values, append_unknown=False)
        except (BuildError, ValueError) as e:
            raise RouteResolutionError(name, str(e)) from e

        if not query_names:
            return path
        query = "&".join(f"{key}={params[key]}" for key in query_names)
        return f"{path}?{query}"


def register_routes(url_map: Map, route_config: RouteConfig) -> dict[str, tuple[str, ...]]:
    """
    Register the lock view and project jobs view on a URL map.

    Returns:
        The query parameter declarations to hand to WerkzeugRouteResolver
    """
    url_map.add(Rule(LOCK_VIEW_PATH, endpoint=route_config.lock_route_name, methods=["GET"]))
    url_map.add(Rule(JOBS_VIEW_PATH, endpoint=route_config.jobs_route_name, methods=["GET"]))
    return {route_config.lock_route_name: (route_config.lock_id_param_name,)}


def build_route_resolver(route_config: RouteConfig) -> WerkzeugRouteResolver:
    url_map = Map()
    query_params = register_routes(url_map, route_config)
    return WerkzeugRouteResolver(url_map, query_params)
