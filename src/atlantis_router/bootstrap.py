from atlantis_router.adapters.route_resolver import RouteResolver, build_route_resolver
from atlantis_router.config import RouteConfig, get_route_config
from atlantis_router.service_layer.url_generator import URLGenerator


def bootstrap(
    route_config: RouteConfig | None = None,
    resolver: RouteResolver | None = None,
) -> URLGenerator:
    if route_config is None:
        route_config = get_route_config()

    if resolver is None:
        resolver = build_route_resolver(route_config)

    return URLGenerator(resolver, route_config)
