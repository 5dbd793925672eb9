"""ABOUTME: Unit tests for wiring the URL generator together
ABOUTME: Tests default and injected route configuration and resolvers"""

from atlantis_router.adapters.route_resolver import WerkzeugRouteResolver
from atlantis_router.bootstrap import bootstrap
from atlantis_router.config import RouteConfig
from tests.fakes import FakeRouteResolver


def test_bootstrap_reads_config_from_env(temp_env_vars):
    temp_env_vars(ATLANTIS_URL="https://atlantis.example.com")

    url_generator = bootstrap()

    assert url_generator.route_config.base_url == "https://atlantis.example.com"
    assert isinstance(url_generator.resolver, WerkzeugRouteResolver)
    assert url_generator.generate_lock_url("x") == "https://atlantis.example.com/lock?id=x"


def test_bootstrap_with_injected_resolver():
    route_config = RouteConfig(base_url="https://atlantis.example.com")
    resolver = FakeRouteResolver({"lock-detail": "/custom"})

    url_generator = bootstrap(route_config=route_config, resolver=resolver)

    assert url_generator.generate_lock_url("x") == "https://atlantis.example.com/custom"
