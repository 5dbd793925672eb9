"""ABOUTME: Pytest configuration and fixtures for atlantis-router tests
ABOUTME: Provides environment and route configuration fixtures shared by the unit tests"""

import os

import pytest

from atlantis_router.adapters.route_resolver import build_route_resolver
from atlantis_router.config import RouteConfig
from atlantis_router.service_layer.url_generator import URLGenerator

BASE_URL = "https://atlantis.example.com"


@pytest.fixture
def clear_env_vars():
    """Fixture to temporarily remove environment variables for testing."""
    original_vars = {}

    def _clear_env_vars(*args):
        for key in args:
            original_vars[key] = os.environ.get(key)
            os.environ.pop(key, None)

    yield _clear_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value


@pytest.fixture
def temp_env_vars():
    """Fixture to temporarily set environment variables for testing."""
    original_vars = {}

    def _set_env_vars(**kwargs):
        for key, value in kwargs.items():
            original_vars[key] = os.environ.get(key)
            os.environ[key] = value

    yield _set_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


@pytest.fixture
def route_config():
    """Provide the default route names with the example base URL."""
    return RouteConfig(base_url=BASE_URL)


@pytest.fixture
def url_generator(route_config):
    """Provide a URL generator resolving against the real werkzeug routes."""
    return URLGenerator(build_route_resolver(route_config), route_config)
