"""ABOUTME: Configuration management for the Atlantis URL router
ABOUTME: Loads environment variables and builds the immutable RouteConfig used for link generation"""

import logging
import os
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from dotenv import load_dotenv

load_dotenv()


class InvalidConfig(Exception):
    """Error for when the config is not valid"""


DEFAULT_ATLANTIS_URL = "http://localhost:4141"
DEFAULT_LOCK_VIEW_ROUTE_NAME = "lock-detail"
DEFAULT_PROJECT_JOBS_VIEW_ROUTE_NAME = "project-jobs-detail"
DEFAULT_LOCK_VIEW_ROUTE_ID_QUERY_PARAM = "id"


def to_bool(value: str | None, context_str: str = "") -> bool:
    """
    Convert string to boolean. Valid options (after stripping whitespace and making lower-case)
    - False: "false", "no", "off", "0", None, ""
    - True: "true", "yes", "on", "1"

    The `context_str` is there for the error message, to help find the issue.
    """
    if value is None:
        return False
    value = value.lower().strip()
    if value in ("false", "no", "off", "0", ""):
        return False
    if value in ("true", "yes", "on", "1"):
        return True
    raise ValueError(
        f"Cannot convert '{context_str}{value}' to boolean. Valid values are: true/false, 1/0, yes/no, on/off (case-insensitive)"
    )


def parse_atlantis_url(raw_url: str) -> str:
    """
    Validate the externally reachable URL and normalise it for concatenation.

    The URL must be absolute (http or https, with a host) and carry no query or
    fragment. Any trailing slash on the path is removed so that route paths,
    which always start with "/", can be appended without checking.

    Raises:
        InvalidConfig: if the URL cannot be used as a base URL
    """
    parsed = urlsplit(raw_url.strip())
    if parsed.scheme not in ("http", "https"):
        raise InvalidConfig(f"ATLANTIS_URL '{raw_url}' must use http or https")
    if not parsed.netloc:
        raise InvalidConfig(f"ATLANTIS_URL '{raw_url}' must be an absolute URL with a host")
    if parsed.query or parsed.fragment:
        raise InvalidConfig(f"ATLANTIS_URL '{raw_url}' must not contain a query or fragment")
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path.rstrip("/"), "", ""))


def get_atlantis_url() -> str:
    return parse_atlantis_url(os.environ.get("ATLANTIS_URL", DEFAULT_ATLANTIS_URL))


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteConfig:
    lock_route_name: str = DEFAULT_LOCK_VIEW_ROUTE_NAME
    jobs_route_name: str = DEFAULT_PROJECT_JOBS_VIEW_ROUTE_NAME
    lock_id_param_name: str = DEFAULT_LOCK_VIEW_ROUTE_ID_QUERY_PARAM
    base_url: str = DEFAULT_ATLANTIS_URL

    @classmethod
    def from_env(cls) -> "RouteConfig":
        return cls(
            lock_route_name=os.environ.get("LOCK_VIEW_ROUTE_NAME", DEFAULT_LOCK_VIEW_ROUTE_NAME),
            jobs_route_name=os.environ.get("PROJECT_JOBS_VIEW_ROUTE_NAME", DEFAULT_PROJECT_JOBS_VIEW_ROUTE_NAME),
            lock_id_param_name=os.environ.get("LOCK_VIEW_ROUTE_ID_QUERY_PARAM", DEFAULT_LOCK_VIEW_ROUTE_ID_QUERY_PARAM),
            base_url=get_atlantis_url(),
        )


def get_route_config() -> RouteConfig:
    return RouteConfig.from_env()


def get_app_env() -> str:
    return os.environ.get("APP_ENV", "development").lower().strip()


def is_development() -> bool:
    return get_app_env() == "development"


def should_log_json() -> bool:
    return to_bool(os.environ.get("LOG_JSON"), context_str="LOG_JSON=")


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise InvalidConfig(f"LOG_LEVEL '{level_name}' is not a valid logging level")
    return level
