"""ABOUTME: URL generation for the lock view and project job view
ABOUTME: Combines paths from named routes with the externally reachable base URL"""

import logging
from urllib.parse import quote_plus

from atlantis_router.adapters.route_resolver import RouteResolver
from atlantis_router.config import RouteConfig
from atlantis_router.domain.value_objects import ProjectJobContext

from .exceptions import JobURLError, RouteResolutionError

logger = logging.getLogger(__name__)


class URLGenerator:
    """Builds fully qualified links to Atlantis views.

    The resolver only knows about paths, so every URL is the configured base URL
    with the resolved path appended as a plain string. Going through a URL parser
    here would escape the already escaped lock ID a second time.

    The two operations deliberately handle resolution failure differently:
    lock URLs fall back silently to the bare base URL, job URLs raise.
    """

    def __init__(self, resolver: RouteResolver, route_config: RouteConfig):
        self.resolver = resolver
        self.route_config = route_config

    def generate_lock_url(self, lock_id: str) -> str:
        """
        Return a fully qualified URL to view the lock with the given ID.

        Never raises. A route that fails to resolve contributes an empty path,
        so callers get the bare base URL.
        """
        path = self._resolve_with_silent_fallback(
            self.route_config.lock_route_name,
            {self.route_config.lock_id_param_name: quote_plus(lock_id, errors="surrogateescape")},
        )
        return self.route_config.base_url + path

    def generate_project_job_url(self, ctx: ProjectJobContext) -> str:
        """
        Return a fully qualified URL to the job output of one project in a pull request.

        Slashes in the owner and repo name are replaced with "-" so that nested
        repo names (repo/sub-repo) occupy a single path segment.

        Raises:
            JobURLError: if the jobs route cannot be resolved with these values
        """
        params = {
            "org": ctx.pull_owner.replace("/", "-"),
            "repo": ctx.pull_repo_name.replace("/", "-"),
            "pull": str(ctx.pull_number),
            "project": ctx.project_identifier,
            "workspace": ctx.workspace,
        }
        try:
            path = self.resolver.resolve_path(self.route_config.jobs_route_name, params)
        except RouteResolutionError as e:
            raise JobURLError(
                ctx.repo_full_name, ctx.pull_number, ctx.project_identifier, ctx.workspace, cause=e
            ) from e
        return self.route_config.base_url + path

    def _resolve_with_silent_fallback(self, route_name: str, params: dict[str, str]) -> str:
        try:
            return self.resolver.resolve_path(route_name, params)
        except RouteResolutionError as e:
            logger.warning(f"Could not resolve route '{route_name}', falling back to base URL: {e}")
            return ""
