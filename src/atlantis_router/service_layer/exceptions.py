"""ABOUTME: Custom exceptions for URL generation operations
ABOUTME: Defines route resolution and job URL errors carrying diagnostic context"""


class AtlantisRouterError(Exception):
    """Base exception for all our custom errors."""


class RouteResolutionError(AtlantisRouterError):
    """Raised when a named route cannot be turned into a path with the given parameters."""

    def __init__(self, route_name: str, reason: str) -> None:
        super().__init__(f"resolving route '{route_name}': {reason}")
        self.route_name = route_name
        self.reason = reason


class JobURLError(AtlantisRouterError):
    """Raised when the project job URL cannot be built."""

    def __init__(
        self,
        repo_full_name: str,
        pull_number: int,
        project_identifier: str,
        workspace: str,
        cause: Exception | None = None,
    ) -> None:
        message = f"creating job url for {repo_full_name}/{pull_number}/{project_identifier}/{workspace}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.repo_full_name = repo_full_name
        self.pull_number = pull_number
        self.project_identifier = project_identifier
        self.workspace = workspace
