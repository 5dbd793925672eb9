"""ABOUTME: Value objects describing the resources that Atlantis links point at
ABOUTME: Defines the project job context and the project identifier derivation"""

from dataclasses import dataclass


def get_project_identifier(repo_rel_dir: str, project_name: str) -> str:
    """
    Return the identifier used for a project in job URLs.

    A named project is identified by its name. An unnamed project falls back to
    its directory relative to the repo root, with "/" replaced by "-" and "."
    by "_" so that the root directory "." still yields a usable path segment.
    """
    if project_name:
        return project_name
    return repo_rel_dir.replace("/", "-").replace(".", "_")


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectJobContext:
    """Identifies one project's job run within a pull request and workspace."""

    pull_owner: str
    pull_repo_name: str
    pull_number: int
    project_identifier: str
    workspace: str

    @property
    def repo_full_name(self) -> str:
        return f"{self.pull_owner}/{self.pull_repo_name}"

    @classmethod
    def from_project(
        cls,
        pull_owner: str,
        pull_repo_name: str,
        pull_number: int,
        workspace: str,
        repo_rel_dir: str = ".",
        project_name: str = "",
    ) -> "ProjectJobContext":
        return cls(
            pull_owner=pull_owner,
            pull_repo_name=pull_repo_name,
            pull_number=pull_number,
            project_identifier=get_project_identifier(repo_rel_dir, project_name),
            workspace=workspace,
        )
