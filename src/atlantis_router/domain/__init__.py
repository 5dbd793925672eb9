"""Domain models for the Atlantis URL router."""

from .value_objects import ProjectJobContext, get_project_identifier

__all__ = ["ProjectJobContext", "get_project_identifier"]
