"""Project entities for the project board."""

from .models import Project, ProjectStatus

__all__ = ['Project', 'ProjectStatus']
