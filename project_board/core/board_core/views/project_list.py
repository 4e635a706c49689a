"""Per-status project list view."""

import logging
from typing import List

from rich.markup import escape
from rich.table import Table

from ..projects import Project, ProjectStatus
from ..state import ProjectState
from .drag import PROJECT_ID_TYPE, DragEvent, DragTarget
from .project_item import ProjectItem

logger = logging.getLogger(__name__)


class ProjectList(DragTarget):
    """Shows the projects of one status and accepts drops to move projects into it."""

    def __init__(self, state: ProjectState, status: ProjectStatus):
        """Initialize the list and subscribe it to the store.

        Args:
            state: The board's project store
            status: Which projects this list shows and moves dropped projects to
        """
        self.state = state
        self.status = status
        self.assigned_projects: List[Project] = []
        self.droppable = False
        self.items: List[ProjectItem] = []

        self.state.add_listener(self._on_projects_changed)

    @property
    def title(self) -> str:
        return f"{self.status.value.upper()} PROJECTS"

    def _on_projects_changed(self, projects: List[Project]) -> None:
        self.assigned_projects = [p for p in projects if p.status == self.status]
        self.items = [ProjectItem(p) for p in self.assigned_projects]

    def drag_over_handler(self, event: DragEvent) -> None:
        if event.types and event.types[0] == PROJECT_ID_TYPE:
            event.prevent_default()
            self.droppable = True

    def drop_handler(self, event: DragEvent) -> None:
        project_id = event.get_data(PROJECT_ID_TYPE)
        self.droppable = False
        logger.debug(f"Dropped {project_id or '<nothing>'} on {self.title}")
        self.state.move_project(project_id, self.status)

    def drag_leave_handler(self, event: DragEvent) -> None:
        self.droppable = False

    def render(self) -> Table:
        """Build a rich table of the projects in this list."""
        table = Table(title=self.title, title_style="bold blue", expand=False)
        table.add_column("ID", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Assigned", justify="right")
        table.add_column("Description")

        for item in self.items:
            table.add_row(
                escape(item.project.id),
                escape(str(item.project.title)),
                item.persons,
                escape(str(item.project.description)),
            )

        return table
