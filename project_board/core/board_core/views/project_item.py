"""Single project card."""

import logging

from rich.markup import escape
from rich.panel import Panel

from ..projects import Project
from .drag import PROJECT_ID_TYPE, DragEvent, Draggable

logger = logging.getLogger(__name__)


class ProjectItem(Draggable):
    """Renders one project and acts as the drag source for moving it."""

    def __init__(self, project: Project):
        self.project = project

    @property
    def persons(self) -> str:
        if self.project.people == 1:
            return "1 person"
        return f"{self.project.people} people"

    def drag_start_handler(self, event: DragEvent) -> None:
        event.set_data(PROJECT_ID_TYPE, self.project.id)
        event.effect_allowed = "move"

    def drag_end_handler(self, event: DragEvent) -> None:
        logger.debug(f"Drag ended for project {self.project.id}")

    def render(self) -> Panel:
        """Build a rich panel for this project."""
        body = f"[dim]{self.persons} assigned[/dim]\n{escape(str(self.project.description))}"
        return Panel(
            body,
            title=f"[bold]{escape(str(self.project.title))}[/bold]",
            subtitle=f"[dim]{escape(self.project.id)}[/dim]",
            expand=False,
        )
