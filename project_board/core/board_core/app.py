"""Board application wiring."""

import logging
from typing import Optional

from rich.columns import Columns

from .config import BoardConfig
from .projects import ProjectStatus
from .state import ProjectState
from .views import PROJECT_ID_TYPE, DragEvent, ProjectInput, ProjectItem, ProjectList

logger = logging.getLogger(__name__)


class BoardApp:
    """One board: a single project store shared by the form and both lists."""

    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.state = ProjectState(id_factory=self.config.id_factory())

        self.project_input = ProjectInput(self.state, self.config)
        self.active_projects = ProjectList(self.state, ProjectStatus.ACTIVE)
        self.finished_projects = ProjectList(self.state, ProjectStatus.FINISHED)

        logger.info(f"Board started with {self.config.id_strategy} project ids")

    def list_for(self, status: ProjectStatus) -> ProjectList:
        if status == ProjectStatus.ACTIVE:
            return self.active_projects
        return self.finished_projects

    def find_item(self, project_id: str) -> Optional[ProjectItem]:
        """Find the rendered card for a project in either list."""
        for project_list in (self.active_projects, self.finished_projects):
            for item in project_list.items:
                if item.project.id == project_id:
                    return item
        return None

    def move(self, project_id: str, status: ProjectStatus) -> None:
        """Drag a project's card onto the list for ``status``."""
        target = self.list_for(status)
        event = DragEvent()

        item = self.find_item(project_id)
        if item is not None:
            item.drag_start_handler(event)
        else:
            event.set_data(PROJECT_ID_TYPE, project_id)

        target.drag_over_handler(event)
        if event.default_prevented:
            target.drop_handler(event)
        else:
            target.drag_leave_handler(event)

        if item is not None:
            item.drag_end_handler(event)

    def render(self) -> Columns:
        """Both project lists side by side."""
        return Columns([
            self.active_projects.render(),
            self.finished_projects.render(),
        ])
