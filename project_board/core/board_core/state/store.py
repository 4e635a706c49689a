"""Observable in-memory project store."""

import itertools
import logging
from typing import Callable, Generic, List, Optional, TypeVar
from uuid import uuid4

from ..projects import Project, ProjectStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[List[T]], None]
IdFactory = Callable[[], str]


def uuid_ids() -> IdFactory:
    """Random identifiers from uuid4."""
    return lambda: str(uuid4())


def counter_ids(start: int = 1) -> IdFactory:
    """Monotonically increasing identifiers ("1", "2", ...)."""
    counter = itertools.count(start)
    return lambda: str(next(counter))


class State(Generic[T]):
    """Holds the observers of a piece of state."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def add_listener(self, listener_fn: Listener) -> None:
        """Register a callback invoked with a snapshot after every accepted change.

        Listeners are called in registration order and cannot be removed.
        """
        self._listeners.append(listener_fn)


class ProjectState(State[Project]):
    """Single source of truth for all projects on a board.

    Create one instance per application and pass it to every component that
    reads or changes projects.
    """

    def __init__(self, id_factory: Optional[IdFactory] = None):
        """Initialize an empty store.

        Args:
            id_factory: Callable producing new project ids (default: uuid4 strings)
        """
        super().__init__()
        self._projects: List[Project] = []
        self._next_id = id_factory or uuid_ids()

    @property
    def projects(self) -> List[Project]:
        """Independent copy of the current project sequence."""
        return self._snapshot()

    def add_project(self, title: str, description: str, people: int) -> None:
        """Append a new active project and notify listeners.

        No validation is done here; callers validate before adding.
        """
        new_project = Project.model_construct(
            id=self._next_id(),
            title=title,
            description=description,
            people=people,
            status=ProjectStatus.ACTIVE,
        )
        self._projects.append(new_project)
        logger.info(f"Added project {new_project.id} ({title!r})")
        self._update_listeners()

    def move_project(self, project_id: str, new_status: ProjectStatus) -> None:
        """Change a project's status and notify listeners.

        Unknown ids and moves to the current status are silently ignored.
        """
        project = next((p for p in self._projects if p.id == project_id), None)
        if project is None:
            logger.debug(f"Ignoring move of unknown project {project_id}")
            return
        if project.status == new_status:
            logger.debug(f"Project {project_id} already {new_status.value}")
            return

        project.status = new_status
        logger.info(f"Moved project {project_id} to {new_status.value}")
        self._update_listeners()

    def _snapshot(self) -> List[Project]:
        return [project.model_copy() for project in self._projects]

    def _update_listeners(self) -> None:
        for listener_fn in self._listeners:
            listener_fn(self._snapshot())
