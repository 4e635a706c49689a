"""Board views built on top of the project store."""

from .drag import PROJECT_ID_TYPE, DragEvent, Draggable, DragTarget
from .project_item import ProjectItem
from .project_list import ProjectList
from .project_input import ProjectInput

__all__ = [
    "PROJECT_ID_TYPE",
    "DragEvent",
    "Draggable",
    "DragTarget",
    "ProjectItem",
    "ProjectList",
    "ProjectInput",
]
