"""Project entity models for the project board."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProjectStatus(str, Enum):
    """Lifecycle state of a project on the board."""

    ACTIVE = "active"
    FINISHED = "finished"


class Project(BaseModel):
    """A proposed or ongoing unit of work.

    Only ``status`` may change after creation; the other fields are frozen.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    title: str = Field(frozen=True)
    description: str = Field(frozen=True)
    people: int = Field(frozen=True)
    status: ProjectStatus = ProjectStatus.ACTIVE
