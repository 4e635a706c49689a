"""State management for the project board."""

from .store import (
    State,
    ProjectState,
    Listener,
    IdFactory,
    uuid_ids,
    counter_ids,
)

__all__ = [
    "State",
    "ProjectState",
    "Listener",
    "IdFactory",
    "uuid_ids",
    "counter_ids",
]
