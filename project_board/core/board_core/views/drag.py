"""Drag and drop capabilities for board views."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

PROJECT_ID_TYPE = "text/plain"


@dataclass
class DragEvent:
    """A drag gesture carrying typed payloads between views."""
    data_transfer: Dict[str, str] = field(default_factory=dict)
    effect_allowed: Optional[str] = None
    default_prevented: bool = False

    @property
    def types(self) -> List[str]:
        return list(self.data_transfer)

    def set_data(self, data_type: str, data: str) -> None:
        self.data_transfer[data_type] = data

    def get_data(self, data_type: str) -> str:
        return self.data_transfer.get(data_type, "")

    def prevent_default(self) -> None:
        self.default_prevented = True


class Draggable(ABC):
    """A view that can be picked up and dragged."""

    @abstractmethod
    def drag_start_handler(self, event: DragEvent) -> None:
        pass

    @abstractmethod
    def drag_end_handler(self, event: DragEvent) -> None:
        pass


class DragTarget(ABC):
    """A view that accepts dropped items."""

    @abstractmethod
    def drag_over_handler(self, event: DragEvent) -> None:
        pass

    @abstractmethod
    def drop_handler(self, event: DragEvent) -> None:
        pass

    @abstractmethod
    def drag_leave_handler(self, event: DragEvent) -> None:
        pass
