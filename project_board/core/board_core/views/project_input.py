"""Project submission form."""

import logging
from typing import Optional, Tuple, Union

from ..config import BoardConfig
from ..state import ProjectState
from ..validation import Validatable, validate

logger = logging.getLogger(__name__)


class ProjectInput:
    """Validates submitted project details and adds them to the store."""

    def __init__(self, state: ProjectState, config: Optional[BoardConfig] = None):
        self.state = state
        self.config = config or BoardConfig()
        self.last_error: Optional[str] = None

    def submit(self, title: str, description: str, people: Union[int, str]) -> bool:
        """Handle a form submission.

        Args:
            title: Project title
            description: Project description
            people: Number of people, as typed or already parsed

        Returns:
            True if the project was added, False if the input was rejected
        """
        user_inputs = self.gather_user_inputs(title, description, people)
        if user_inputs is None:
            logger.warning(f"Rejected project submission: {self.last_error}")
            return False

        self.state.add_project(*user_inputs)
        return True

    def gather_user_inputs(
        self,
        title: str,
        description: str,
        people: Union[int, str],
    ) -> Optional[Tuple[str, str, int]]:
        """Validate raw input and return ``(title, description, people)`` or None."""
        self.last_error = None
        title = title.strip()
        description = description.strip()

        try:
            people_count = int(str(people).strip())
        except ValueError:
            self.last_error = f"people must be a whole number, got {people!r}"
            return None

        title_rules = Validatable(value=title, required=True)
        description_rules = Validatable(
            value=description,
            required=True,
            min_length=self.config.description_min_length,
        )
        people_rules = Validatable(
            value=people_count,
            required=True,
            min=self.config.min_people,
            max=self.config.max_people,
        )

        if not validate(title_rules):
            self.last_error = "title is required"
        elif not validate(description_rules):
            self.last_error = (
                f"description needs at least {self.config.description_min_length} characters"
            )
        elif not validate(people_rules):
            self.last_error = (
                f"people must be between {self.config.min_people} and {self.config.max_people}"
            )

        if self.last_error:
            return None

        return title, description, people_count
