"""Input validation helpers for the project board."""

from .rules import Validatable, validate

__all__ = ["Validatable", "validate"]
