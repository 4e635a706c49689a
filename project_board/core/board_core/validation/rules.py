"""Caller-side input validation for project submissions."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class Validatable:
    """A value plus the rules it must satisfy."""
    value: Union[str, int]
    required: bool = False
    min_length: Optional[int] = None  # strings only
    max_length: Optional[int] = None  # strings only
    min: Optional[int] = None         # numbers only, inclusive
    max: Optional[int] = None         # numbers only, inclusive


def validate(validatable: Validatable) -> bool:
    """Check a value against its rules.

    Args:
        validatable: Value and rules to check

    Returns:
        True if every configured rule holds
    """
    value = validatable.value
    is_valid = True

    if validatable.required:
        is_valid = is_valid and len(str(value).strip()) != 0

    if isinstance(value, str):
        if validatable.min_length is not None:
            is_valid = is_valid and len(value) >= validatable.min_length
        if validatable.max_length is not None:
            is_valid = is_valid and len(value) <= validatable.max_length
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if validatable.min is not None:
            is_valid = is_valid and value >= validatable.min
        if validatable.max is not None:
            is_valid = is_valid and value <= validatable.max

    return is_valid
