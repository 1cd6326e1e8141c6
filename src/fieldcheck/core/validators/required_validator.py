"""
RequiredValidator - ensures a field is present and not empty.
"""

from typing import Any

from .base_validator import BaseValidator


class RequiredValidator(BaseValidator):
    """
    Validates that a field is present and not an empty string.

    Fails if:
    - Field value is None or False (treated as absent)
    - Field value is an empty string

    Whitespace-only strings are present and pass.
    """

    def validate(self, value: Any, modifier: str | None = None) -> bool:
        if value is None or value is False:
            return False

        return value != ""

    def compose_error(self, label: str, modifier: str | None = None) -> str:
        return f"{label} is required."

    @property
    def rule_type(self) -> str:
        return "required"
