"""
CustomValidator - validates using a pair of caller-supplied functions.
"""

from collections.abc import Callable
from typing import Any

from .base_validator import BaseValidator, ConfigurationError


class CustomValidator(BaseValidator):
    """
    Validates using custom validation and error-composition functions.

    Parameters:
    - validates: A callable taking (value, modifier) and returning a bool
    - error: A callable taking (label, modifier) and returning the message
    - name: Optional rule type identifier (defaults to "custom")

    Example:
        def is_even(value, modifier):
            return value != "" and int(value) % 2 == 0

        def even_error(label, modifier):
            return f"{label} must be even."

        validator = CustomValidator(is_even, even_error, name="even")

    Exceptions raised by either function propagate to the caller unchanged.
    """

    def __init__(
        self,
        validates: Callable[[Any, str | None], bool],
        error: Callable[[str, str | None], str],
        name: str | None = None,
    ):
        if not callable(validates):
            raise ConfigurationError("validates must be callable")

        if not callable(error):
            raise ConfigurationError("error must be callable")

        self.validates = validates
        self.error = error
        self.name = name or "custom"

    def validate(self, value: Any, modifier: str | None = None) -> bool:
        return bool(self.validates(value, modifier))

    def compose_error(self, label: str, modifier: str | None = None) -> str:
        return str(self.error(label, modifier))

    @property
    def rule_type(self) -> str:
        return self.name
