"""
LengthValidator - validates that a value is at least a minimum number of characters.
"""

import re
from typing import Any

from .base_validator import BaseValidator, InvalidModifierError

MINIMUM_PATTERN = re.compile(r"[+-]?[0-9]+")


class LengthValidator(BaseValidator):
    """
    Validates the character length of a field value.

    Modifier:
    - minimum length as a base-10 integer string, e.g. "8" in "len:8"

    A missing, empty, zero or negative modifier means "no constraint" and
    the validator always passes.
    """

    def validate(self, value: Any, modifier: str | None = None) -> bool:
        minimum = self._parse_minimum(modifier)

        # No constraint requested
        if minimum <= 0:
            return True

        if value is None or value is False:
            return False

        return len(str(value)) >= minimum

    def compose_error(self, label: str, modifier: str | None = None) -> str:
        return f"{label} is shorter than the required {modifier} characters."

    def _parse_minimum(self, modifier: str | None) -> int:
        """
        Convert the modifier into an integer minimum.

        Raises:
            InvalidModifierError: If the modifier is not a base-10 integer
        """
        if modifier is None or modifier.strip() == "":
            return 0

        if not MINIMUM_PATTERN.fullmatch(modifier.strip()):
            raise InvalidModifierError(
                rule_name=self.rule_type,
                modifier=modifier,
                message="expected a base-10 integer",
            )

        return int(modifier.strip(), 10)

    @property
    def rule_type(self) -> str:
        return "len"
