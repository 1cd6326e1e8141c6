"""
DateFormatValidator - validates that a value parses against a date pattern.

Date patterns in rule expressions use the compact single-letter notation
(e.g. "Y-m-d H:i:s"). Each pattern is translated into a strptime format
and the whole value must be consumed by the parse.
"""

import re
from datetime import datetime, timezone
from typing import Any

from .base_validator import BaseValidator, InvalidModifierError

# Pattern letter -> strptime directive
FORMAT_DIRECTIVES = {
    "Y": "%Y",  # 4-digit year
    "y": "%y",  # 2-digit year
    "m": "%m",  # month, leading zero
    "n": "%m",  # month, no leading zero
    "d": "%d",  # day of month, leading zero
    "j": "%d",  # day of month, no leading zero
    "H": "%H",  # 24-hour
    "G": "%H",
    "h": "%I",  # 12-hour
    "g": "%I",
    "i": "%M",  # minutes
    "s": "%S",  # seconds
    "A": "%p",  # AM/PM
    "a": "%p",
    "D": "%a",  # Mon..Sun
    "l": "%A",  # Monday..Sunday
    "M": "%b",  # Jan..Dec
    "F": "%B",  # January..December
    "u": "%f",  # microseconds
    "v": "%f",  # milliseconds
    "P": "%z",  # +02:00
    "O": "%z",  # +0200
}

# Seconds since the Unix epoch; only valid as the whole pattern
UNIX_TIMESTAMP = "U"

TIMESTAMP_PATTERN = re.compile(r"-?[0-9]+")


def translate_date_pattern(pattern: str) -> str:
    """
    Translate a date pattern into a strptime format string.

    Letters with no mapping are rejected rather than treated as literals,
    so a typo in a rule cannot silently loosen the check. A backslash
    makes the next character literal.

    Args:
        pattern: Date pattern, e.g. "Y-m-d H:i:s"

    Returns:
        Equivalent strptime format, e.g. "%Y-%m-%d %H:%M:%S"

    Raises:
        InvalidModifierError: If the pattern contains an unsupported letter
    """
    parts = []
    escaped = False

    for char in pattern:
        if escaped:
            parts.append("%%" if char == "%" else char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in FORMAT_DIRECTIVES:
            parts.append(FORMAT_DIRECTIVES[char])
        elif char == UNIX_TIMESTAMP:
            raise InvalidModifierError(
                rule_name="date-format",
                modifier=pattern,
                message="'U' must be the whole pattern",
            )
        elif char.isascii() and char.isalpha():
            raise InvalidModifierError(
                rule_name="date-format",
                modifier=pattern,
                message=f"unsupported format character '{char}'",
            )
        elif char == "%":
            parts.append("%%")
        else:
            parts.append(char)

    if escaped:
        raise InvalidModifierError(
            rule_name="date-format",
            modifier=pattern,
            message="pattern ends with a dangling escape",
        )

    return "".join(parts)


class DateFormatValidator(BaseValidator):
    """
    Validates that a field value matches a date/time pattern.

    Modifier:
    - date pattern, e.g. "Y-m-d H:i:s" in "date-format:Y-m-d H:i:s"
    - "U" alone: seconds since the Unix epoch

    The pattern is checked before the value: a missing or unsupported
    pattern raises InvalidModifierError even when the value is empty.
    After that, empty or absent values pass; combine with "required" to
    enforce presence.
    """

    def validate(self, value: Any, modifier: str | None = None) -> bool:
        if not modifier:
            raise InvalidModifierError(
                rule_name=self.rule_type,
                modifier=modifier,
                message="a date pattern is required",
            )

        strptime_format = None
        if modifier != UNIX_TIMESTAMP:
            strptime_format = translate_date_pattern(modifier)

        # Presence is the job of the required validator
        if value is None or value is False or value == "":
            return True

        value_str = value if isinstance(value, str) else str(value)

        if strptime_format is None:
            return self._is_timestamp(value_str)

        try:
            datetime.strptime(value_str, strptime_format)
        except ValueError:
            return False

        return True

    def _is_timestamp(self, value: str) -> bool:
        """Return True if value is a representable Unix timestamp."""
        if not TIMESTAMP_PATTERN.fullmatch(value):
            return False

        try:
            datetime.fromtimestamp(int(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return False

        return True

    def compose_error(self, label: str, modifier: str | None = None) -> str:
        return f"{label} does not match the required date format {modifier}."

    @property
    def rule_type(self) -> str:
        return "date-format"
