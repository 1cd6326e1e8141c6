"""
EmailValidator - validates field values as e-mail addresses.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from .base_validator import BaseValidator


class EmailValidator(BaseValidator):
    """
    Validates that a field value is a well-formed e-mail address.

    Syntax checking is delegated to email-validator without a DNS lookup:
    the address must be local-part@domain where the domain has at least
    one dot, with no whitespace anywhere. Absent values fail.
    """

    def validate(self, value: Any, modifier: str | None = None) -> bool:
        if value is None or value is False:
            return False

        value_str = value if isinstance(value, str) else str(value)

        try:
            validate_email(value_str, check_deliverability=False)
        except EmailNotValidError:
            return False

        return True

    def compose_error(self, label: str, modifier: str | None = None) -> str:
        return f"{label} is not a valid e-mail address."

    @property
    def rule_type(self) -> str:
        return "email"
