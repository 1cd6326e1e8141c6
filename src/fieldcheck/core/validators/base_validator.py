"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement validate()
and compose_error(). Validators are stateless: one instance is built once
and shared by every field that names it in a rule expression.
"""

from abc import ABC, abstractmethod
from typing import Any


class ConfigurationError(ValueError):
    """Raised when rules or validators are misconfigured (programmer error)."""


class UnresolvedValidatorError(ConfigurationError):
    """Raised when a rule expression names a validator that is not registered."""

    def __init__(self, rule_name: str, field_name: str | None = None):
        self.rule_name = rule_name
        self.field_name = field_name
        if field_name is None:
            message = f"No validator registered under '{rule_name}'"
        else:
            message = f"No validator registered under '{rule_name}' (field '{field_name}')"
        super().__init__(message)


class RuleSyntaxError(ConfigurationError):
    """Raised when a rule expression token cannot be parsed."""

    def __init__(self, token: str, message: str):
        self.token = token
        super().__init__(f"Invalid rule '{token}': {message}")


class InvalidModifierError(ConfigurationError):
    """Raised when a validator cannot interpret the modifier it was given."""

    def __init__(self, rule_name: str, modifier: str | None, message: str):
        self.rule_name = rule_name
        self.modifier = modifier
        super().__init__(f"[{rule_name}] invalid modifier {modifier!r}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    A validator answers two questions about a single field value:
    does it pass (validate), and if not, what should the user be told
    (compose_error). The modifier is the optional text after the first
    ':' in a rule token, e.g. "8" in "len:8".
    """

    @abstractmethod
    def validate(self, value: Any, modifier: str | None = None) -> bool:
        """
        Check a value against this rule.

        Args:
            value: The field value ("" when the field is absent)
            modifier: Rule-specific parameter, or None

        Returns:
            True if the value passes, False otherwise
        """
        pass

    @abstractmethod
    def compose_error(self, label: str, modifier: str | None = None) -> str:
        """
        Build the error message for a failed validation.

        Args:
            label: Display label of the field
            modifier: The same modifier passed to validate()

        Returns:
            Human-readable error message
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type})"
