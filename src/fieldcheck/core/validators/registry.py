"""
Validator registry mapping rule names to validator instances.

A registry is built explicitly per session by default_registry(); there is
no class-level default state, so independent sessions never share
mutations.
"""

import logging
from collections.abc import Callable, Iterator, Mapping

from fieldcheck.utils.validation import validate_rule_name

from .base_validator import BaseValidator, ConfigurationError, UnresolvedValidatorError
from .date_format_validator import DateFormatValidator
from .email_validator import EmailValidator
from .length_validator import LengthValidator
from .required_validator import RequiredValidator

logger = logging.getLogger(__name__)

ValidatorSource = BaseValidator | Callable[[], BaseValidator]


def default_validators() -> dict[str, BaseValidator]:
    """
    Build fresh instances of the built-in validators.

    Returns:
        Dict of rule name -> validator for required, len, email and date-format
    """
    return {
        "required": RequiredValidator(),
        "len": LengthValidator(),
        "email": EmailValidator(),
        "date-format": DateFormatValidator(),
    }


class ValidatorRegistry:
    """
    Mutable mapping of rule name -> validator.

    Entries hold already-constructed validators. A zero-argument factory
    may be registered instead; it is called once at registration time.
    The registry is not thread-safe; do not mutate it during a run.
    """

    def __init__(self, validators: Mapping[str, ValidatorSource] | None = None):
        """
        Initialize the registry.

        Args:
            validators: Optional initial entries (rule name -> validator or factory)
        """
        self._validators: dict[str, BaseValidator] = {}
        for name, validator in (validators or {}).items():
            self.register(name, validator)

    def register(self, name: str, validator: ValidatorSource) -> None:
        """
        Register a validator under a rule name, replacing any existing entry.

        Args:
            name: Rule name used in rule expressions
            validator: Validator instance or factory returning one

        Raises:
            ConfigurationError: If the name is invalid or the validator is not a BaseValidator
        """
        validate_rule_name(name)

        if not isinstance(validator, BaseValidator):
            if not callable(validator):
                raise ConfigurationError(
                    f"Validator for '{name}' must be a BaseValidator or a factory, "
                    f"got {type(validator).__name__}"
                )
            validator = validator()
            if not isinstance(validator, BaseValidator):
                raise ConfigurationError(
                    f"Factory for '{name}' returned {type(validator).__name__}, "
                    "expected a BaseValidator"
                )

        if name in self._validators:
            logger.debug(f"Overriding validator '{name}' with {validator!r}")
        else:
            logger.debug(f"Registering validator '{name}' as {validator!r}")

        self._validators[name] = validator

    def remove(self, name: str) -> None:
        """Remove the validator registered under name; no-op when absent."""
        if self._validators.pop(name, None) is not None:
            logger.debug(f"Removed validator '{name}'")

    def resolve(self, name: str, field_name: str | None = None) -> BaseValidator:
        """
        Look up the validator for a rule name.

        Args:
            name: Rule name from a rule expression
            field_name: Field being validated (for error reporting)

        Returns:
            The registered validator

        Raises:
            UnresolvedValidatorError: If no validator is registered under name
        """
        try:
            return self._validators[name]
        except KeyError:
            raise UnresolvedValidatorError(rule_name=name, field_name=field_name) from None

    def names(self) -> list[str]:
        """Return registered rule names in registration order."""
        return list(self._validators)

    def copy(self) -> "ValidatorRegistry":
        """Return an independent registry sharing the same validator instances."""
        return ValidatorRegistry(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorRegistry(names={self.names()})"


def default_registry() -> ValidatorRegistry:
    """Build a new registry populated with the built-in validators."""
    return ValidatorRegistry(default_validators())
