"""
Validation session: the public entry point of fieldcheck.

Example usage:

    fields = {"email": "asko@bien.ee", "password": "hunter2"}
    rules = {"email": "required|email", "password": "required|len:8"}
    validation = Validation(fields, rules, field_labels={"password": "Password"})

    if validation.fails():
        return validation.errors()
        # ["Password is shorter than the required 8 characters."]

Custom validators are registered under a rule name and used like the
built-ins:

    validation.register_validator("even", CustomValidator(is_even, even_error))

Passing a mapping as `validators` replaces the built-ins; merge
default_validators() into it to keep them:

    Validation(fields, rules, validators={**default_validators(), "even": even})
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldcheck.core.models import ValidationResult
from fieldcheck.core.rules import RuleEngine
from fieldcheck.core.validators import (
    BaseValidator,
    ConfigurationError,
    ValidatorRegistry,
    default_registry,
)
from fieldcheck.core.validators.registry import ValidatorSource
from fieldcheck.observability.logger import log_operation
from fieldcheck.utils.validation import (
    validate_field_mapping,
    validate_label_mapping,
    validate_rule_mapping,
)

logger = logging.getLogger(__name__)


class Validation:
    """
    Validates one FieldSet against one RuleSet.

    Validation runs lazily on the first query (fails, errors, first_error,
    result) and the outcome is cached until the registry or the field
    labels change. Configuration faults such as an unregistered rule name
    are raised from the query that triggered the run and are never
    recorded as errors.
    """

    def __init__(
        self,
        fields: Mapping[str, Any],
        rules: Mapping[str, str],
        validators: ValidatorRegistry | Mapping[str, ValidatorSource] | None = None,
        field_labels: Mapping[str, str] | None = None,
    ):
        """
        Initialize the validation session.

        Args:
            fields: Field name -> value; copied, never mutated
            rules: Field name -> rule expression; copied, never mutated
            validators: A ValidatorRegistry to use as-is, a mapping of
                        rule name -> validator that replaces the built-ins,
                        or None for a fresh default registry
            field_labels: Field name -> display label for error messages
        """
        self._fields = validate_field_mapping(fields)
        self._rules = validate_rule_mapping(rules)
        self._labels = validate_label_mapping(field_labels)
        self._engine = RuleEngine(self._build_registry(validators))
        self._result: ValidationResult | None = None
        self._manual_errors: list[str] = []

    @staticmethod
    def _build_registry(
        validators: ValidatorRegistry | Mapping[str, ValidatorSource] | None,
    ) -> ValidatorRegistry:
        if validators is None:
            return default_registry()
        if isinstance(validators, ValidatorRegistry):
            return validators
        if isinstance(validators, Mapping):
            return ValidatorRegistry(validators)
        raise ConfigurationError(
            f"validators must be a ValidatorRegistry or a mapping, got {type(validators).__name__}"
        )

    @property
    def registry(self) -> ValidatorRegistry:
        """The registry this session resolves rule names against."""
        return self._engine.registry

    def register_validator(self, name: str, validator: BaseValidator) -> None:
        """Register (or override) the validator used for rule name."""
        self._engine.registry.register(name, validator)
        self._invalidate()

    def remove_validator(self, name: str) -> None:
        """Remove the validator for rule name; no-op when absent."""
        self._engine.registry.remove(name)
        self._invalidate()

    def set_field_labels(self, field_labels: Mapping[str, str] | None) -> None:
        """Replace the display labels used in error messages."""
        self._labels = validate_label_mapping(field_labels)
        self._invalidate()

    def field_label(self, field_name: str) -> str:
        """Return the display label for a field (the field name when unset)."""
        return self._labels.get(field_name, field_name)

    def add_error(self, error: str) -> None:
        """Record an error produced outside the rule engine."""
        self._manual_errors.append(error)

    def validate(self) -> list[str]:
        """
        Run validation now, discarding any cached outcome.

        Returns:
            The error log (engine errors followed by manually added errors)

        Raises:
            UnresolvedValidatorError: If a rule names an unregistered validator
            ConfigurationError: If a rule or modifier is malformed
        """
        self._result = None

        with log_operation("validation run", logger=logger, field_count=len(self._rules)):
            self._result = self._engine.evaluate(self._fields, self._rules, self._labels)

        return self.errors()

    def fails(self) -> bool:
        """Return True if validation produced any errors."""
        return len(self.errors()) != 0

    def errors(self) -> list[str]:
        """Return every error, in field order then rule order."""
        if self._result is None:
            self.validate()
        return [*self._result.errors, *self._manual_errors]

    def first_error(self) -> str:
        """Return the first error, or an empty string when there are none."""
        errors = self.errors()
        return errors[0] if errors else ""

    def result(self) -> ValidationResult:
        """Return the outcome as a ValidationResult model."""
        errors = self.errors()
        return ValidationResult(
            passed=len(errors) == 0,
            errors=errors,
            fields_checked=self._result.fields_checked,
            rules_applied=self._result.rules_applied,
        )

    def _invalidate(self) -> None:
        self._result = None

    def __repr__(self) -> str:
        return f"Validation(fields={list(self._fields)}, rules={self._rules})"
