"""
Rule engine for applying rule expressions to field values.

The rule engine parses each field's rule expression, resolves every
validator it names through the registry, and collects one composed error
message per failing rule.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldcheck.core.models import RuleInvocation, ValidationResult
from fieldcheck.core.validators import ValidatorRegistry, default_registry

from .rule_parser import parse_rules

logger = logging.getLogger(__name__)

# Value handed to validators when a field is absent
ABSENT = ""


def resolve_value(fields: Mapping[str, Any], field_name: str) -> Any:
    """
    Look up a field value, normalising absent values.

    Missing keys, None and False all become the empty-string sentinel.
    """
    value = fields.get(field_name)
    if value is None or value is False:
        return ABSENT
    return value


class RuleEngine:
    """
    Orchestrates validators over a FieldSet.

    Fields are visited in RuleSet order and rules in expression order,
    collecting all validation failures; the engine never stops at the
    first one. The engine keeps no state between runs, so one instance
    may be reused for many FieldSet/RuleSet pairs while its registry is
    left unchanged.
    """

    def __init__(self, registry: ValidatorRegistry | None = None):
        """
        Initialize the rule engine.

        Args:
            registry: Validator registry; a fresh default registry when None
        """
        self.registry = registry if registry is not None else default_registry()

    def run(
        self,
        fields: Mapping[str, Any],
        rules: Mapping[str, str],
        labels: Mapping[str, str] | None = None,
    ) -> list[str]:
        """
        Validate fields against rules and return the error log.

        Args:
            fields: Field name -> value
            rules: Field name -> rule expression
            labels: Field name -> display label (defaults to the field name)

        Returns:
            Composed error messages, in field order then rule order

        Raises:
            UnresolvedValidatorError: If a rule names an unregistered validator
            ConfigurationError: If a rule or modifier is malformed
        """
        return self.evaluate(fields, rules, labels).errors

    def evaluate(
        self,
        fields: Mapping[str, Any],
        rules: Mapping[str, str],
        labels: Mapping[str, str] | None = None,
    ) -> ValidationResult:
        """
        Validate fields against rules and return a ValidationResult.

        Args:
            fields: Field name -> value
            rules: Field name -> rule expression
            labels: Field name -> display label (defaults to the field name)

        Returns:
            ValidationResult with the error log and run counts
        """
        labels = labels or {}
        errors: list[str] = []
        rules_applied = 0

        logger.debug(f"Starting validation of {len(rules)} field(s)")

        for field_name, expression in rules.items():
            value = resolve_value(fields, field_name)
            label = labels.get(field_name, field_name)

            for invocation in parse_rules(expression):
                rules_applied += 1
                error = self._apply(invocation, field_name, value, label)
                if error is not None:
                    errors.append(error)

        logger.debug(
            f"Validation finished: {len(rules)} field(s), "
            f"{rules_applied} rule(s), {len(errors)} error(s)"
        )

        return ValidationResult(
            passed=len(errors) == 0,
            errors=errors,
            fields_checked=len(rules),
            rules_applied=rules_applied,
        )

    def evaluate_batch(
        self,
        field_sets: list[Mapping[str, Any]],
        rules: Mapping[str, str],
        labels: Mapping[str, str] | None = None,
    ) -> list[ValidationResult]:
        """
        Validate several FieldSets against the same rules.

        Args:
            field_sets: List of field name -> value mappings
            rules: Field name -> rule expression
            labels: Field name -> display label

        Returns:
            List of ValidationResult objects, one per FieldSet
        """
        return [self.evaluate(fields, rules, labels) for fields in field_sets]

    def _apply(
        self,
        invocation: RuleInvocation,
        field_name: str,
        value: Any,
        label: str,
    ) -> str | None:
        """Run one invocation; return its error message, or None when it passes."""
        validator = self.registry.resolve(invocation.name, field_name=field_name)

        if validator.validate(value, invocation.modifier):
            return None

        logger.debug(f"Field '{field_name}' failed rule '{invocation.to_token()}'")
        return validator.compose_error(label, invocation.modifier)

    def get_rule_summary(self, rules: Mapping[str, str]) -> dict[str, Any]:
        """
        Get summary of a RuleSet.

        Args:
            rules: Field name -> rule expression

        Returns:
            Dictionary with invocation counts and any unresolved names
        """
        counts: dict[str, int] = {}
        for expression in rules.values():
            for invocation in parse_rules(expression):
                counts[invocation.name] = counts.get(invocation.name, 0) + 1

        return {
            "total_rules": sum(counts.values()),
            "rules_by_name": counts,
            "unresolved": [name for name in counts if name not in self.registry],
        }
