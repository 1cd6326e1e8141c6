"""
Input validation utilities for rule and validator configuration.

Provides reusable checks for rule names, field mappings and label maps
so that misconfiguration is reported as a ConfigurationError at the
point it is introduced rather than mid-run.
"""

from collections.abc import Mapping
from typing import Any

from fieldcheck.core.validators.base_validator import ConfigurationError

# Characters that carry meaning in rule expressions
RESERVED_CHARACTERS = ("|", ":")


def validate_rule_name(name: str, field_name: str = "rule name") -> str:
    """
    Validate a validator registration name.

    Rule names must be non-empty strings without surrounding whitespace
    and must not contain '|' or ':', which delimit rule expressions.

    Args:
        name: The rule name to validate
        field_name: Name of the argument (for error messages)

    Returns:
        The validated rule name

    Raises:
        ConfigurationError: If validation fails

    Examples:
        >>> validate_rule_name("len")
        'len'
        >>> validate_rule_name("date-format")
        'date-format'
        >>> validate_rule_name("len:8")  # doctest: +SKIP
        ConfigurationError: rule name 'len:8' contains reserved character ':'
    """
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{field_name} must be a non-empty string")

    if name != name.strip():
        raise ConfigurationError(f"{field_name} '{name}' has surrounding whitespace")

    for char in RESERVED_CHARACTERS:
        if char in name:
            raise ConfigurationError(
                f"{field_name} '{name}' contains reserved character '{char}'"
            )

    return name


def validate_rule_mapping(rules: Mapping[str, Any], field_name: str = "rules") -> dict[str, str]:
    """
    Validate a RuleSet mapping of field name to rule expression.

    Args:
        rules: Mapping of field name -> rule expression string
        field_name: Name of the argument (for error messages)

    Returns:
        A new dict with the same entries, in the same order

    Raises:
        ConfigurationError: If validation fails

    Examples:
        >>> validate_rule_mapping({"email": "required|email"})
        {'email': 'required|email'}
    """
    if not isinstance(rules, Mapping):
        raise ConfigurationError(
            f"{field_name} must be a mapping, got {type(rules).__name__}"
        )

    validated = {}
    for key, expression in rules.items():
        if not isinstance(key, str):
            raise ConfigurationError(
                f"{field_name} keys must be strings, got {type(key).__name__}"
            )
        if not isinstance(expression, str):
            raise ConfigurationError(
                f"{field_name}['{key}'] must be a rule expression string, "
                f"got {type(expression).__name__}"
            )
        validated[key] = expression

    return validated


def validate_field_mapping(fields: Mapping[str, Any], field_name: str = "fields") -> dict[str, Any]:
    """
    Validate a FieldSet mapping of field name to value.

    Values are not inspected; that is the validators' job.

    Args:
        fields: Mapping of field name -> value
        field_name: Name of the argument (for error messages)

    Returns:
        A shallow copy of the mapping, in the same order

    Raises:
        ConfigurationError: If validation fails
    """
    if not isinstance(fields, Mapping):
        raise ConfigurationError(
            f"{field_name} must be a mapping, got {type(fields).__name__}"
        )

    for key in fields:
        if not isinstance(key, str):
            raise ConfigurationError(
                f"{field_name} keys must be strings, got {type(key).__name__}"
            )

    return dict(fields)


def validate_label_mapping(labels: Mapping[str, Any] | None, field_name: str = "field_labels") -> dict[str, str]:
    """
    Validate a FieldLabelMap of field name to display label.

    Args:
        labels: Mapping of field name -> label, or None
        field_name: Name of the argument (for error messages)

    Returns:
        A new dict of labels (empty when labels is None)

    Raises:
        ConfigurationError: If validation fails

    Examples:
        >>> validate_label_mapping({"date": "Date"})
        {'date': 'Date'}
        >>> validate_label_mapping(None)
        {}
    """
    if labels is None:
        return {}

    if not isinstance(labels, Mapping):
        raise ConfigurationError(
            f"{field_name} must be a mapping, got {type(labels).__name__}"
        )

    validated = {}
    for key, label in labels.items():
        if not isinstance(label, str) or not label:
            raise ConfigurationError(f"{field_name}['{key}'] must be a non-empty string")
        validated[key] = label

    return validated
