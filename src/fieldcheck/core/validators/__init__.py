"""
Validator implementations and registry.

Provides validators for required fields, minimum length, e-mail addresses,
date formats and custom validation logic, plus the registry that maps rule
names to them.
"""

from .base_validator import (
    BaseValidator,
    ConfigurationError,
    InvalidModifierError,
    RuleSyntaxError,
    UnresolvedValidatorError,
)
from .custom_validator import CustomValidator
from .date_format_validator import DateFormatValidator, translate_date_pattern
from .email_validator import EmailValidator
from .length_validator import LengthValidator
from .registry import ValidatorRegistry, default_registry, default_validators
from .required_validator import RequiredValidator

__all__ = [
    "BaseValidator",
    "ConfigurationError",
    "UnresolvedValidatorError",
    "RuleSyntaxError",
    "InvalidModifierError",
    "RequiredValidator",
    "LengthValidator",
    "EmailValidator",
    "DateFormatValidator",
    "CustomValidator",
    "ValidatorRegistry",
    "default_registry",
    "default_validators",
    "translate_date_pattern",
]
