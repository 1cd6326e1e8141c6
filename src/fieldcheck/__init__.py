"""
fieldcheck - validate field values against compact rule expressions.

    from fieldcheck import Validation

    validation = Validation({"email": "a@b.com"}, {"email": "required|email"})
    validation.fails()  # False
"""

from fieldcheck.core.models import RuleConfig, RuleInvocation, ValidationResult
from fieldcheck.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, parse_rules
from fieldcheck.core.validators import (
    BaseValidator,
    ConfigurationError,
    CustomValidator,
    DateFormatValidator,
    EmailValidator,
    InvalidModifierError,
    LengthValidator,
    RequiredValidator,
    RuleSyntaxError,
    UnresolvedValidatorError,
    ValidatorRegistry,
    default_registry,
    default_validators,
)
from fieldcheck.validation import Validation

__version__ = "1.0.0"

__all__ = [
    "Validation",
    "RuleEngine",
    "RuleConfig",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleInvocation",
    "ValidationResult",
    "parse_rules",
    "BaseValidator",
    "RequiredValidator",
    "LengthValidator",
    "EmailValidator",
    "DateFormatValidator",
    "CustomValidator",
    "ValidatorRegistry",
    "default_registry",
    "default_validators",
    "ConfigurationError",
    "UnresolvedValidatorError",
    "RuleSyntaxError",
    "InvalidModifierError",
]
