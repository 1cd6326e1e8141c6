"""
Core data models for the field validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_config import RuleConfig
from .rule_invocation import RuleInvocation
from .validation_result import ValidationResult

__all__ = [
    "RuleInvocation",
    "RuleConfig",
    "ValidationResult",
]
