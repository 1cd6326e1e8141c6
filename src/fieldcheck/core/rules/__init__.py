"""
Rule expression parsing, the rule engine and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import RuleEngine
from .rule_parser import format_rules, parse_rule, parse_rules

__all__ = [
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "parse_rule",
    "parse_rules",
    "format_rules",
]
