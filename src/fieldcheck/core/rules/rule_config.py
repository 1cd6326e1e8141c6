"""
Rule configuration management.

Loads RuleSets and field labels from YAML text (or an already-parsed
mapping) and provides a fluent builder for assembling them in code.
"""

from collections.abc import Mapping
from typing import Any

import yaml

from fieldcheck.core.models import RuleConfig, RuleInvocation
from fieldcheck.core.validators import ConfigurationError
from fieldcheck.utils.validation import validate_rule_name

from .rule_parser import RULE_SEPARATOR, format_rules, parse_rules


class RuleConfigLoader:
    """
    Loads rule configurations from YAML documents.

    Expected YAML format:
    ```yaml
    rules:
      email: required|email
      password:
        - required
        - "len:8"
      starts_at: "date-format:Y-m-d H:i:s"

    labels:
      email: E-mail
      starts_at: Start time
    ```

    A field's rules may be a rule expression string or a list of rule
    tokens. Quote tokens containing ': ' so YAML keeps them as strings.
    """

    def __init__(self, source: str | Mapping[str, Any]):
        """
        Initialize the rule config loader.

        Args:
            source: YAML text, or a mapping already parsed from YAML/JSON
        """
        self.source = source

    def load(self) -> RuleConfig:
        """
        Parse the source into a RuleConfig.

        Returns:
            RuleConfig with rules and labels in document order

        Raises:
            ConfigurationError: If the document is invalid or missing required sections
        """
        if isinstance(self.source, str):
            try:
                config = yaml.safe_load(self.source)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in rule configuration: {e}") from e
        else:
            config = self.source

        if not isinstance(config, Mapping) or "rules" not in config:
            raise ConfigurationError("Configuration must contain a 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, Mapping):
            raise ConfigurationError("'rules' section must be a mapping of field -> rules")

        rules = {}
        for field_name, rule_def in field_rules.items():
            rules[str(field_name)] = self._parse_rule(str(field_name), rule_def)

        labels = config.get("labels") or {}
        if not isinstance(labels, Mapping):
            raise ConfigurationError("'labels' section must be a mapping of field -> label")

        for field_name, label in labels.items():
            if not isinstance(label, str) or not label:
                raise ConfigurationError(f"Label for field '{field_name}' must be a non-empty string")

        return RuleConfig(
            rules=rules,
            labels={str(field_name): label for field_name, label in labels.items()},
        )

    def _parse_rule(self, field_name: str, rule_def: Any) -> str:
        """
        Normalise a single field's rule definition into a rule expression.

        Args:
            field_name: The field these rules apply to
            rule_def: Rule expression string or list of rule tokens

        Returns:
            Canonical rule expression

        Raises:
            ConfigurationError: If the definition is neither a string nor a list of strings
        """
        if rule_def is None:
            return ""

        if isinstance(rule_def, str):
            tokens = [rule_def]
        elif isinstance(rule_def, list):
            tokens = rule_def
        else:
            raise ConfigurationError(
                f"Rules for field '{field_name}' must be a string or a list, "
                f"got {type(rule_def).__name__}"
            )

        invocations: list[RuleInvocation] = []
        for token in tokens:
            if not isinstance(token, str):
                raise ConfigurationError(
                    f"Rule for field '{field_name}' must be a string, got {type(token).__name__}"
                )
            invocations.extend(parse_rules(token))

        return format_rules(invocations)


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.invocations: dict[str, list[RuleInvocation]] = {}
        self.labels: dict[str, str] = {}

    def rule(self, field_name: str, name: str, modifier: str | None = None) -> "RuleConfigBuilder":
        """
        Add any registered rule, with an optional modifier.

        Raises:
            ConfigurationError: If the name or modifier would not parse back unchanged
        """
        validate_rule_name(name)
        if modifier is not None and RULE_SEPARATOR in modifier:
            raise ConfigurationError(
                f"Modifier for rule '{name}' on field '{field_name}' "
                f"must not contain '{RULE_SEPARATOR}'"
            )

        self.invocations.setdefault(field_name, []).append(
            RuleInvocation(name=name, modifier=modifier)
        )
        return self

    def required(self, field_name: str) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self.rule(field_name, "required")

    def length(self, field_name: str, minimum: int) -> "RuleConfigBuilder":
        """Add a minimum length rule."""
        return self.rule(field_name, "len", str(minimum))

    def email(self, field_name: str) -> "RuleConfigBuilder":
        """Add an e-mail address rule."""
        return self.rule(field_name, "email")

    def date_format(self, field_name: str, pattern: str) -> "RuleConfigBuilder":
        """Add a date format rule."""
        return self.rule(field_name, "date-format", pattern)

    def label(self, field_name: str, text: str) -> "RuleConfigBuilder":
        """Set the display label used for field_name in error messages."""
        self.labels[field_name] = text
        return self

    def build(self) -> RuleConfig:
        """Build and return the rule configuration."""
        return RuleConfig(
            rules={
                field_name: format_rules(invocations)
                for field_name, invocations in self.invocations.items()
            },
            labels=dict(self.labels),
        )
