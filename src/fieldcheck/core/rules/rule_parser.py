"""
Rule expression parser.

Turns "required|len:8|date-format:Y-m-d H:i:s" into an ordered list of
RuleInvocation models. Names are not checked against any registry here.
"""

from collections.abc import Iterable

from fieldcheck.core.models import RuleInvocation
from fieldcheck.core.validators import RuleSyntaxError

RULE_SEPARATOR = "|"
MODIFIER_SEPARATOR = ":"


def parse_rule(token: str) -> RuleInvocation:
    """
    Parse a single rule token.

    Only the first ':' separates name from modifier; the rest of the token
    is kept verbatim so colon-delimited modifiers survive.

    Args:
        token: One '|'-delimited unit, e.g. "len:8"

    Returns:
        The parsed RuleInvocation

    Raises:
        RuleSyntaxError: If the token has no validator name
    """
    name, separator, modifier = token.partition(MODIFIER_SEPARATOR)
    name = name.strip()

    if not name:
        raise RuleSyntaxError(token, "missing validator name")

    return RuleInvocation(name=name, modifier=modifier if separator else None)


def parse_rules(expression: str) -> list[RuleInvocation]:
    """
    Parse a rule expression into invocations, preserving order.

    Empty expressions and empty tokens (e.g. "required||email") yield
    nothing.

    Args:
        expression: Pipe-delimited rule expression

    Returns:
        List of RuleInvocation in expression order
    """
    if not isinstance(expression, str):
        raise RuleSyntaxError(repr(expression), "rule expression must be a string")

    return [
        parse_rule(token)
        for token in expression.split(RULE_SEPARATOR)
        if token.strip()
    ]


def format_rules(invocations: Iterable[RuleInvocation]) -> str:
    """Render invocations back into a rule expression."""
    return RULE_SEPARATOR.join(invocation.to_token() for invocation in invocations)
