"""
RuleInvocation model representing one parsed unit of a rule expression.
"""

from pydantic import BaseModel, ConfigDict, Field


class RuleInvocation(BaseModel):
    """
    One validator call parsed from a rule expression.

    "date-format:Y-m-d H:i:s" parses to name="date-format" and
    modifier="Y-m-d H:i:s"; "required" parses to name="required" and
    modifier=None.

    Attributes:
        name: Registry key of the validator to invoke
        modifier: Text after the first ':' (verbatim), or None
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "len",
                "modifier": "8",
            }
        },
    )

    name: str = Field(..., min_length=1)
    modifier: str | None = None

    def to_token(self) -> str:
        """Render back into rule-expression text."""
        if self.modifier is None:
            return self.name
        return f"{self.name}:{self.modifier}"
