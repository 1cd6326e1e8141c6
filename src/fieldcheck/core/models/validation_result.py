"""
ValidationResult model representing the outcome of one validation run.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating a FieldSet against a RuleSet.

    Attributes:
        passed: Overall validation status
        errors: Composed error messages, in field order then rule order
        fields_checked: Number of fields that had a rule expression
        rules_applied: Number of rule invocations evaluated
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "passed": False,
                "errors": [
                    "email is not a valid e-mail address.",
                    "password is shorter than the required 8 characters.",
                ],
                "fields_checked": 2,
                "rules_applied": 4,
            }
        }
    )

    passed: bool
    errors: List[str] = Field(default_factory=list)
    fields_checked: int = Field(0, ge=0)
    rules_applied: int = Field(0, ge=0)

    @field_validator('errors')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed agrees with whether any errors were recorded."""
        passed = info.data.get('passed')
        if passed and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        if passed is False and len(v) == 0:
            raise ValueError("passed=False but errors is empty")
        return v

    def first_error(self) -> str:
        """Return the first error, or an empty string when there are none."""
        return self.errors[0] if self.errors else ""
