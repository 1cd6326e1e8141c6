"""
RuleConfig model bundling a RuleSet with its field labels.
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class RuleConfig(BaseModel):
    """
    A complete rule configuration for one form or record shape.

    Attributes:
        rules: Field name -> rule expression ("required|len:8"), in declared order
        labels: Field name -> display label used in error messages
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rules": {
                    "email": "required|email",
                    "password": "required|len:8",
                },
                "labels": {
                    "email": "E-mail",
                },
            }
        }
    )

    rules: Dict[str, str] = Field(default_factory=dict)
    labels: Dict[str, str] = Field(default_factory=dict)

    def session(self, fields: Mapping[str, Any], validators: Any = None):
        """
        Build a Validation session for the given fields using this configuration.

        Args:
            fields: Field name -> value
            validators: Optional registry or mapping (see Validation)

        Returns:
            A Validation session
        """
        from fieldcheck.validation import Validation

        return Validation(
            fields,
            self.rules,
            validators=validators,
            field_labels=self.labels,
        )
