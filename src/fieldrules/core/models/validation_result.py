"""
ValidationResult model representing the outcome of validating one set of params (ephemeral).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from fieldrules.core.messages import render_failure


class FieldFailure(BaseModel):
    """
    One failed rule.

    Attributes:
        rule_name: Which rule failed
        validator: Name of the validator that produced the failure
        field_name: Field the rule applies to
        failure: The custom message, or the structured failure descriptor
    """

    rule_name: str
    validator: str
    field_name: str
    failure: str | Dict[str, Any]

    def message(self) -> str:
        """Render this failure as a readable sentence."""
        return render_failure(self.validator, self.failure)


class ValidationResult(BaseModel):
    """
    Outcome of running a rule set against one params mapping.

    Note: ValidationResult is ephemeral, never persisted.

    Attributes:
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed
        failures: Failure details, in rule order
    """

    passed: bool
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    failures: List[FieldFailure] = Field(default_factory=list)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    @property
    def errors(self) -> Dict[str, List[str | Dict[str, Any]]]:
        """Failure descriptors grouped by field name."""
        grouped: Dict[str, List[str | Dict[str, Any]]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field_name, []).append(failure.failure)
        return grouped

    def messages(self) -> Dict[str, List[str]]:
        """Rendered failure messages grouped by field name."""
        grouped: Dict[str, List[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field_name, []).append(failure.message())
        return grouped

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "passed_rules": ["login_present"],
                "failed_rules": ["password_length"],
                "failures": [
                    {
                        "rule_name": "password_length",
                        "validator": "length",
                        "field_name": "password",
                        "failure": {"name": "password", "min": 8},
                    }
                ],
            }
        }
