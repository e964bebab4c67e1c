"""
Rule models: the declarative configuration handed to a validator.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class Rule(BaseModel):
    """
    Declarative configuration for one field/validator pair.

    Attributes:
        qualifier: The validator's parameter. Its type depends on the validator:
                   a field name for confirmed, a regex for format, a length
                   qualifier for length, a callable for withFunction.
        message: Optional custom failure message, returned instead of the
                 structured failure descriptor.
    """

    qualifier: Any = None
    message: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "qualifier": {"min": 8, "max": 64},
                "message": "Password must be 8 to 64 characters long",
            }
        }


class ExactLength(BaseModel):
    """Length qualifier requiring an exact number of characters."""

    kind: Literal["exact"] = "exact"
    length: int = Field(..., ge=0, strict=True)


class LengthRange(BaseModel):
    """Length qualifier with independent, optional lower and upper bounds."""

    kind: Literal["range"] = "range"
    min: int | None = Field(None, ge=0, strict=True)
    max: int | None = Field(None, ge=0, strict=True)

    @model_validator(mode="after")
    def check_bounds(self):
        """Reject a range that can never be satisfied."""
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) is greater than max ({self.max})")
        return self


LengthQualifier = ExactLength | LengthRange


class FieldRule(BaseModel):
    """
    A rule bound to a field and a validator inside a rule set.

    Attributes:
        rule_name: Human-readable name ("password_length")
        validator: Validator name: "present", "absent", "confirmed", "format",
                   "length" or "withFunction"
        field_name: Which field this rule applies to
        rule: Qualifier and optional message passed to the validator
        enabled: Whether rule is active
    """

    rule_name: str = Field(..., min_length=1)
    validator: str = Field(..., min_length=1)
    field_name: str = Field(..., min_length=1)
    rule: Rule = Field(default_factory=Rule)
    enabled: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "password_confirmed",
                "validator": "confirmed",
                "field_name": "password",
                "rule": {"qualifier": "password_confirmation", "message": None},
                "enabled": True,
            }
        }
