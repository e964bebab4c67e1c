"""
Core data models for field validation rules.

All models use Pydantic for runtime validation and type safety.
"""

from .validation_result import FieldFailure, ValidationResult
from .validation_rule import ExactLength, FieldRule, LengthQualifier, LengthRange, Rule

__all__ = [
    "Rule",
    "FieldRule",
    "ExactLength",
    "LengthRange",
    "LengthQualifier",
    "FieldFailure",
    "ValidationResult",
]
