"""
fieldrules: declarative per-field validators for model layers.

    from fieldrules import VALIDATORS

    failure = VALIDATORS["length"]("password", "abc", params, {"qualifier": {"min": 8}})
    # -> {"name": "password", "min": 8}
"""

from fieldrules.core.messages import render_failure
from fieldrules.core.models import (
    ExactLength,
    FieldFailure,
    FieldRule,
    LengthRange,
    Rule,
    ValidationResult,
)
from fieldrules.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine
from fieldrules.core.validators import VALIDATORS, RuleConfigurationError, get_validator

__version__ = "0.1.0"

__all__ = [
    "VALIDATORS",
    "get_validator",
    "RuleConfigurationError",
    "Rule",
    "FieldRule",
    "ExactLength",
    "LengthRange",
    "FieldFailure",
    "ValidationResult",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "render_failure",
]
