"""
Base validator interface for all field validators.

All validators inherit from BaseValidator and implement validate(). A
validator never raises for bad input: it returns None when the value is
valid and a failure descriptor otherwise. RuleConfigurationError is reserved
for mistakes in the rule itself.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fieldrules.core.models import Rule

FailureDescriptor = str | dict[str, Any]


class RuleConfigurationError(ValueError):
    """Raised when a rule is misconfigured."""

    def __init__(self, message: str, field_name: str | None = None, validator: str | None = None):
        self.field_name = field_name
        self.validator = validator
        self.message = message
        super().__init__(message)


def as_rule(rule: Rule | Mapping[str, Any] | None) -> Rule:
    """
    Coerce a rule given as a Rule, a plain mapping or None into a Rule.

    Raises:
        RuleConfigurationError: If the mapping is not a valid rule
    """
    if isinstance(rule, Rule):
        return rule
    if rule is None:
        return Rule()
    if not isinstance(rule, Mapping):
        raise RuleConfigurationError(f"Rule must be a Rule or a mapping, got {type(rule).__name__}")
    try:
        return Rule.model_validate(dict(rule))
    except PydanticValidationError as e:
        raise RuleConfigurationError(f"Invalid rule: {e}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Instances are stateless and callable with the validator signature
    (field_name, value, params, rule).
    """

    def __call__(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule | Mapping[str, Any] | None,
    ) -> FailureDescriptor | None:
        return self.validate(field_name, value, params, as_rule(rule))

    @abstractmethod
    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        """
        Validate a value against this rule.

        Args:
            field_name: Name of the field being validated
            value: The field value to validate
            params: All submitted field values (for cross-field validation)
            rule: Qualifier and optional custom message

        Returns:
            None if the value is valid, otherwise the failure descriptor

        Raises:
            RuleConfigurationError: If the rule itself is unusable
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the validator name used in rule sets."""
        pass

    def fail(self, rule: Rule, field_name: str, **details: Any) -> FailureDescriptor:
        """Build the failure: the custom message if set, else a descriptor."""
        return rule.message or {"name": field_name, **details}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type})"
