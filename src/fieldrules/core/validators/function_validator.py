"""
WithFunctionValidator - validates using a caller-supplied predicate.
"""

from collections.abc import Mapping
from typing import Any

from fieldrules.core.models import Rule

from .base_validator import BaseValidator, FailureDescriptor, RuleConfigurationError


class WithFunctionValidator(BaseValidator):
    """
    Validates using a custom predicate.

    Qualifier:
    - A callable taking (value, params) and returning a truthy value when
      the field is valid

    A qualifier that is not callable is a programming mistake and raises
    RuleConfigurationError instead of returning a failure.
    """

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        func = rule.qualifier
        if not callable(func):
            raise RuleConfigurationError(
                f'withFunction validator for field "{field_name}" must be a function.',
                field_name=field_name,
                validator=self.rule_type,
            )
        if not func(value, params):
            return self.fail(rule, field_name)
        return None

    @property
    def rule_type(self) -> str:
        return "withFunction"
