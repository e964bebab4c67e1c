"""
PresentValidator and AbsentValidator - check whether a field is filled in.
"""

from collections.abc import Mapping
from typing import Any

from fieldrules.core.models import Rule

from .base_validator import BaseValidator, FailureDescriptor


class PresentValidator(BaseValidator):
    """
    Validates that a field is filled in.

    Fails for any falsy value: None, "", 0, empty collections.
    """

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        if not value:
            return self.fail(rule, field_name)
        return None

    @property
    def rule_type(self) -> str:
        return "present"


class AbsentValidator(BaseValidator):
    """Validates that a field is left empty (the inverse of PresentValidator)."""

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        if value:
            return self.fail(rule, field_name)
        return None

    @property
    def rule_type(self) -> str:
        return "absent"
