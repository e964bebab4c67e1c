"""
ConfirmedValidator - validates that a field matches a sibling field.
"""

from collections.abc import Mapping
from typing import Any

from fieldrules.core.models import Rule

from .base_validator import BaseValidator, FailureDescriptor, RuleConfigurationError


class ConfirmedValidator(BaseValidator):
    """
    Validates that a field equals another field of the same params.

    Qualifier:
    - Name of the confirmation field (e.g. "password_confirmation")

    A confirmation field missing from params compares as None.
    """

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        qual = rule.qualifier
        if not isinstance(qual, str):
            raise RuleConfigurationError(
                f'confirmed validator for field "{field_name}" needs the name of the '
                f"confirmation field, got {type(qual).__name__}",
                field_name=field_name,
                validator=self.rule_type,
            )

        other = params.get(qual) if isinstance(params, Mapping) else None
        if value != other:
            return self.fail(rule, field_name, qual=qual)
        return None

    @property
    def rule_type(self) -> str:
        return "confirmed"
