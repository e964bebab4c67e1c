"""
LengthValidator - validates the length of a field value.
"""

from collections.abc import Mapping, Sized
from numbers import Integral
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fieldrules.core.models import ExactLength, LengthQualifier, LengthRange, Rule

from .base_validator import BaseValidator, FailureDescriptor, RuleConfigurationError


class LengthValidator(BaseValidator):
    """
    Validates the length of a field value.

    Qualifier:
    - An int (or whole float) or ExactLength: the length must match exactly
    - A mapping with "min" and/or "max", or a LengthRange: each bound
      is enforced independently, min first

    An empty value always fails.
    """

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        qual = self.coerce_qualifier(field_name, rule.qualifier)

        if not value:
            return self.fail(rule, field_name)

        length = len(value) if isinstance(value, Sized) else len(str(value))

        if isinstance(qual, ExactLength):
            if length != qual.length:
                return self.fail(rule, field_name)
            return None

        if qual.min is not None and length < qual.min:
            return self.fail(rule, field_name, min=qual.min)

        if qual.max is not None and length > qual.max:
            return self.fail(rule, field_name, max=qual.max)

        return None

    def coerce_qualifier(self, field_name: str, qualifier: Any) -> LengthQualifier:
        """
        Turn a loosely typed qualifier into ExactLength or LengthRange.

        Whole-number floats (2.0) count as ints; bools, strings and
        fractional numbers are rejected, for the exact length and for
        each bound alike.

        Raises:
            RuleConfigurationError: If the qualifier is neither form
        """
        if isinstance(qualifier, (ExactLength, LengthRange)):
            return qualifier

        try:
            if _is_number(qualifier):
                return ExactLength(length=_whole_number(qualifier))
            if isinstance(qualifier, Mapping):
                return LengthRange(
                    min=_whole_number(qualifier.get("min")),
                    max=_whole_number(qualifier.get("max")),
                )
        except PydanticValidationError as e:
            raise RuleConfigurationError(
                f'Invalid length qualifier for field "{field_name}": {e}',
                field_name=field_name,
                validator=self.rule_type,
            )

        raise RuleConfigurationError(
            f'length validator for field "{field_name}" needs an int or a min/max mapping, '
            f"got {type(qualifier).__name__}",
            field_name=field_name,
            validator=self.rule_type,
        )

    @property
    def rule_type(self) -> str:
        return "length"


def _is_number(value: Any) -> bool:
    # bool is an Integral but never a length
    return isinstance(value, (Integral, float)) and not isinstance(value, bool)


def _whole_number(value: Any) -> Any:
    """Return int(value) for ints and whole floats; anything else as-is for the strict model to reject."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Integral) and not isinstance(value, bool):
        return int(value)
    return value
