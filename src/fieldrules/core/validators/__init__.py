"""
Field validators and the name -> validator table.

Each validator is called as validator(field_name, value, params, rule) and
returns None when the value is valid, otherwise the rule's message or a
failure descriptor dict.
"""

from types import MappingProxyType

from .base_validator import BaseValidator, FailureDescriptor, RuleConfigurationError, as_rule
from .confirmation_validator import ConfirmedValidator
from .format_validator import FormatValidator
from .function_validator import WithFunctionValidator
from .length_validator import LengthValidator
from .presence_validator import AbsentValidator, PresentValidator

present = PresentValidator()
absent = AbsentValidator()
confirmed = ConfirmedValidator()
format_ = FormatValidator()
length = LengthValidator()
with_function = WithFunctionValidator()

VALIDATORS = MappingProxyType({
    validator.rule_type: validator
    for validator in (present, absent, confirmed, format_, length, with_function)
})


def get_validator(name: str) -> BaseValidator:
    """
    Look up a validator by name.

    Raises:
        RuleConfigurationError: If no validator has that name
    """
    try:
        return VALIDATORS[name]
    except KeyError:
        raise RuleConfigurationError(
            f"Unknown validator '{name}'. Expected one of: {', '.join(VALIDATORS)}",
            validator=name,
        )


__all__ = [
    "BaseValidator",
    "FailureDescriptor",
    "RuleConfigurationError",
    "as_rule",
    "PresentValidator",
    "AbsentValidator",
    "ConfirmedValidator",
    "FormatValidator",
    "LengthValidator",
    "WithFunctionValidator",
    "VALIDATORS",
    "get_validator",
    "present",
    "absent",
    "confirmed",
    "format_",
    "length",
    "with_function",
]
