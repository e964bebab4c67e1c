"""
FormatValidator - validates field values against a regular expression.
"""

import re
from collections.abc import Mapping
from re import Pattern
from typing import Any

from fieldrules.core.models import Rule

from .base_validator import BaseValidator, FailureDescriptor, RuleConfigurationError


class FormatValidator(BaseValidator):
    """
    Validates that a field value contains a match for a regular expression.

    Qualifier:
    - Regular expression (string or compiled Pattern). Matching uses
      re.search, so anchor the pattern with ^ and $ to match the whole value.

    None is checked as the empty string; other non-strings via str().
    """

    def validate(
        self,
        field_name: str,
        value: Any,
        params: Mapping[str, Any] | None,
        rule: Rule,
    ) -> FailureDescriptor | None:
        pattern = self._compile(field_name, rule.qualifier)

        if value is None:
            value_str = ""
        elif not isinstance(value, str):
            value_str = str(value)
        else:
            value_str = value

        if not pattern.search(value_str):
            return self.fail(rule, field_name)
        return None

    def _compile(self, field_name: str, qualifier: Any) -> Pattern:
        """
        Compile the qualifier into a Pattern.

        Raises:
            RuleConfigurationError: If the qualifier is not a valid regex
        """
        if isinstance(qualifier, Pattern):
            return qualifier
        if not isinstance(qualifier, str):
            raise RuleConfigurationError(
                f'format validator for field "{field_name}" needs a regular expression, '
                f"got {type(qualifier).__name__}",
                field_name=field_name,
                validator=self.rule_type,
            )
        try:
            return re.compile(qualifier)
        except re.error as e:
            raise RuleConfigurationError(
                f"Invalid regex pattern for field \"{field_name}\": {e}",
                field_name=field_name,
                validator=self.rule_type,
            )

    @property
    def rule_type(self) -> str:
        return "format"
