"""
Rule engine for running a set of field rules against submitted params.

This is the seam a model layer uses: for each declared rule it looks up the
validator by name, calls it with (field_name, value, params, rule) and
collects the failures.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fieldrules.core.models import FieldFailure, FieldRule, ValidationResult
from fieldrules.core.validators import BaseValidator, RuleConfigurationError, get_validator
from fieldrules.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


class RuleEngine:
    """
    Runs field rules against params, in declaration order.

    Every enabled rule is evaluated; failures never short-circuit the rest.
    """

    def __init__(self, rules: list[FieldRule | dict[str, Any]]):
        """
        Initialize the rule engine with field rules.

        Args:
            rules: FieldRule objects or dicts with the same keys:
                   - rule_name: str
                   - validator: str (present, absent, confirmed, format, length, withFunction)
                   - field_name: str
                   - rule: {"qualifier": ..., "message": ...} (optional)
                   - enabled: bool (default True)

        Raises:
            RuleConfigurationError: If a rule is malformed or names an unknown validator
        """
        self.rules = [self._parse_rule(rule) for rule in rules]
        self.validators: list[tuple[FieldRule, BaseValidator]] = []
        self._build_validators()

    @staticmethod
    def _parse_rule(rule: FieldRule | dict[str, Any]) -> FieldRule:
        if isinstance(rule, FieldRule):
            return rule
        try:
            return FieldRule.model_validate(rule)
        except PydanticValidationError as e:
            raise RuleConfigurationError(f"Invalid field rule {rule!r}: {e}")

    def _build_validators(self) -> None:
        """Resolve the validator for every enabled rule."""
        for field_rule in self.rules:
            if not field_rule.enabled:
                continue

            try:
                validator = get_validator(field_rule.validator)
            except RuleConfigurationError:
                logger.error(
                    f"Unknown validator in rule '{field_rule.rule_name}'",
                    extra={"rule_name": field_rule.rule_name, "validator": field_rule.validator},
                )
                raise
            self.validators.append((field_rule, validator))

    def validate(self, params: Mapping[str, Any]) -> ValidationResult:
        """
        Validate params against all rules.

        Args:
            params: All submitted field values

        Returns:
            ValidationResult containing pass/fail status and failure details

        Raises:
            RuleConfigurationError: If a rule turns out to be unusable
        """
        passed_rules = []
        failed_rules = []
        failures = []

        for field_rule, validator in self.validators:
            field_name = field_rule.field_name
            value = params.get(field_name)

            try:
                failure = validator(field_name, value, params, field_rule.rule)
            except RuleConfigurationError:
                logger.error(
                    f"Misconfigured rule '{field_rule.rule_name}'",
                    extra={
                        "rule_name": field_rule.rule_name,
                        "field_name": field_name,
                        "validator": field_rule.validator,
                    },
                )
                raise

            if failure is None:
                passed_rules.append(field_rule.rule_name)
                continue

            logger.debug(
                f"Rule '{field_rule.rule_name}' failed",
                extra={
                    "rule_name": field_rule.rule_name,
                    "field_name": field_name,
                    "validator": field_rule.validator,
                },
            )
            failed_rules.append(field_rule.rule_name)
            failures.append(FieldFailure(
                rule_name=field_rule.rule_name,
                validator=field_rule.validator,
                field_name=field_name,
                failure=failure,
            ))

        return ValidationResult(
            passed=len(failed_rules) == 0,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            failures=failures,
        )

    def validate_batch(self, params_list: list[Mapping[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of params mappings.

        Args:
            params_list: One params mapping per record

        Returns:
            List of ValidationResult objects, one per record
        """
        with log_operation("Validating batch", logger=logger, batch_size=len(params_list)):
            return [self.validate(params) for params in params_list]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of active rules.

        Returns:
            Dictionary with rule counts by validator and by field
        """
        return {
            "total_rules": len(self.validators),
            "rules_by_validator": self._count_by(lambda rule: rule.validator),
            "rules_by_field": self._count_by(lambda rule: rule.field_name),
        }

    def _count_by(self, key) -> dict[str, int]:
        counts: dict[str, int] = {}
        for field_rule, _ in self.validators:
            counts[key(field_rule)] = counts.get(key(field_rule), 0) + 1
        return counts
