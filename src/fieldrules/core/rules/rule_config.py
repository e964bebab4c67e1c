"""
Rule configuration management.

Loads field rules from YAML files and provides a fluent builder for
declaring rules in code.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from fieldrules.core.validators import VALIDATORS, RuleConfigurationError
from fieldrules.observability.logger import get_logger

logger = get_logger(__name__)

# Qualifier must be a callable, which YAML cannot express
CODE_ONLY_VALIDATORS = frozenset({"withFunction"})


class RuleConfigLoader:
    """
    Loads field rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      login:
        - type: present
          message: Login is required

      password:
        - type: length
          qualifier:
            min: 8
            max: 64
        - type: confirmed
          qualifier: password_confirmation

      zip_code:
        - type: format
          qualifier: "^[0-9]{5}$"
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse field rules from the YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            RuleConfigurationError: If YAML is invalid or a rule is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleConfigurationError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise RuleConfigurationError("'rules' section must map field names to rule lists")

        rules = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise RuleConfigurationError(
                    f"Rules for field '{field_name}' must be a list", field_name=field_name
                )

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(str(field_name), rule_def, idx))

        logger.info(
            "Loaded field rules",
            extra={"config_path": str(self.config_path), "rule_count": len(rules)},
        )
        return rules

    def _parse_rule(self, field_name: str, rule_def: Any, idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)

        Returns:
            Parsed rule dictionary

        Raises:
            RuleConfigurationError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise RuleConfigurationError(
                f"Rule for field '{field_name}' is missing 'type'", field_name=field_name
            )

        validator = rule_def["type"]
        if validator not in VALIDATORS:
            raise RuleConfigurationError(
                f"Unknown validator '{validator}' for field '{field_name}'",
                field_name=field_name,
                validator=validator,
            )
        if validator in CODE_ONLY_VALIDATORS:
            raise RuleConfigurationError(
                f"'{validator}' rules need a callable qualifier and cannot be loaded from YAML "
                f"(field '{field_name}'); declare them with RuleConfigBuilder",
                field_name=field_name,
                validator=validator,
            )

        rule_name = rule_def.get("name", f"{field_name}_{validator}_{idx}")

        return {
            "rule_name": rule_name,
            "validator": validator,
            "field_name": field_name,
            "rule": {
                "qualifier": rule_def.get("qualifier"),
                "message": rule_def.get("message"),
            },
            "enabled": rule_def.get("enabled", True),
        }


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []

    def _add(
        self,
        field_name: str,
        validator: str,
        qualifier: Any = None,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": f"{field_name}_{validator}",
            "validator": validator,
            "field_name": field_name,
            "rule": {"qualifier": qualifier, "message": message},
            "enabled": True,
        })
        return self

    def add_present(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a rule requiring the field to be filled in."""
        return self._add(field_name, "present", True, message)

    def add_absent(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a rule requiring the field to be left empty."""
        return self._add(field_name, "absent", True, message)

    def add_confirmed(
        self,
        field_name: str,
        confirmation_field: str,
        message: str | None = None
    ) -> "RuleConfigBuilder":
        """Add a rule requiring the field to equal confirmation_field."""
        return self._add(field_name, "confirmed", confirmation_field, message)

    def add_format(self, field_name: str, pattern: Any, message: str | None = None) -> "RuleConfigBuilder":
        """Add a regex format rule."""
        return self._add(field_name, "format", pattern, message)

    def add_length(
        self,
        field_name: str,
        length: int | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a length rule: either an exact length or min/max bounds."""
        if length is not None:
            if min_length is not None or max_length is not None:
                raise RuleConfigurationError(
                    f"Length rule for field '{field_name}' takes an exact length or bounds, not both",
                    field_name=field_name,
                    validator="length",
                )
            return self._add(field_name, "length", length, message)

        if min_length is None and max_length is None:
            raise RuleConfigurationError(
                f"Length rule for field '{field_name}' requires length, min_length or max_length",
                field_name=field_name,
                validator="length",
            )

        qualifier = {}
        if min_length is not None:
            qualifier["min"] = min_length
        if max_length is not None:
            qualifier["max"] = max_length
        return self._add(field_name, "length", qualifier, message)

    def add_with_function(
        self,
        field_name: str,
        func: Callable[[Any, Any], bool],
        message: str | None = None
    ) -> "RuleConfigBuilder":
        """Add a rule validated by a custom predicate (value, params) -> bool."""
        return self._add(field_name, "withFunction", func, message)

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
