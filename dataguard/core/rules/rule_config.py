"""
Rule configuration management.

Resolves catalog rules by name, loads per-field rule lists from YAML files,
and provides a fluent builder for assembling rule lists in code.
"""

from pathlib import Path
from typing import Any, Callable

import yaml

from dataguard.core.models import ValidationRule
from dataguard.observability.logger import get_logger, log_operation

from . import number_rules, string_rules
from .errors import RuleConfigError

logger = get_logger(__name__)

# Catalog entries: constant rules map to a rule, parameterized rules to
# (factory, ordered parameter names).
RULE_REGISTRY: dict[str, ValidationRule | tuple[Callable[..., ValidationRule], tuple[str, ...]]] = {
    "email": string_rules.email,
    "phone": string_rules.phone,
    "no_html": string_rules.no_html,
    "no_sql": string_rules.no_sql,
    "min_length": (string_rules.min_length, ("min",)),
    "max_length": (string_rules.max_length, ("max",)),
    "regex": (string_rules.regex, ("pattern", "message")),
    "positive": number_rules.positive,
    "integer": number_rules.integer,
    "currency": number_rules.currency,
    "range": (number_rules.range, ("min", "max")),
}


def rule_names() -> list[str]:
    """Names of every rule in the catalog."""
    return list(RULE_REGISTRY)


def resolve_rule(rule_type: str, *args: Any, **kwargs: Any) -> ValidationRule:
    """
    Look up a catalog rule by name, calling its factory when it takes parameters.

    Args:
        rule_type: Catalog name ("email", "min_length", ...)
        *args: Positional factory parameters
        **kwargs: Named factory parameters

    Returns:
        The rule

    Raises:
        RuleConfigError: If the name is unknown or the parameters don't fit
    """
    entry = RULE_REGISTRY.get(rule_type)
    if entry is None:
        raise RuleConfigError(f"Unknown rule type: {rule_type}")

    if isinstance(entry, ValidationRule):
        if args or kwargs:
            raise RuleConfigError(f"Rule '{rule_type}' takes no parameters")
        return entry

    factory, param_names = entry
    unexpected = set(kwargs) - set(param_names)
    if unexpected:
        raise RuleConfigError(f"Unknown parameters for rule '{rule_type}': {sorted(unexpected)}")

    bound = dict(zip(param_names, args))
    if len(args) > len(param_names):
        raise RuleConfigError(f"Rule '{rule_type}' takes {len(param_names)} parameters, got {len(args)}")
    for key, value in kwargs.items():
        if key in bound:
            raise RuleConfigError(f"Parameter '{key}' given twice for rule '{rule_type}'")
        bound[key] = value

    missing = [name for name in param_names if name not in bound]
    if missing:
        raise RuleConfigError(f"Rule '{rule_type}' is missing parameters: {missing}")

    return factory(*(bound[name] for name in param_names))


class RuleConfigLoader:
    """
    Loads per-field rule lists from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      username:
        - type: min_length
          params:
            min: 3
        - type: no_sql

      price:
        - type: currency
        - type: range
          params:
            min: 0
            max: 1000
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

    def load_rules(self) -> dict[str, list[ValidationRule]]:
        """
        Load and build validation rules from the YAML file.

        Returns:
            Mapping of field name to its ordered rule list

        Raises:
            RuleConfigError: If the YAML is invalid or a rule definition is malformed
        """
        with log_operation("Loading rule configuration", logger=logger, config_path=str(self.config_path)):
            try:
                with open(self.config_path) as f:
                    config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleConfigError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise RuleConfigError("'rules' section must map field names to rule lists")

        rules: dict[str, list[ValidationRule]] = {}
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise RuleConfigError(f"Rules for field '{field_name}' must be a list")

            rules[field_name] = [
                rule
                for rule in (self._parse_rule(field_name, rule_def) for rule_def in field_rule_list)
                if rule is not None
            ]

        logger.info(
            "Loaded rule configuration",
            extra={
                "config_path": str(self.config_path),
                "field_count": len(rules),
                "rule_count": sum(len(r) for r in rules.values()),
            },
        )
        return rules

    def _parse_rule(self, field_name: str, rule_def: Any) -> ValidationRule | None:
        """
        Build a single rule definition.

        Returns:
            The rule, or None if the definition is disabled
        """
        if isinstance(rule_def, str):
            rule_def = {"type": rule_def}
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise RuleConfigError(f"Rule for field '{field_name}' is missing 'type'")

        if not rule_def.get("enabled", True):
            return None

        parameters = rule_def.get("params", rule_def.get("parameters")) or {}
        if not isinstance(parameters, dict):
            raise RuleConfigError(f"Parameters for rule '{rule_def['type']}' on field '{field_name}' must be a mapping")

        return resolve_rule(rule_def["type"], **parameters)


class RuleConfigBuilder:
    """
    Programmatically build an ordered rule list.
    """

    def __init__(self):
        """Initialize empty rule list."""
        self.rules: list[ValidationRule] = []

    def add(self, rule_type: str, *args: Any, **kwargs: Any) -> "RuleConfigBuilder":
        """Add any catalog rule by name."""
        self.rules.append(resolve_rule(rule_type, *args, **kwargs))
        return self

    def add_rule(self, rule: ValidationRule) -> "RuleConfigBuilder":
        """Add a rule built outside the catalog."""
        self.rules.append(rule)
        return self

    def add_email(self) -> "RuleConfigBuilder":
        return self.add("email")

    def add_phone(self) -> "RuleConfigBuilder":
        return self.add("phone")

    def add_no_html(self) -> "RuleConfigBuilder":
        return self.add("no_html")

    def add_no_sql(self) -> "RuleConfigBuilder":
        return self.add("no_sql")

    def add_min_length(self, min_length: int) -> "RuleConfigBuilder":
        return self.add("min_length", min_length)

    def add_max_length(self, max_length: int) -> "RuleConfigBuilder":
        return self.add("max_length", max_length)

    def add_regex(self, pattern: str, message: str) -> "RuleConfigBuilder":
        return self.add("regex", pattern, message)

    def add_range(self, min_value: float, max_value: float) -> "RuleConfigBuilder":
        return self.add("range", min_value, max_value)

    def build(self) -> list[ValidationRule]:
        """Return a copy of the assembled rule list."""
        return list(self.rules)
