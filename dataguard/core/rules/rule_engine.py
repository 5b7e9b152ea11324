"""
Rule engine applying an ordered rule list to a single value.

Every rule is evaluated; failures are collected in rule order. An exception
raised by a rule's predicate is a defect in that rule and propagates to the
caller unchanged.
"""

from typing import Any, Iterable, Sequence

from dataguard.core.models import ValidationResult, ValidationRule
from dataguard.observability.logger import get_logger

logger = get_logger(__name__)


def evaluate(value: Any, rules: Iterable[ValidationRule]) -> ValidationResult:
    """
    Evaluate ``value`` against ``rules``.

    Args:
        value: The value to validate
        rules: Rules to apply, in order

    Returns:
        ValidationResult with one error message per failing rule
    """
    errors = []
    failed_rules = []

    for rule in rules:
        if not rule.check(value):
            errors.append(rule.failure_message(value))
            failed_rules.append(rule.name)

    if failed_rules:
        logger.debug(
            "Validation failed",
            extra={"failed_rules": failed_rules, "error_count": len(errors)},
        )

    return ValidationResult.from_errors(errors)


class RuleEngine:
    """
    A fixed, ordered rule list bound once and applied to many values.

    Holds no state beyond the rule tuple, so one engine can be shared
    between threads.
    """

    def __init__(self, rules: Sequence[ValidationRule]):
        """
        Initialize the rule engine.

        Args:
            rules: Rules to apply, in order
        """
        self.rules: tuple[ValidationRule, ...] = tuple(rules)

    def validate(self, value: Any) -> ValidationResult:
        """Evaluate ``value`` against the bound rules."""
        return evaluate(value, self.rules)

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of bound rules.

        Returns:
            Dictionary with the total rule count and counts per rule name
        """
        return {
            "total_rules": len(self.rules),
            "rules_by_name": self._count_by_name(),
        }

    def _count_by_name(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for rule in self.rules:
            name = rule.name or "unnamed"
            counts[name] = counts.get(name, 0) + 1
        return counts

    def __repr__(self) -> str:
        return f"RuleEngine(rules={[rule.name for rule in self.rules]})"
