"""
Rule catalog, rule engine and rule configuration.
"""

from .errors import RuleConfigError
from .number_rules import NumberRules
from .rule_config import RuleConfigBuilder, RuleConfigLoader, resolve_rule, rule_names
from .rule_engine import RuleEngine, evaluate
from .string_rules import StringRules

__all__ = [
    "StringRules",
    "NumberRules",
    "evaluate",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigError",
    "resolve_rule",
    "rule_names",
]
