"""
dataguard: input validation rules and string sanitization.

    >>> from dataguard import StringRules, evaluate
    >>> evaluate("test@example.com", [StringRules.email]).is_valid
    True
"""

from dataguard.core.models import ValidationResult, ValidationRule
from dataguard.core.rules import (
    NumberRules,
    RuleConfigBuilder,
    RuleConfigError,
    RuleConfigLoader,
    RuleEngine,
    StringRules,
    evaluate,
)
from dataguard.core.sanitizer import sanitize

__version__ = "0.1.0"

__all__ = [
    "ValidationRule",
    "ValidationResult",
    "StringRules",
    "NumberRules",
    "evaluate",
    "sanitize",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigError",
]
