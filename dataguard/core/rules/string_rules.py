"""
Catalog of validation rules for string values.

Constant rules (``email``, ``phone``, ``no_html``, ``no_sql``) are shared
immutable values. Parameterized rules are factories that build a fresh rule
on every call.
"""

import re
from re import Pattern

from dataguard.core.models import ValidationRule

from .errors import RuleConfigError
from .patterns import (
    EMAIL_PATTERN,
    HTML_TAG_PATTERN,
    PHONE_PATTERN,
    SQL_INJECTION_PATTERNS,
)


def _contains_sql(value: str) -> bool:
    return any(pattern.search(value) for pattern in SQL_INJECTION_PATTERNS)


email = ValidationRule(
    name="email",
    predicate=lambda value: EMAIL_PATTERN.match(value) is not None,
    message="Invalid email format",
)

phone = ValidationRule(
    name="phone",
    predicate=lambda value: PHONE_PATTERN.match(value) is not None,
    message="Invalid phone number format",
)

no_html = ValidationRule(
    name="no_html",
    predicate=lambda value: HTML_TAG_PATTERN.search(value) is None,
    message="HTML tags are not allowed",
)

# Heuristic only: any apostrophe or semicolon fails, including in names like O'Brien.
no_sql = ValidationRule(
    name="no_sql",
    predicate=lambda value: not _contains_sql(value),
    message="String contains potentially unsafe SQL patterns",
)


def min_length(min: int) -> ValidationRule:
    """Rule requiring at least ``min`` characters."""
    return ValidationRule(
        name="min_length",
        predicate=lambda value: len(value) >= min,
        message=f"Minimum length is {min} characters",
    )


def max_length(max: int) -> ValidationRule:
    """Rule allowing at most ``max`` characters."""
    return ValidationRule(
        name="max_length",
        predicate=lambda value: len(value) <= max,
        message=f"Maximum length is {max} characters",
    )


def regex(pattern: str | Pattern, message: str) -> ValidationRule:
    """
    Rule passing when ``pattern`` is found anywhere in the value.

    Anchor the pattern (``^...$``) to require a full match.

    Args:
        pattern: Regular expression (string or compiled Pattern)
        message: Failure message reported by the rule

    Raises:
        RuleConfigError: If the pattern is not a valid regular expression
    """
    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise RuleConfigError(f"Invalid regex pattern: {e}") from e
    elif isinstance(pattern, Pattern):
        compiled = pattern
    else:
        raise RuleConfigError(f"Pattern must be string or compiled Pattern, got {type(pattern).__name__}")

    return ValidationRule(
        name="regex",
        predicate=lambda value: compiled.search(value) is not None,
        message=message,
    )


class StringRules:
    """Namespace grouping the string rule catalog."""

    email = email
    phone = phone
    no_html = no_html
    no_sql = no_sql
    min_length = staticmethod(min_length)
    max_length = staticmethod(max_length)
    regex = staticmethod(regex)
