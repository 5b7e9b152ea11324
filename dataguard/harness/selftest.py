"""
Built-in self-test suite, run by ``dataguard selftest``.

Exercises the rule catalog, the evaluator and the sanitizer against known
inputs so an installation can be checked without pytest.
"""

import math

from dataguard.core.rules import NumberRules, StringRules, evaluate
from dataguard.core.sanitizer import sanitize

from .runner import TestRunner, expect

VALID_EMAILS = [
    "test@example.com",
    "user.name@domain.co.uk",
    "user+label@domain.com",
    "123@domain.com",
    "email@sub.domain.com",
]

INVALID_EMAILS = [
    "test@",
    "@domain.com",
    "test@.com",
    "test@domain..com",
    "test space@domain.com",
    "",
]

SQL_INJECTION_INPUTS = [
    "DROP TABLE users",
    "SELECT * FROM users",
    "1'; DELETE FROM users; --",
    "1 UNION SELECT * FROM passwords",
    "/* comment */",
    "admin'--",
]

VALID_CURRENCY = [0, 100, 10.99, 0.01, 999999.99, -10.50]

INVALID_CURRENCY = [10.999, 0.001, math.nan, math.inf, -math.inf]


def _string_validation(runner: TestRunner) -> None:
    def valid_emails():
        for email in VALID_EMAILS:
            result = evaluate(email, [StringRules.email])
            expect(result.is_valid).to_be(True, email)

    def invalid_emails():
        for email in INVALID_EMAILS:
            result = evaluate(email, [StringRules.email])
            expect(result.is_valid).to_be(False, email)

    def sql_injection():
        for value in SQL_INJECTION_INPUTS:
            result = evaluate(value, [StringRules.no_sql])
            expect(result.is_valid).to_be(False, value)

    def error_order():
        result = evaluate("<b>", [StringRules.min_length(5), StringRules.no_html])
        expect(result.errors).to_be(("Minimum length is 5 characters", "HTML tags are not allowed"))

    runner.describe("email validation", lambda: (
        runner.test("valid email addresses", valid_emails),
        runner.test("invalid email addresses", invalid_emails),
    ))
    runner.describe("SQL injection prevention", lambda: runner.test(
        "detects SQL injection attempts", sql_injection,
    ))
    runner.test("reports every failing rule in order", error_order)


def _number_validation(runner: TestRunner) -> None:
    def valid_currency():
        for value in VALID_CURRENCY:
            result = evaluate(value, [NumberRules.currency])
            expect(result.is_valid).to_be(True, str(value))

    def invalid_currency():
        for value in INVALID_CURRENCY:
            result = evaluate(value, [NumberRules.currency])
            expect(result.is_valid).to_be(False, str(value))

    runner.describe("currency validation", lambda: (
        runner.test("valid currency values", valid_currency),
        runner.test("invalid currency values", invalid_currency),
    ))


def _sanitization(runner: TestRunner) -> None:
    def special_characters():
        value = 'Hello\n\r\t"\'\\%World'
        expect(sanitize(value)).to_be('Hello\\n\\r\\t\\"\\\'\\\\\\%World', value)

    def html_tags():
        value = '<script>alert("xss")</script><p>Hello</p>'
        sanitized = sanitize(value)
        expect(sanitized).not_.to_contain("<script>", value)
        expect(sanitized).not_.to_contain("</script>", value)

    runner.test("sanitizes special characters", special_characters)
    runner.test("removes HTML tags", html_tags)


def register_selftests(runner: TestRunner) -> None:
    """Register the built-in suite on ``runner``."""
    runner.describe("String Validation", lambda: _string_validation(runner))
    runner.describe("Number Validation", lambda: _number_validation(runner))
    runner.describe("String Sanitization", lambda: _sanitization(runner))
