"""
Standalone test harness and the built-in self-test suite.
"""

from .runner import (
    CaseResult,
    Expectation,
    ExpectationError,
    TestCase,
    TestRunner,
    after_each,
    before_each,
    describe,
    expect,
    run_tests,
    test,
)
from .selftest import register_selftests

__all__ = [
    "TestRunner",
    "TestCase",
    "CaseResult",
    "Expectation",
    "ExpectationError",
    "describe",
    "test",
    "expect",
    "before_each",
    "after_each",
    "run_tests",
    "register_selftests",
]
