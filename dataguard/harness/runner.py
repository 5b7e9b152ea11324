"""
Minimal test harness for exercising validation rules outside pytest.

Cases are registered with ``test`` (optionally grouped with ``describe``),
then ``run_tests`` runs them sequentially with the ``before_each`` and
``after_each`` hooks around every case, prints a pass/fail line per case and
a summary, and returns True only if every case passed.

Usage:
    runner = TestRunner()
    runner.describe("email", lambda: runner.test(
        "accepts a plain address",
        lambda: expect(evaluate("a@b.co", [StringRules.email]).is_valid).to_be(True),
    ))
    ok = runner.run_tests()
"""

import asyncio
import inspect
import sys
from typing import Any, Callable, List, TextIO

from pydantic import BaseModel

from dataguard.observability.logger import get_logger

logger = get_logger(__name__)


class ExpectationError(AssertionError):
    """Raised when an expectation does not hold."""
    pass


class Expectation:
    """
    Assertions on a single value, negated through ``not_``.
    """

    def __init__(self, actual: Any, negated: bool = False):
        self.actual = actual
        self.negated = negated

    @property
    def not_(self) -> "Expectation":
        return Expectation(self.actual, negated=not self.negated)

    def to_be(self, expected: Any, context: str | None = None) -> None:
        """Expect ``actual == expected`` (or ``!=`` when negated)."""
        self._assert(self.actual == expected, "to be", expected, context)

    def to_contain(self, expected: Any, context: str | None = None) -> None:
        """Expect ``expected in actual`` (or ``not in`` when negated)."""
        self._assert(expected in self.actual, "to contain", expected, context)

    def _assert(self, outcome: bool, verb: str, expected: Any, context: str | None) -> None:
        if outcome != self.negated:
            return
        negation = "not " if self.negated else ""
        message = f"Expected {self.actual!r} {negation}{verb} {expected!r}"
        if context is not None:
            message += f' for input "{context}"'
        raise ExpectationError(message)


def expect(actual: Any) -> Expectation:
    """Start an expectation on ``actual``."""
    return Expectation(actual)


def _call(fn: Callable[[], Any]) -> None:
    """Call a case or hook, running it to completion if it is a coroutine function."""
    result = fn()
    if inspect.isawaitable(result):
        asyncio.run(_await(result))


async def _await(awaitable: Any) -> None:
    await awaitable


class TestCase(BaseModel):
    """A registered case and the describe blocks it was declared in."""

    __test__ = False

    name: str
    fn: Callable[[], Any]
    suites: List[str] = []

    @property
    def full_name(self) -> str:
        return " > ".join([*self.suites, self.name])


class CaseResult(BaseModel):
    """Outcome of running one case."""

    name: str
    passed: bool
    error: str | None = None


class TestRunner:
    """
    Registry and sequential runner for test cases.

    Registration state is cleared after each ``run_tests`` call so a runner
    can be reused.
    """

    __test__ = False

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize an empty runner.

        Args:
            stream: Where per-case lines and the summary are written
                (defaults to stdout at run time)
        """
        self.stream = stream
        self.tests: list[TestCase] = []
        self.before_each_fns: list[Callable[[], Any]] = []
        self.after_each_fns: list[Callable[[], Any]] = []
        self._suites: list[str] = []

    def describe(self, name: str, fn: Callable[[], Any]) -> None:
        """Run ``fn`` immediately; cases it registers are grouped under ``name``."""
        self._suites.append(name)
        try:
            _call(fn)
        finally:
            self._suites.pop()

    def test(self, name: str, fn: Callable[[], Any]) -> None:
        """Register a case."""
        self.tests.append(TestCase(name=name, fn=fn, suites=list(self._suites)))

    def before_each(self, fn: Callable[[], Any]) -> None:
        """Register a hook run before every case."""
        self.before_each_fns.append(fn)

    def after_each(self, fn: Callable[[], Any]) -> None:
        """Register a hook run after every case, whether it passed or not."""
        self.after_each_fns.append(fn)

    def run_tests(self) -> bool:
        """
        Run every registered case in registration order.

        A case fails if a before hook, the case itself, or an after hook
        raises. Coroutine cases and hooks are run to completion on a fresh
        event loop, so a failed async expectation fails the case. After hooks
        run even when the case failed.

        Returns:
            True if every case passed
        """
        results = [self._run_case(case) for case in self.tests]
        passed = sum(1 for r in results if r.passed)
        failed = len(results) - passed

        self._print_summary(results, passed, failed)
        logger.info(
            "Test run finished",
            extra={"passed": passed, "failed": failed, "total": len(results)},
        )

        self.tests = []
        self.before_each_fns = []
        self.after_each_fns = []
        return failed == 0

    def _run_case(self, case: TestCase) -> CaseResult:
        error: str | None = None
        try:
            for before_fn in self.before_each_fns:
                _call(before_fn)
            _call(case.fn)
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        finally:
            for after_fn in self.after_each_fns:
                try:
                    _call(after_fn)
                except Exception as e:
                    error = error or f"{type(e).__name__}: {e}"

        result = CaseResult(name=case.full_name, passed=error is None, error=error)
        self._print(f"  {'PASS' if result.passed else 'FAIL'}  {result.name}")
        return result

    def _print_summary(self, results: list[CaseResult], passed: int, failed: int) -> None:
        self._print("")
        self._print(f"Results: {passed} passed, {failed} failed")

        failures = [r for r in results if not r.passed]
        if failures:
            self._print("")
            self._print("Failures:")
            for result in failures:
                self._print(f"  {result.name}")
                self._print(f"    {result.error}")

    def _print(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)


# Default runner backing the module-level helpers
_default_runner = TestRunner()


def describe(name: str, fn: Callable[[], Any]) -> None:
    _default_runner.describe(name, fn)


def test(name: str, fn: Callable[[], Any]) -> None:
    _default_runner.test(name, fn)


def before_each(fn: Callable[[], Any]) -> None:
    _default_runner.before_each(fn)


def after_each(fn: Callable[[], Any]) -> None:
    _default_runner.after_each(fn)


def run_tests() -> bool:
    return _default_runner.run_tests()


# Keep pytest from collecting the module-level ``test`` helper
test.__test__ = False
