"""
Unit tests for the standalone test harness.
"""

import pytest

from dataguard.harness import runner as harness
from dataguard.harness import ExpectationError, TestRunner, expect, register_selftests


class TestExpectation:
    """Tests for expect()"""

    def test_to_be_passes(self):
        expect(1 + 1).to_be(2)

    def test_to_be_fails_with_context(self):
        with pytest.raises(ExpectationError) as exc_info:
            expect(True).to_be(False, "test@")

        assert str(exc_info.value) == 'Expected True to be False for input "test@"'

    def test_to_contain(self):
        expect(["a", "b"]).to_contain("a")
        expect("hello").to_contain("ell")

        with pytest.raises(ExpectationError, match="to contain"):
            expect("hello").to_contain("xyz")

    def test_negated(self):
        expect(1).not_.to_be(2)
        expect("safe").not_.to_contain("<script>")

        with pytest.raises(ExpectationError, match="not to be"):
            expect(1).not_.to_be(1)

        with pytest.raises(ExpectationError, match="not to contain"):
            expect("<script>").not_.to_contain("<script>")

    def test_expectation_error_is_assertion_error(self):
        assert issubclass(ExpectationError, AssertionError)


class TestTestRunner:
    """Tests for TestRunner"""

    def test_all_passing(self, runner, capsys):
        runner.test("one", lambda: expect(1).to_be(1))
        runner.test("two", lambda: expect(2).to_be(2))

        assert runner.run_tests() is True

        out = capsys.readouterr().out
        assert "PASS  one" in out
        assert "PASS  two" in out
        assert "Results: 2 passed, 0 failed" in out

    def test_failure_reported_and_run_continues(self, runner, capsys):
        ran = []

        def failing():
            ran.append("failing")
            expect(1).to_be(2)

        runner.test("failing", failing)
        runner.test("after", lambda: ran.append("after"))

        assert runner.run_tests() is False
        assert ran == ["failing", "after"]

        out = capsys.readouterr().out
        assert "FAIL  failing" in out
        assert "Results: 1 passed, 1 failed" in out
        assert "ExpectationError: Expected 1 to be 2" in out

    def test_unexpected_exception_fails_case(self, runner):
        runner.test("boom", lambda: 1 / 0)
        assert runner.run_tests() is False

    def test_hooks_run_around_each_case(self, runner):
        calls = []
        runner.before_each(lambda: calls.append("before"))
        runner.after_each(lambda: calls.append("after"))
        runner.test("a", lambda: calls.append("a"))
        runner.test("b", lambda: calls.append("b"))

        runner.run_tests()

        assert calls == ["before", "a", "after", "before", "b", "after"]

    def test_after_hook_runs_when_case_fails(self, runner):
        calls = []
        runner.after_each(lambda: calls.append("after"))
        runner.test("fails", lambda: expect(True).to_be(False))

        assert runner.run_tests() is False
        assert calls == ["after"]

    def test_failing_before_hook_fails_case(self, runner):
        calls = []

        def before():
            raise RuntimeError("setup failed")

        runner.before_each(before)
        runner.test("never runs", lambda: calls.append("case"))

        assert runner.run_tests() is False
        assert calls == []

    def test_failing_after_hook_fails_case(self, runner):
        def after():
            raise RuntimeError("teardown failed")

        runner.after_each(after)
        runner.test("passes", lambda: None)

        assert runner.run_tests() is False

    def test_describe_groups_names(self, runner, capsys):
        runner.describe("outer", lambda: runner.describe(
            "inner", lambda: runner.test("case", lambda: None),
        ))
        runner.test("top", lambda: None)

        assert [case.full_name for case in runner.tests] == ["outer > inner > case", "top"]
        runner.run_tests()
        assert "PASS  outer > inner > case" in capsys.readouterr().out

    def test_state_cleared_after_run(self, runner):
        runner.before_each(lambda: None)
        runner.test("a", lambda: None)
        runner.run_tests()

        assert runner.tests == []
        assert runner.before_each_fns == []
        assert runner.after_each_fns == []
        assert runner.run_tests() is True

    def test_custom_stream(self, tmp_path):
        path = tmp_path / "report.txt"
        with open(path, "w") as stream:
            runner = TestRunner(stream=stream)
            runner.test("a", lambda: None)
            runner.run_tests()

        assert "PASS  a" in path.read_text()


class TestAsyncCases:
    """Tests for coroutine cases and hooks"""

    def test_failing_async_case_is_reported(self, runner, capsys):
        async def failing():
            expect(1).to_be(2)

        runner.test("async failing", failing)

        assert runner.run_tests() is False

        out = capsys.readouterr().out
        assert "FAIL  async failing" in out
        assert "Results: 0 passed, 1 failed" in out
        assert "ExpectationError: Expected 1 to be 2" in out

    def test_async_case_body_runs(self, runner):
        ran = []

        async def passing():
            ran.append("body")
            expect(True).to_be(True)

        runner.test("async passing", passing)

        assert runner.run_tests() is True
        assert ran == ["body"]

    def test_async_hooks_are_awaited(self, runner):
        calls = []

        async def before():
            calls.append("before")

        async def after():
            calls.append("after")

        runner.before_each(before)
        runner.after_each(after)
        runner.test("case", lambda: calls.append("case"))

        assert runner.run_tests() is True
        assert calls == ["before", "case", "after"]

    def test_failing_async_after_hook_fails_case(self, runner):
        async def after():
            raise RuntimeError("teardown failed")

        runner.after_each(after)
        runner.test("passes", lambda: None)

        assert runner.run_tests() is False


def test_module_level_helpers(capsys):
    """Test the helpers backed by the default runner"""
    calls = []
    harness.before_each(lambda: calls.append("before"))
    harness.after_each(lambda: calls.append("after"))
    harness.describe("suite", lambda: harness.test("case", lambda: calls.append("case")))

    assert harness.run_tests() is True
    assert calls == ["before", "case", "after"]
    assert "PASS  suite > case" in capsys.readouterr().out


def test_builtin_selftests_pass(runner, capsys):
    register_selftests(runner)

    assert len(runner.tests) == 8
    assert runner.run_tests() is True
    assert "Results: 8 passed, 0 failed" in capsys.readouterr().out
