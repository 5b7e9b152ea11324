"""
Integration tests running the CLI as a separate process.
"""

import json
import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.integration


def run_cli(*args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "dataguard.cli.dataguard_cli", *args],
        capture_output=True,
        text=True,
        env={**os.environ, **(env or {})},
        timeout=60,
    )


def test_selftest_exit_status_zero():
    result = run_cli("selftest")

    assert result.returncode == 0
    assert "Results: 8 passed, 0 failed" in result.stdout


def test_check_with_example_config(example_rules_path):
    env = {"DATAGUARD_RULES_FILE": str(example_rules_path)}

    valid = run_cli("check", "alice", "--field", "username", env=env)
    invalid = run_cli("check", "<b>x</b>", "--field", "username", env=env)

    assert valid.returncode == 0
    assert json.loads(valid.stdout) == {"is_valid": True, "errors": []}
    assert invalid.returncode == 1
    assert json.loads(invalid.stdout)["errors"] == ["HTML tags are not allowed"]


def test_check_quantity(example_rules_path):
    result = run_cli(
        "check", "-3", "--number", "--field", "quantity",
        "--rules-file", str(example_rules_path),
    )

    assert result.returncode == 1
    assert json.loads(result.stdout)["errors"] == ["Number must be positive or zero"]


def test_stdout_stays_clean_with_debug_logging():
    result = run_cli("list-rules", env={"LOG_LEVEL": "DEBUG", "LOG_FORMAT": "json"})

    assert result.returncode == 0
    assert result.stdout.splitlines()[0] == "email"


def test_bad_rule_exits_with_usage_status():
    result = run_cli("check", "x", "--rule", "does_not_exist", env={"LOG_LEVEL": "INFO", "LOG_FORMAT": "json"})

    assert result.returncode == 2
    assert result.stdout == ""
    log_line = json.loads(result.stderr.strip().splitlines()[-1])
    assert log_line["level"] == "ERROR"
    assert "Unknown rule type" in log_line["message"]
