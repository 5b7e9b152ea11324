"""
Pytest configuration and fixtures for dataguard tests
"""
from pathlib import Path

import pytest

from dataguard.harness import TestRunner


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the CLI and YAML configuration end to end"
    )


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session")
def example_rules_path() -> Path:
    """
    Path to the example rule configuration shipped in config/

    Returns:
        Path to config/validation_rules.yaml
    """
    return Path(__file__).resolve().parent.parent / "config" / "validation_rules.yaml"


@pytest.fixture(scope="function")
def rules_file(tmp_path) -> Path:
    """
    Write a small rule configuration to a temporary file

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "rules.yaml"
    path.write_text(
        """
rules:
  username:
    - type: min_length
      params:
        min: 3
    - type: no_sql
    - type: no_html
      enabled: false

  price:
    - currency
    - type: range
      params:
        min: 0
        max: 100
"""
    )
    return path


# =======================
# HARNESS FIXTURES
# =======================

@pytest.fixture(scope="function")
def runner(capsys) -> TestRunner:
    """
    Fresh harness runner writing to the captured stdout

    Returns:
        Empty TestRunner
    """
    return TestRunner()
