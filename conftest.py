"""
Repository-level pytest configuration.

Why this exists:
  - Configure Loguru once per test session from config/config.yaml
  - Expose the repo root to fixtures that need project files (features, config)
  - Load the login step definitions for every suite that binds login.feature

The demo credentials used by the UI scenarios are the public ones printed on
the SauceDemo login page; override them with UI_USERNAME / UI_PASSWORD.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from saucedemo_suites.ui_testing.framework.log_setup import init_logger


# Login steps, scenario fixtures and the step-failure screenshot hook
pytest_plugins = ["saucedemo_suites.ui_testing.steps.login_steps"]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Install the configured Loguru sinks before any test runs."""
    init_logger()
    yield
