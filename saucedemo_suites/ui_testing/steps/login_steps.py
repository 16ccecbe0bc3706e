"""
================================================================================
Login Step Definitions (pytest-bdd plugin)
================================================================================

Binds the phrases of features/login.feature to ScenarioDriver operations.
Registered from the root conftest.py via `pytest_plugins`, so any test module
that calls `scenarios("login.feature")` gets these steps.

Provides:
- ui_settings: immutable settings loaded from config/config.yaml + env
- scenario_driver: one ScenarioDriver per scenario, always closed on teardown
- screenshot capture on step failure (Allure attachment)

Every step receives the same per-scenario `scenario_driver` fixture; there is
no module-level browser handle. Override `ui_settings` / `scenario_driver` in
a test module to run the scenarios against another backend.

================================================================================
"""

from typing import Generator

import pytest
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from pytest_bdd import given, parsers, then, when

from saucedemo_suites.ui_testing.framework.config_loader import UiSettings
from saucedemo_suites.ui_testing.scenario_driver import ScenarioDriver, ScenarioState


# ================================================================================
# Settings / Driver Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UiSettings:
    """Session-scoped UI settings (base URL, browser, timeouts, credentials)."""
    return UiSettings.from_config()


@pytest.fixture
def scenario_driver(ui_settings: UiSettings) -> Generator[ScenarioDriver, None, None]:
    """
    Function-scoped scenario context.

    The browser session lives on this object and is released here even when
    a step fails, so no scenario can leak an open browser.
    """
    driver = ScenarioDriver(ui_settings)
    yield driver
    driver.close_session()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

def pytest_bdd_step_error(request, scenario, step, step_func_args, exception):
    """Attach a screenshot to the Allure report when a step fails."""
    driver = step_func_args.get("scenario_driver")
    if driver is None:
        return
    logger.error(f"Step failed: '{step.name}' in '{scenario.name}': {exception}")
    try:
        driver.capture_failure(request.node.name)
    except PlaywrightError as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Steps
# ================================================================================

@given("User is on login page")
def user_is_on_login_page(scenario_driver: ScenarioDriver):
    scenario_driver.open_session()


@when("User enters valid username and password")
def user_enters_valid_credentials(scenario_driver: ScenarioDriver, ui_settings: UiSettings):
    scenario_driver.enter_credentials(ui_settings.username, ui_settings.password)


@when(parsers.parse('User enters username "{username}" and password "{password}"'))
def user_enters_credentials(scenario_driver: ScenarioDriver, username: str, password: str):
    scenario_driver.enter_credentials(username, password)


@when("User clicks on Login Button")
def user_clicks_login(scenario_driver: ScenarioDriver):
    scenario_driver.submit_login()


@then("User is navigated to the Home Page")
def user_is_navigated_to_home_page(scenario_driver: ScenarioDriver):
    assert scenario_driver.verify_landing_page() is True


@then("User stays on the login page")
def user_stays_on_login_page(scenario_driver: ScenarioDriver):
    assert scenario_driver.verify_landing_page(expect_visible=False) is False


@then(parsers.parse('Login error message contains "{text}"'))
def login_error_message_contains(scenario_driver: ScenarioDriver, text: str):
    message = scenario_driver.login_error_message()
    assert text in message, f"Expected '{text}' in login error, got '{message}'"


@then("Close the browser")
def close_the_browser(scenario_driver: ScenarioDriver):
    scenario_driver.close_session()
    assert scenario_driver.state is ScenarioState.CLOSED
