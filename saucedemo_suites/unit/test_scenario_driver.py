import dataclasses

import pytest
from playwright.sync_api import Error as PlaywrightError

from saucedemo_suites.ui_testing.framework.browser_session import (
    BrowserSession,
    SessionCreationError,
)
from saucedemo_suites.ui_testing.framework.locators import ElementNotFoundError
from saucedemo_suites.ui_testing.scenario_driver import (
    LandingPageAssertionError,
    ScenarioDriver,
    ScenarioState,
    ScenarioStateError,
)
from saucedemo_suites.unit.fakes import (
    LOGIN_BUTTON,
    PASSWORD,
    USERNAME,
    FakePlaywrightFactory,
    saucedemo_page,
)


def make_driver(settings, factory, **kwargs):
    return ScenarioDriver(
        settings,
        session_factory=lambda s: BrowserSession(s, playwright_factory=factory),
        **kwargs,
    )


def test_valid_login_scenario(driver, fake_page, playwright_factory):
    driver.open_session()
    assert driver.state is ScenarioState.SESSION_OPEN
    assert fake_page.url == "https://www.saucedemo.com/"
    assert fake_page.viewport == {"width": 1600, "height": 900}

    driver.perform_login("standard_user", "secret_sauce")
    assert driver.state is ScenarioState.ACTIONS_APPLIED

    assert driver.verify_landing_page() is True
    assert driver.state is ScenarioState.VERIFIED

    driver.close_session()
    assert driver.state is ScenarioState.CLOSED
    assert playwright_factory.started[0].stopped


def test_invalid_login_scenario_still_closes(driver, playwright_factory):
    driver.open_session()
    driver.perform_login("bad_user", "bad_pass")

    assert driver.verify_landing_page(expect_visible=False) is False
    assert "do not match" in driver.login_error_message()

    driver.close_session()
    assert driver.state is ScenarioState.CLOSED
    assert playwright_factory.started[0].stopped


def test_perform_login_runs_actions_in_fixed_order(driver, fake_page):
    driver.open_session()
    driver.perform_login("standard_user", "secret_sauce")

    interactions = [a for a in fake_page.actions if a[0] != "goto"]
    assert interactions == [
        ("fill", USERNAME, "standard_user"),
        ("fill", PASSWORD, "secret_sauce"),
        ("click", LOGIN_BUTTON),
    ]


def test_failed_verification_raises_assertion_and_teardown_succeeds(driver, playwright_factory):
    driver.open_session()
    driver.perform_login("bad_user", "bad_pass")

    with pytest.raises(AssertionError, match="not navigated to the Home Page"):
        driver.verify_landing_page()
    assert driver.state is ScenarioState.ACTIONS_APPLIED

    driver.close_session()
    assert playwright_factory.started[0].stopped


def test_unexpected_landing_raises(driver):
    driver.open_session()
    driver.perform_login("standard_user", "secret_sauce")
    with pytest.raises(LandingPageAssertionError, match="unexpectedly"):
        driver.verify_landing_page(expect_visible=False)


def test_close_session_is_idempotent(driver, playwright_factory):
    driver.open_session()
    driver.close_session()
    driver.close_session()

    assert driver.state is ScenarioState.CLOSED
    assert len(playwright_factory.started) == 1


def test_close_on_idle_driver_starts_nothing(driver, playwright_factory):
    driver.close_session()
    assert driver.state is ScenarioState.CLOSED
    assert playwright_factory.started == []


@pytest.mark.parametrize("action", [
    lambda d: d.perform_login("standard_user", "secret_sauce"),
    lambda d: d.enter_credentials("standard_user", "secret_sauce"),
    lambda d: d.submit_login(),
    lambda d: d.verify_landing_page(),
    lambda d: d.login_error_message(),
])
def test_actions_before_open_session_raise_state_error(driver, action):
    with pytest.raises(ScenarioStateError, match="driver is idle"):
        action(driver)


def test_actions_after_close_raise_state_error(driver):
    driver.open_session()
    driver.close_session()
    with pytest.raises(ScenarioStateError, match="driver is closed"):
        driver.perform_login("standard_user", "secret_sauce")
    with pytest.raises(ScenarioStateError):
        driver.open_session()


def test_verify_requires_submitted_login(driver):
    driver.open_session()
    driver.enter_credentials("standard_user", "secret_sauce")
    with pytest.raises(ScenarioStateError, match="verify_landing_page"):
        driver.verify_landing_page()


def test_session_creation_failure_leaves_driver_idle(settings):
    factory = FakePlaywrightFactory(saucedemo_page(), launch_error=PlaywrightError("no display"))
    driver = make_driver(settings, factory)

    with pytest.raises(SessionCreationError):
        driver.open_session()
    assert driver.state is ScenarioState.IDLE

    driver.close_session()
    assert driver.state is ScenarioState.CLOSED


def test_unreachable_entry_page_releases_browser(settings):
    page = saucedemo_page()
    page.goto_errors.append(PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))
    factory = FakePlaywrightFactory(page)
    driver = make_driver(settings, factory)

    with pytest.raises(PlaywrightError, match="ERR_NAME_NOT_RESOLVED"):
        driver.open_session()
    assert driver.state is ScenarioState.IDLE
    assert factory.started[0].stopped
    assert factory.started[0].chromium.browsers[0].closed

    driver.open_session()
    assert driver.state is ScenarioState.SESSION_OPEN
    driver.close_session()
    assert [p.stopped for p in factory.started] == [True, True]


def test_missing_element_aborts_login(driver, fake_page, playwright_factory):
    driver.open_session()
    del fake_page.elements[PASSWORD]

    with pytest.raises(ElementNotFoundError):
        driver.perform_login("standard_user", "secret_sauce")
    assert driver.state is ScenarioState.SESSION_OPEN

    driver.close_session()
    assert playwright_factory.started[0].stopped


def test_close_delay_defaults_to_zero_and_is_optional(settings):
    # The pre-close pause is only a viewing aid; it can be removed without
    # changing any scenario outcome.
    sleeps = []
    factory = FakePlaywrightFactory(saucedemo_page())
    driver = make_driver(settings, factory, sleep=sleeps.append)
    driver.open_session()
    driver.close_session()
    assert sleeps == []

    delayed = dataclasses.replace(settings, close_delay_seconds=5)
    factory = FakePlaywrightFactory(saucedemo_page())
    driver = make_driver(delayed, factory, sleep=sleeps.append)
    driver.open_session()
    driver.close_session()
    assert sleeps == [5]
    assert factory.started[0].stopped


def test_capture_failure_is_noop_without_session(driver):
    driver.capture_failure("test_x")
    driver.open_session()
    driver.capture_failure("test_x")
