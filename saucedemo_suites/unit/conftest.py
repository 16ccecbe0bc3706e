"""
Fixtures for browser-free framework tests.

Sessions here are real BrowserSession objects wired to the in-memory
Playwright fakes from `fakes.py`.
"""

import pytest

from saucedemo_suites.ui_testing.framework.browser_session import BrowserSession
from saucedemo_suites.ui_testing.framework.config_loader import UiSettings
from saucedemo_suites.ui_testing.pages.login_page import LoginPage
from saucedemo_suites.ui_testing.scenario_driver import ScenarioDriver
from saucedemo_suites.unit.fakes import FakePlaywrightFactory, saucedemo_page


@pytest.fixture
def settings() -> UiSettings:
    return UiSettings(
        base_url="https://www.saucedemo.com/",
        implicit_wait_ms=50,
        landing_timeout_ms=20,
        viewport_width=1600,
        viewport_height=900,
    )


@pytest.fixture
def fake_page():
    return saucedemo_page()


@pytest.fixture
def playwright_factory(fake_page):
    return FakePlaywrightFactory(fake_page)


@pytest.fixture
def session(settings, playwright_factory):
    session = BrowserSession(settings, playwright_factory=playwright_factory).start()
    yield session
    session.close()


@pytest.fixture
def login_page(session) -> LoginPage:
    return LoginPage(session).open()


@pytest.fixture
def driver(settings, playwright_factory):
    driver = ScenarioDriver(
        settings,
        session_factory=lambda s: BrowserSession(s, playwright_factory=playwright_factory),
    )
    yield driver
    driver.close_session()
