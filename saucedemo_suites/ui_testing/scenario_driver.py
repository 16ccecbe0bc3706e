"""
================================================================================
Scenario Driver
================================================================================

Owns the browser session of one BDD scenario and sequences LoginPage actions.

Lifecycle:

    IDLE --open_session--> SESSION_OPEN --submit_login--> ACTIONS_APPLIED
         --verify_landing_page--> VERIFIED

    close_session() moves any state to CLOSED and may be called repeatedly.

One ScenarioDriver is created per scenario by a pytest fixture and passed to
every step; it is the only owner of its BrowserSession.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

import allure
from loguru import logger

from saucedemo_suites.ui_testing.framework.browser_session import BrowserSession
from saucedemo_suites.ui_testing.framework.config_loader import UiSettings
from saucedemo_suites.ui_testing.pages.login_page import LoginPage


class ScenarioState(str, Enum):
    IDLE = "idle"
    SESSION_OPEN = "session_open"
    ACTIONS_APPLIED = "actions_applied"
    VERIFIED = "verified"
    CLOSED = "closed"


class ScenarioStateError(Exception):
    """Raised when a scenario operation is invoked out of order."""
    pass


class LandingPageAssertionError(AssertionError):
    """Raised when the landing marker visibility is not what the scenario expects."""
    pass


class ScenarioDriver:
    """
    Step-level facade over BrowserSession + LoginPage.

    Usage:
        driver = ScenarioDriver(UiSettings.from_config())
        try:
            driver.open_session()
            driver.perform_login("standard_user", "secret_sauce")
            assert driver.verify_landing_page()
        finally:
            driver.close_session()
    """

    def __init__(
        self,
        settings: UiSettings,
        session_factory: Callable[[UiSettings], BrowserSession] = BrowserSession,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            settings: UI settings shared by the session and page objects
            session_factory: Builds an unstarted BrowserSession from settings
            sleep: Used for the optional pre-close delay
        """
        self.settings = settings
        self._session_factory = session_factory
        self._sleep = sleep

        self._state = ScenarioState.IDLE
        self._session: Optional[BrowserSession] = None
        self._login_page: Optional[LoginPage] = None

    @property
    def state(self) -> ScenarioState:
        return self._state

    def _require(self, operation: str, *allowed: ScenarioState) -> LoginPage:
        if self._state not in allowed:
            expected = ", ".join(s.value for s in allowed)
            raise ScenarioStateError(
                f"{operation}() requires state {expected}, "
                f"driver is {self._state.value}"
            )
        return self._login_page

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @allure.step("Open browser session")
    def open_session(self) -> None:
        """
        Start the browser, open the login page and maximize the viewport.

        Raises:
            SessionCreationError: Browser could not be started (state stays IDLE)
        """
        self._require("open_session", ScenarioState.IDLE)

        session = self._session_factory(self.settings)
        session.start()
        login_page = LoginPage(session)
        try:
            login_page.open()
            session.maximize()
        except Exception:
            logger.error("Entry page could not be opened, closing browser")
            session.close()
            raise

        self._session = session
        self._login_page = login_page

        self._state = ScenarioState.SESSION_OPEN
        logger.info(f"Session open on {self.settings.base_url}")

    @allure.step("Close browser session")
    def close_session(self) -> None:
        """Close the session if one exists. Safe to call in any state, any number of times."""
        if self._state is ScenarioState.CLOSED:
            return

        session = self._session
        self._session = None
        self._login_page = None
        try:
            if session is not None and session.is_open:
                # Debug aid: keep the window up long enough to watch it.
                if self.settings.close_delay_seconds > 0:
                    self._sleep(self.settings.close_delay_seconds)
                session.close()
        finally:
            self._state = ScenarioState.CLOSED
        logger.info("Session closed")

    # =========================================================================
    # Actions
    # =========================================================================

    @allure.step("Enter credentials (username={username})")
    def enter_credentials(self, username: str, password: str) -> None:
        """Type username then password into the login form."""
        login_page = self._require("enter_credentials", ScenarioState.SESSION_OPEN)
        login_page.enter_username(username)
        login_page.enter_password(password)

    @allure.step("Submit login form")
    def submit_login(self) -> None:
        login_page = self._require("submit_login", ScenarioState.SESSION_OPEN)
        login_page.submit_login()
        self._state = ScenarioState.ACTIONS_APPLIED

    def perform_login(self, username: str, password: str) -> None:
        """Enter username, enter password, click login, in that order."""
        self.enter_credentials(username, password)
        self.submit_login()

    # =========================================================================
    # Verification
    # =========================================================================

    @allure.step("Verify landing page")
    def verify_landing_page(self, expect_visible: bool = True) -> bool:
        """
        Check the post-login landing marker.

        Args:
            expect_visible: Whether the scenario expects the login to succeed

        Returns:
            The observed marker visibility

        Raises:
            LandingPageAssertionError: Observed visibility differs from expectation
        """
        login_page = self._require("verify_landing_page", ScenarioState.ACTIONS_APPLIED)
        visible = login_page.is_landing_marker_visible()
        if visible != expect_visible:
            if expect_visible:
                message = "User is not navigated to the Home Page"
            else:
                message = "User was navigated to the Home Page unexpectedly"
            raise LandingPageAssertionError(message)

        self._state = ScenarioState.VERIFIED
        logger.info(f"Landing marker visible={visible} as expected")
        return visible

    def login_error_message(self) -> str:
        """Text of the login error banner after a submit ('' if none)."""
        login_page = self._require(
            "login_error_message",
            ScenarioState.ACTIONS_APPLIED,
            ScenarioState.VERIFIED,
        )
        return login_page.get_error_message()

    def capture_failure(self, name: str) -> None:
        """Attach evidence to the report while the session is still open."""
        if self._login_page is not None and self._session is not None and self._session.is_open:
            self._login_page.capture_failure(name)


__all__ = [
    "ScenarioDriver",
    "ScenarioState",
    "ScenarioStateError",
    "LandingPageAssertionError",
]
