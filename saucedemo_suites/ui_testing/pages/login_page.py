"""
================================================================================
Login Page Object
================================================================================

SauceDemo login page (https://www.saucedemo.com/).

The element ids below are the contract with the page under test:
    - #user-name, #password, #login-button    login form
    - //div[@class='app_logo']                 post-login landing marker
    - [data-test='error']                      rejected-login banner

================================================================================
"""

from __future__ import annotations

import allure

from saucedemo_suites.ui_testing.framework.locators import By, Locator, locator_set
from saucedemo_suites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/"

    LOCATORS = locator_set(
        username_input=Locator(By.ID, "user-name", "Username input"),
        password_input=Locator(By.ID, "password", "Password input"),
        login_button=Locator(By.ID, "login-button", "Login button"),
        landing_marker=Locator(By.XPATH, "//div[@class='app_logo']", "App logo"),
        error_banner=Locator(By.DATA_TEST, "error", "Login error banner"),
    )

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page."""
        self.navigate()
        return self

    @allure.step("Enter username: {value}")
    def enter_username(self, value: str) -> None:
        self.fill("username_input", value)

    @allure.step("Enter password")
    def enter_password(self, value: str) -> None:
        self.fill("password_input", value)

    @allure.step("Submit login")
    def submit_login(self) -> None:
        """
        Click the login button.

        Navigation happens asynchronously; observe the outcome with
        is_landing_marker_visible() or get_error_message().
        """
        self.click("login_button")

    @allure.step("Check landing marker visible")
    def is_landing_marker_visible(self) -> bool:
        """True if the post-login app logo is displayed, False if it never appears."""
        return self.is_visible(
            "landing_marker",
            timeout=self.session.settings.landing_timeout_ms,
        )

    @allure.step("Read login error message")
    def get_error_message(self) -> str:
        """Text of the login error banner, or an empty string if none is shown."""
        if not self.is_visible("error_banner", timeout=2000):
            return ""
        return self.get_text("error_banner")
