"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to the page URL
    - Element lookup by *element name* against the class locator set
    - Fill / click / visibility / text helpers with bounded waits
    - Failure evidence capture for Allure

Page objects never hand Playwright handles or Locators to callers; tests
talk to pages only through their domain-level methods.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Mapping, Optional

import allure
from loguru import logger
from playwright.sync_api import (
    Error as PlaywrightError,
    Locator as PlaywrightLocator,
    Page,
    TimeoutError as PlaywrightTimeoutError,
)

from .browser_session import BrowserSession
from .locators import (
    ElementNotFoundError,
    ElementNotInteractableError,
    Locator,
    locator_set,
)


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"
            LOCATORS = locator_set(
                username_input=Locator(By.ID, "user-name", "Username input"),
            )

            def enter_username(self, value: str) -> None:
                self.fill("username_input", value)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    LOCATORS: Mapping[str, Locator] = locator_set()

    def __init__(
        self,
        session: BrowserSession,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            session: Open browser session this page is bound to
            base_url: Base URL for the application (defaults to session settings)
        """
        self.session = session
        self.base_url = (base_url or session.settings.base_url).rstrip("/")
        self.default_timeout = session.settings.implicit_wait_ms

    @property
    def page(self) -> Page:
        """Playwright page of the bound session; raises once the session is closed."""
        return self.session.page

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def navigate(self) -> None:
        """Navigate to this page."""
        with allure.step(f"Navigate to {self.url}"):
            self.session.goto(self.url)

    # =========================================================================
    # Element Lookup
    # =========================================================================

    def locator_for(self, element_name: str) -> Locator:
        """Return the declared Locator for `element_name`."""
        try:
            return self.LOCATORS[element_name]
        except KeyError:
            raise ElementNotFoundError(
                f"No locator defined for element '{element_name}' "
                f"on {type(self).__name__}"
            ) from None

    def _timeout(self, timeout: Optional[int]) -> int:
        return self.default_timeout if timeout is None else timeout

    def locate(
        self,
        element_name: str,
        state: str = "attached",
        timeout: Optional[int] = None,
    ) -> PlaywrightLocator:
        """
        Resolve an element, polling until it reaches `state`.

        Args:
            element_name: Key into LOCATORS
            state: 'attached' or 'visible'
            timeout: Wait in milliseconds (defaults to the implicit wait)

        Raises:
            ElementNotFoundError: Nothing matched within the timeout
        """
        locator = self.locator_for(element_name)
        timeout = self._timeout(timeout)
        handle = self.page.locator(locator.selector).first
        try:
            handle.wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"Element '{locator}' ({locator.selector}) not {state} "
                f"within {timeout}ms"
            ) from e
        logger.debug(f"Element '{locator}' found: {locator.selector}")
        return handle

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def fill(
        self,
        element_name: str,
        value: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Fill input element.

        Raises:
            ElementNotFoundError: Element missing
            ElementNotInteractableError: Element cannot accept text input
        """
        shown = "*" * len(value) if "password" in element_name.lower() else value
        with allure.step(f"Fill {element_name}: {shown}"):
            handle = self.locate(element_name, timeout=timeout)
            try:
                handle.fill(value, timeout=self._timeout(timeout))
            except PlaywrightError as e:
                raise ElementNotInteractableError(
                    f"Element '{self.locator_for(element_name)}' does not accept input: {e}"
                ) from e
            logger.info(f"Filled {element_name}: {shown}")

    def click(
        self,
        element_name: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Click element.

        Raises:
            ElementNotFoundError: Element missing
            ElementNotInteractableError: Element is not clickable
        """
        with allure.step(f"Click: {element_name}"):
            handle = self.locate(element_name, timeout=timeout)
            try:
                handle.click(timeout=self._timeout(timeout))
            except PlaywrightError as e:
                raise ElementNotInteractableError(
                    f"Element '{self.locator_for(element_name)}' is not clickable: {e}"
                ) from e
            logger.info(f"Clicked {element_name}")

    def is_visible(
        self,
        element_name: str,
        timeout: int = 2000,
    ) -> bool:
        """
        Check if element is visible.

        An absent element is a valid outcome and yields False; an element
        name with no declared locator is a programming error and raises.
        """
        self.locator_for(element_name)
        try:
            handle = self.locate(element_name, state="visible", timeout=timeout)
        except ElementNotFoundError:
            return False
        return handle.is_visible()

    def get_text(
        self,
        element_name: str,
        timeout: Optional[int] = None,
    ) -> str:
        """Get text content of element."""
        handle = self.locate(element_name, timeout=timeout)
        return (handle.text_content() or "").strip()

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def capture_failure(self, test_name: str) -> None:
        """
        Attach a screenshot and the current URL to the Allure report.
        """
        with allure.step("Capture failure details"):
            allure.attach(
                self.session.screenshot(full_page=True),
                name=f"failure_{test_name}",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
]
