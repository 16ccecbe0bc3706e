"""
================================================================================
Browser Session
================================================================================

Browser lifecycle management for UI automation (Playwright sync API).

A BrowserSession owns one Playwright instance, one browser, one context and
one page. It is created at scenario start, used by a single page object at a
time and closed on every exit path.

Features:
    - Browser selection (chromium / firefox / webkit)
    - Implicit wait applied as the page default timeout
    - Viewport maximization
    - Idempotent close
    - Context manager support

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import UiSettings


class SessionCreationError(Exception):
    """Raised when the browser could not be started."""
    pass


class SessionClosedError(Exception):
    """Raised when the session is used before start() or after close()."""
    pass


class BrowserSession:
    """
    A live browser automation handle.

    Usage:
        with BrowserSession(settings) as session:
            session.goto("https://www.saucedemo.com/")
            session.maximize()
            session.page.locator("id=user-name").fill("standard_user")

    The Playwright entry point is injectable (`playwright_factory`) so the
    lifecycle can be exercised without a real browser.
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        settings: UiSettings,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ):
        """
        Initialize browser session.

        Args:
            settings: UI settings (browser type, headless, timeouts, viewport)
            playwright_factory: Callable returning an object with `start()`,
                normally `playwright.sync_api.sync_playwright`
        """
        self.settings = settings
        self._playwright_factory = playwright_factory

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    def __enter__(self) -> "BrowserSession":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> "BrowserSession":
        """
        Start Playwright, launch the browser and open a page.

        Raises:
            SessionCreationError: If any part of the startup fails. Partially
                created resources are released before raising.
        """
        if self._page is not None:
            raise SessionCreationError("Session already started")

        browser_type = self.settings.browser_type
        try:
            self._playwright = self._playwright_factory().start()
            browser_launcher = getattr(self._playwright, browser_type)

            launch_options = {
                **self.DEFAULT_LAUNCH_OPTIONS,
                "headless": self.settings.headless,
            }
            self._browser = browser_launcher.launch(**launch_options)

            self._context = self._browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
            self._page = self._context.new_page()
            self._page.set_default_timeout(self.settings.implicit_wait_ms)
        except Exception as e:
            self._release()
            raise SessionCreationError(
                f"Could not start {browser_type} browser: {e}"
            ) from e

        logger.debug(
            f"Browser started: {browser_type} "
            f"(headless={self.settings.headless})"
        )
        return self

    @property
    def is_open(self) -> bool:
        """True between a successful start() and close()."""
        return self._page is not None

    @property
    def page(self) -> Page:
        """The live Playwright page."""
        if self._page is None:
            raise SessionClosedError("Browser session is not open")
        return self._page

    @property
    def current_url(self) -> str:
        return self.page.url

    def goto(self, url: str) -> None:
        """Navigate to `url` and wait for the load event."""
        self.page.goto(url, wait_until="load")
        logger.debug(f"Navigated to: {url}")

    def maximize(self) -> None:
        """Resize the viewport to the configured maximum dimensions."""
        self.page.set_viewport_size({
            "width": self.settings.viewport_width,
            "height": self.settings.viewport_height,
        })

    def screenshot(self, full_page: bool = True) -> bytes:
        """Capture the current page as PNG bytes."""
        return self.page.screenshot(full_page=full_page)

    def close(self) -> None:
        """Close page, context and browser. Calling it again is a no-op."""
        if self._playwright is None:
            return
        self._release()
        logger.debug("Browser closed")

    def _release(self) -> None:
        context, browser, playwright = self._context, self._browser, self._playwright
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

        if context is not None:
            try:
                context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
        try:
            if browser is not None:
                browser.close()
        finally:
            if playwright is not None:
                playwright.stop()


__all__ = [
    "BrowserSession",
    "SessionCreationError",
    "SessionClosedError",
]
