"""
In-memory stand-ins for the Playwright sync API objects the framework touches.

Only the calls made by BrowserSession / BasePage are implemented. Failures
are raised as the real Playwright exception types so error translation is
exercised exactly as against a browser.
"""

from typing import Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


USERNAME = "id=user-name"
PASSWORD = "id=password"
LOGIN_BUTTON = "id=login-button"
APP_LOGO = "xpath=//div[@class='app_logo']"
ERROR_BANNER = "data-test=error"

VALID_USERS = {"standard_user": "secret_sauce"}
LOGIN_ERROR = "Epic sadface: Username and password do not match any user in this service"


class FakeElement:
    def __init__(
        self,
        editable: bool = True,
        visible: bool = True,
        enabled: bool = True,
        text: str = "",
        on_click: Optional[Callable[["FakePage"], None]] = None,
    ):
        self.editable = editable
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.value = ""
        self.on_click = on_click


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self._page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    def _element(self, timeout) -> FakeElement:
        element = self._page.elements.get(self.selector)
        if element is None:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for locator('{self.selector}')"
            )
        return element

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._page.check_open()
        self._page.waits.append((self.selector, state, timeout))
        element = self._element(timeout)
        if state == "visible" and not element.visible:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for locator('{self.selector}') to be visible"
            )

    def fill(self, value: str, timeout: Optional[float] = None) -> None:
        element = self._element(timeout)
        if not element.editable:
            raise PlaywrightError(
                "Error: Element is not an <input>, <textarea> or [contenteditable] element"
            )
        element.value = value
        self._page.actions.append(("fill", self.selector, value))

    def click(self, timeout: Optional[float] = None) -> None:
        element = self._element(timeout)
        if not element.enabled:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded: element is not enabled"
            )
        self._page.actions.append(("click", self.selector))
        if element.on_click is not None:
            element.on_click(self._page)

    def is_visible(self) -> bool:
        element = self._page.elements.get(self.selector)
        return element is not None and element.visible

    def text_content(self) -> Optional[str]:
        return self._element(None).text


class FakePage:
    def __init__(self, elements: Optional[Dict[str, FakeElement]] = None):
        self.elements: Dict[str, FakeElement] = dict(elements or {})
        self.url = "about:blank"
        self.actions: List[tuple] = []
        self.waits: List[tuple] = []
        self.default_timeout: Optional[float] = None
        self.viewport: Optional[dict] = None
        self.closed = False
        # Raised, in order, by the next goto() calls
        self.goto_errors: List[Exception] = []

    def check_open(self) -> None:
        if self.closed:
            raise PlaywrightError("Target page, context or browser has been closed")

    def locator(self, selector: str) -> FakeLocator:
        self.check_open()
        return FakeLocator(self, selector)

    def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.check_open()
        if self.goto_errors:
            raise self.goto_errors.pop(0)
        self.url = url
        self.actions.append(("goto", url))

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_viewport_size(self, viewport_size: dict) -> None:
        self.viewport = dict(viewport_size)

    def screenshot(self, full_page: bool = False) -> bytes:
        return b"\x89PNG\r\n\x1a\nfake"


class FakeContext:
    def __init__(self, page: FakePage, options: dict):
        self.page = page
        self.options = options
        self.closed = False

    def new_page(self) -> FakePage:
        self.page.closed = False
        return self.page

    def close(self) -> None:
        self.closed = True
        self.page.closed = True


class FakeBrowser:
    def __init__(self, page: FakePage, options: dict):
        self._page = page
        self.options = options
        self.contexts: List[FakeContext] = []
        self.closed = False

    def new_context(self, **options) -> FakeContext:
        context = FakeContext(self._page, options)
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.closed = True


class FakeBrowserType:
    def __init__(self, name: str, page: FakePage, launch_error: Optional[Exception] = None):
        self.name = name
        self._page = page
        self._launch_error = launch_error
        self.browsers: List[FakeBrowser] = []

    def launch(self, **options) -> FakeBrowser:
        if self._launch_error is not None:
            raise self._launch_error
        browser = FakeBrowser(self._page, options)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, page: FakePage, launch_error: Optional[Exception] = None):
        self.chromium = FakeBrowserType("chromium", page, launch_error)
        self.firefox = FakeBrowserType("firefox", page, launch_error)
        self.webkit = FakeBrowserType("webkit", page, launch_error)
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakePlaywrightFactory:
    """Replacement for `sync_playwright`: calling it returns an object with start()."""

    def __init__(self, page: FakePage, launch_error: Optional[Exception] = None):
        self.page = page
        self.launch_error = launch_error
        self.started: List[FakePlaywright] = []

    def __call__(self) -> "FakePlaywrightFactory":
        return self

    def start(self) -> FakePlaywright:
        playwright = FakePlaywright(self.page, self.launch_error)
        self.started.append(playwright)
        return playwright


def saucedemo_page() -> FakePage:
    """A FakePage behaving like the SauceDemo login form."""
    page = FakePage()

    def submit(p: FakePage) -> None:
        username = p.elements[USERNAME].value
        password = p.elements[PASSWORD].value
        if VALID_USERS.get(username) == password:
            p.url = "https://www.saucedemo.com/inventory.html"
            p.elements.pop(ERROR_BANNER, None)
            p.elements[APP_LOGO] = FakeElement(editable=False, text="Swag Labs")
        else:
            p.elements[ERROR_BANNER] = FakeElement(editable=False, text=LOGIN_ERROR)

    page.elements.update({
        USERNAME: FakeElement(),
        PASSWORD: FakeElement(),
        LOGIN_BUTTON: FakeElement(editable=False, on_click=submit),
    })
    return page
