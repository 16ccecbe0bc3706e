"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (sync API) UI automation framework.

Components:
    - config_loader: YAML + env configuration, UiSettings
    - log_setup: Loguru sink configuration
    - locators: immutable element locators and lookup errors
    - browser_session: browser lifecycle management
    - page_base: base page object

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, UiSettings
from .locators import By, Locator, ElementNotFoundError, ElementNotInteractableError
from .browser_session import BrowserSession, SessionCreationError, SessionClosedError
from .page_base import BasePage

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "By",
    "Locator",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "BrowserSession",
    "SessionCreationError",
    "SessionClosedError",
    "BasePage",
]
