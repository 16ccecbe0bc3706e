"""
================================================================================
Locators
================================================================================

Immutable element locators and the element lookup errors.

A Locator pairs a selector strategy with a selector string. Page objects
declare their locators once, as a read-only mapping of element name to
Locator, and resolve them at runtime through BasePage.

Strategies map onto Playwright selector engines:
    - By.ID         -> id=user-name
    - By.XPATH      -> xpath=//div[@class='app_logo']
    - By.CSS        -> css=button.primary
    - By.DATA_TEST  -> data-test=error

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ElementNotFoundError(Exception):
    """Raised when a locator resolves to no element within the wait timeout."""
    pass


class ElementNotInteractableError(Exception):
    """Raised when an element is found but cannot perform the requested action."""
    pass


class By(str, Enum):
    """Selector strategies supported by page objects."""

    ID = "id"
    XPATH = "xpath"
    CSS = "css"
    DATA_TEST = "data-test"


@dataclass(frozen=True)
class Locator:
    """
    Reference to a UI element.

    Attributes:
        by: Selector strategy
        value: Selector string interpreted by the strategy
        description: Human-readable name for logs and reports
    """
    by: By
    value: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Locator value must not be empty")

    @property
    def selector(self) -> str:
        """Playwright selector string, e.g. 'id=user-name'."""
        return f"{self.by.value}={self.value}"

    def __str__(self) -> str:
        return self.description or self.selector


def locator_set(**locators: Locator) -> Mapping[str, Locator]:
    """
    Build a read-only element name -> Locator mapping.

    Usage:
        LOCATORS = locator_set(
            username_input=Locator(By.ID, "user-name", "Username input"),
        )
    """
    for name, locator in locators.items():
        if not isinstance(locator, Locator):
            raise TypeError(f"Element '{name}' must map to a Locator, got {type(locator).__name__}")
    return MappingProxyType(dict(locators))


__all__ = [
    "By",
    "Locator",
    "locator_set",
    "ElementNotFoundError",
    "ElementNotInteractableError",
]
