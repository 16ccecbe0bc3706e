"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration for the UI harness with environment overrides.

config/config.yaml is split into sections (`ui`, `logging`). A section is
read in one pass and every `<SECTION>_<KEY>` environment variable replaces
the matching key, so UI_HEADLESS=false overrides `ui.headless` and
LOGGING_LEVEL=DEBUG overrides `logging.level`.

UiSettings turns the `ui` section into a validated, immutable snapshot
shared by the browser session, the page objects and the scenario driver.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.saucedemo.com/"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class ConfigLoader:
    """
    Loads config/config.yaml once per process.

    Usage:
        >>> ui = ConfigLoader().section("ui")
        >>> ui["base_url"]
        'https://www.saucedemo.com/'
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = self._load_config()
        self._initialized = True

    def _load_config(self) -> Dict[str, Any]:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )
        logger.debug(f"Loaded configuration from: {self._config_path}")
        return config

    def section(self, name: str) -> Dict[str, Any]:
        """
        Return one section with its environment overrides applied.

        Env values are raw strings; consumers coerce them against their
        own defaults. Keys whose YAML value is null are left out.

        Raises:
            ConfigurationError: The section exists but is not a mapping
        """
        raw = self._config.get(name) or {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Section '{name}' must be a mapping")

        values = {key: value for key, value in raw.items() if value is not None}
        prefix = f"{name.upper()}_"
        for env_key, env_value in os.environ.items():
            if env_key.startswith(prefix):
                values[env_key[len(prefix):].lower()] = env_value
        return values

    @classmethod
    def reset(cls) -> None:
        """Drop the loaded instance (used by tests)."""
        cls._instance = None


def _coerce(key: str, value: Any, reference: Any) -> Any:
    """Convert `value` to the type of `reference` (the field default)."""
    if isinstance(reference, bool):
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"ui.{key} must be a boolean, got {value!r}")

    try:
        if isinstance(reference, int):
            return int(value)
        if isinstance(reference, float):
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"ui.{key} must be a {type(reference).__name__}, got {value!r}"
        ) from e

    return str(value)


@dataclass(frozen=True)
class UiSettings:
    """
    Immutable snapshot of the settings a browser scenario needs.

    Attributes:
        base_url: Entry URL of the application under test (login page)
        browser_type: 'chromium', 'firefox' or 'webkit' (YAML key `browser`)
        headless: Run browser without a visible window
        implicit_wait_ms: Bounded wait for element lookups and actions
        landing_timeout_ms: How long to poll for the post-login marker
        viewport_width: Width used when maximizing the viewport
        viewport_height: Height used when maximizing the viewport
        close_delay_seconds: Pause before closing the browser (debug aid)
        username: Valid demo username
        password: Valid demo password
    """
    base_url: str = DEFAULT_BASE_URL
    browser_type: str = "chromium"
    headless: bool = True
    implicit_wait_ms: int = 10000
    landing_timeout_ms: int = 5000
    viewport_width: int = 1920
    viewport_height: int = 1080
    close_delay_seconds: float = 0.0
    username: str = "standard_user"
    password: str = "secret_sauce"

    # YAML / env key -> field name, where they differ
    KEY_ALIASES = {"browser": "browser_type"}

    def __post_init__(self) -> None:
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ConfigurationError(f"Unsupported browser type: {self.browser_type}")
        # Playwright treats a 0 timeout as "wait forever"
        for name in ("implicit_wait_ms", "landing_timeout_ms", "viewport_width", "viewport_height"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.close_delay_seconds < 0:
            raise ConfigurationError(
                f"close_delay_seconds must not be negative, got {self.close_delay_seconds}"
            )

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UiSettings":
        """Build settings from the `ui` section, env vars taking priority."""
        section = (config or ConfigLoader()).section("ui")
        defaults = cls()
        field_names = {f.name for f in fields(cls)}

        values: Dict[str, Any] = {}
        for key, value in section.items():
            name = cls.KEY_ALIASES.get(key, key)
            if name in field_names:
                values[name] = _coerce(key, value, getattr(defaults, name))

        if "browser_type" in values:
            values["browser_type"] = values["browser_type"].lower()
        return cls(**values)


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "DEFAULT_BASE_URL",
    "SUPPORTED_BROWSERS",
]
