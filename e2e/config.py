"""e2e.config

Runtime settings for the suite, read from the environment once per run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_REMOTE_URL = "http://localhost:4444/wd/hub"
DEFAULT_BROWSER = "chrome"
DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_POLL_INTERVAL_MS = 500

SUPPORTED_BROWSERS = ("chrome", "edge", "firefox")

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in _TRUTHY


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class E2EConfig:
    base_url: str = DEFAULT_BASE_URL
    remote_url: str = DEFAULT_REMOTE_URL
    browser: str = DEFAULT_BROWSER
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    headless: bool = False
    local_driver: bool = False
    screenshot_dir: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "E2EConfig":
        """
        Build the config from E2E_* / SELENIUM_REMOTE_URL variables.
        Unset or blank variables fall back to the defaults above.
        """
        env = os.environ if env is None else env

        browser = (env.get("E2E_BROWSER") or DEFAULT_BROWSER).strip().lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigError(
                f"Unsupported browser: {browser!r} (expected one of {', '.join(SUPPORTED_BROWSERS)})"
            )

        return cls(
            base_url=(env.get("E2E_BASE_URL") or DEFAULT_BASE_URL).strip(),
            remote_url=(env.get("SELENIUM_REMOTE_URL") or DEFAULT_REMOTE_URL).strip(),
            browser=browser,
            default_timeout_ms=_positive_int(env, "E2E_DEFAULT_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            poll_interval_ms=_positive_int(env, "E2E_POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS),
            headless=_flag(env, "E2E_HEADLESS"),
            local_driver=_flag(env, "E2E_LOCAL_DRIVER"),
            screenshot_dir=(env.get("E2E_SCREENSHOT_DIR") or "").strip() or None,
        )
