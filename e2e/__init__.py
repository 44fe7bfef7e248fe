"""End-to-end checks for the React app, driven through a remote Selenium endpoint."""

from .config import E2EConfig
from .errors import (
    ConfigError,
    E2EError,
    ElementNotFoundError,
    NavigationError,
    SessionClosedError,
    SessionConnectionError,
    WaitTimeoutError,
)
from .locators import Selector, element_located
from .session import Session, open_session

__all__ = [
    "E2EConfig",
    "E2EError",
    "ConfigError",
    "SessionConnectionError",
    "SessionClosedError",
    "NavigationError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "Selector",
    "element_located",
    "Session",
    "open_session",
]
