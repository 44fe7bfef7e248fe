"""e2e.errors

Errors raised by the session and page helpers. Selenium exceptions are
translated into these at the session boundary.
"""


class E2EError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(E2EError, ValueError):
    """An environment setting could not be parsed."""


class SessionConnectionError(E2EError, ConnectionError):
    """The automation endpoint is unreachable or refused to start a session."""


class SessionClosedError(E2EError):
    """An operation was attempted on a session that was already closed."""


class NavigationError(E2EError):
    """The URL was malformed or the browser failed to load it."""


class ElementNotFoundError(E2EError, LookupError):
    """No element matched the selector at call time."""


class WaitTimeoutError(E2EError, TimeoutError):
    """A wait condition did not hold before the timeout elapsed."""
