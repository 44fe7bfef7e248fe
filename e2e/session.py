"""e2e.session

One browser session against a remote Selenium endpoint, shared by every
test in a run. Tests run sequentially (pytest's default scheduling), so
the session does no locking of its own; running tests in parallel
against one Session is not supported.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional
from urllib.parse import urlsplit

import urllib3
from selenium import webdriver
from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from .config import E2EConfig
from .errors import (
    ConfigError,
    ElementNotFoundError,
    NavigationError,
    SessionClosedError,
    SessionConnectionError,
    WaitTimeoutError,
)
from .locators import Selector

logger = logging.getLogger(__name__)

# Schemes a browser can load without a host part.
_HOSTLESS_SCHEMES = ("about", "data", "file")

# Raised by the HTTP layer when the endpoint cannot be reached at all.
_CONNECT_ERRORS = (WebDriverException, urllib3.exceptions.HTTPError, OSError)


# -----------------------------------------------------------------------------
# Driver construction
# -----------------------------------------------------------------------------

def browser_options(config: E2EConfig):
    """Selenium options object for `config.browser`."""
    if config.browser == "chrome":
        options = ChromeOptions()
    elif config.browser == "edge":
        options = EdgeOptions()
    elif config.browser == "firefox":
        options = FirefoxOptions()
    else:
        raise ConfigError(f"Unsupported browser: {config.browser}")

    if config.headless:
        if config.browser == "firefox":
            options.add_argument("-headless")
        else:
            options.add_argument("--headless=new")
            options.add_argument("--no-sandbox")
            options.add_argument("--disable-dev-shm-usage")
            options.add_argument("--window-size=1920,1080")
    return options


def _local_driver(config: E2EConfig, options) -> WebDriver:
    # Driver binaries are fetched/cached by webdriver-manager.
    if config.browser == "chrome":
        return webdriver.Chrome(service=ChromeService(ChromeDriverManager().install()), options=options)
    if config.browser == "edge":
        return webdriver.Edge(service=EdgeService(EdgeChromiumDriverManager().install()), options=options)
    return webdriver.Firefox(service=FirefoxService(GeckoDriverManager().install()), options=options)


def build_driver(config: E2EConfig) -> WebDriver:
    options = browser_options(config)
    if config.local_driver:
        return _local_driver(config, options)
    return webdriver.Remote(command_executor=config.remote_url, options=options)


# -----------------------------------------------------------------------------
# Session
# -----------------------------------------------------------------------------

class Session:
    """
    Handle to one live browser session.

    Element references returned by find_element/find_elements belong to the
    page that was loaded when they were found; callers must look them up
    again after every navigate().
    """

    def __init__(self, driver: WebDriver, config: E2EConfig):
        self._driver = driver
        self.config = config
        self._closed = False

    @classmethod
    def open(cls, config: E2EConfig) -> "Session":
        """
        Start a browser session. Call at most once per test run.
        Raises SessionConnectionError if the endpoint cannot be reached.
        """
        where = "local driver" if config.local_driver else config.remote_url
        logger.info("Opening %s session via %s", config.browser, where)
        try:
            driver = build_driver(config)
        except _CONNECT_ERRORS as exc:
            raise SessionConnectionError(
                f"Could not start a {config.browser} session via {where}: {exc}"
            ) from exc
        return cls(driver, config)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def driver(self) -> WebDriver:
        self._require_open()
        return self._driver

    def _require_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Browser session is already closed")

    # ---- navigation ----

    def navigate(self, url: str) -> None:
        self._require_open()
        try:
            parts = urlsplit(url)
        except ValueError as exc:
            raise NavigationError(f"Malformed URL: {url!r}") from exc
        if not parts.scheme or (parts.scheme not in _HOSTLESS_SCHEMES and not parts.netloc):
            raise NavigationError(f"Malformed URL: {url!r}")

        logger.debug("Navigating to %s", url)
        try:
            self._driver.get(url)
        except WebDriverException as exc:
            raise NavigationError(f"Failed to load {url}: {exc.msg or exc}") from exc

    # ---- lookup ----

    def find_element(self, selector: Selector, within: Optional[WebElement] = None) -> WebElement:
        """
        Resolve `selector` on the current page, or inside `within`.
        No implicit waiting: a selector that does not match right now raises
        ElementNotFoundError.
        """
        self._require_open()
        scope = self._driver if within is None else within
        try:
            return scope.find_element(*selector.locator)
        except (NoSuchElementException, StaleElementReferenceException) as exc:
            raise ElementNotFoundError(f"No element matches {selector}") from exc

    def find_elements(self, selector: Selector, within: Optional[WebElement] = None) -> List[WebElement]:
        self._require_open()
        scope = self._driver if within is None else within
        try:
            return list(scope.find_elements(*selector.locator))
        except StaleElementReferenceException as exc:
            raise ElementNotFoundError(f"Scope for {selector} is no longer attached to the page") from exc

    # ---- waiting ----

    def wait_until(self, predicate: Callable[[WebDriver], Any], timeout_ms: Optional[int] = None) -> Any:
        """
        Poll `predicate(driver)` until it returns something truthy, and return it.
        Raises WaitTimeoutError once `timeout_ms` (default: config.default_timeout_ms)
        has elapsed.
        """
        self._require_open()
        if timeout_ms is None:
            timeout_ms = self.config.default_timeout_ms

        logger.debug("Waiting up to %d ms", timeout_ms)
        wait = WebDriverWait(
            self._driver,
            timeout_ms / 1000,
            poll_frequency=self.config.poll_interval_ms / 1000,
        )
        try:
            return wait.until(predicate)
        except TimeoutException as exc:
            raise WaitTimeoutError(f"Condition not met within {timeout_ms} ms") from exc

    # ---- page state ----

    def get_title(self) -> str:
        self._require_open()
        return self._driver.title

    @property
    def title(self) -> str:
        return self.get_title()

    def save_screenshot(self, path: str) -> bool:
        self._require_open()
        return bool(self._driver.save_screenshot(path))

    # ---- teardown ----

    def close(self) -> None:
        """
        Quit the browser session. Errors are logged, not raised, so they never
        mask the failure of the test that triggered teardown.
        """
        if self._closed:
            logger.warning("close() called on a session that is already closed")
            return
        self._closed = True
        try:
            self._driver.quit()
        except Exception as exc:
            logger.error("Error while closing browser session: %s", exc)
        else:
            logger.info("Browser session closed")

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@contextmanager
def open_session(config: E2EConfig) -> Iterator[Session]:
    """Open a session and close it on every exit path."""
    session = Session.open(config)
    try:
        yield session
    finally:
        session.close()
