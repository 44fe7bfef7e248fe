"""e2e.page_objects.index

The app's root page and the "page ready" barrier every test starts from.
"""

from selenium.webdriver.remote.webelement import WebElement

from ..locators import Selector, element_located
from ..session import Session

ROOT = Selector.css("#root")


def root(session: Session) -> WebElement:
    return session.find_element(ROOT)


def load(session: Session) -> None:
    """
    Open the base URL and block until #root is present.
    WaitTimeoutError from the wait is left to fail the calling test.
    """
    base_url = session.config.base_url.rstrip("/")
    session.navigate(f"{base_url}/")
    session.wait_until(element_located(ROOT), session.config.default_timeout_ms)
