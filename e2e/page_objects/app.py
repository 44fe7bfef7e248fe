"""e2e.page_objects.app

Elements rendered by the App component. Call load() first; these never wait.
"""

from selenium.webdriver.remote.webelement import WebElement

from ..locators import Selector
from ..session import Session
from .index import root

INTRO = Selector.css(".App-intro")
HEADER = Selector.css("header > h2")


def intro(session: Session) -> WebElement:
    return session.find_element(INTRO, within=root(session))


def header(session: Session) -> WebElement:
    return session.find_element(HEADER, within=root(session))
