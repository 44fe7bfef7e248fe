"""e2e.locators

Selector values and the wait predicate built from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC


@dataclass(frozen=True)
class Selector:
    by: str
    value: str

    @classmethod
    def css(cls, value: str) -> "Selector":
        return cls(By.CSS_SELECTOR, value)

    @property
    def locator(self) -> Tuple[str, str]:
        """(by, value) pair in the form Selenium's find_element(*locator) expects."""
        return (self.by, self.value)

    def __str__(self) -> str:
        return f"{self.by}={self.value}"


def element_located(selector: Selector) -> Callable:
    """Wait predicate: truthy (the element) once `selector` matches on the page."""
    return EC.presence_of_element_located(selector.locator)
