"""Shared fixtures for the unit tests."""

import pytest
from unittest.mock import patch

from e2e.config import E2EConfig
from e2e.session import Session

from fakes import BASE_URL, FakeDriver, WELCOME_PAGE


@pytest.fixture
def config():
    return E2EConfig(base_url=BASE_URL, default_timeout_ms=200, poll_interval_ms=10)


@pytest.fixture
def fake_driver():
    return FakeDriver(pages={f"{BASE_URL}/": WELCOME_PAGE})


@pytest.fixture
def session(fake_driver, config):
    with patch("e2e.session.webdriver.Remote", return_value=fake_driver):
        handle = Session.open(config)
    yield handle
    if not handle.closed:
        handle.close()
