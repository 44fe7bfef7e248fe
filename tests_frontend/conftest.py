"""Pytest configuration for the live end-to-end specs.

Provides one browser session for the whole run, closed once at the end
(including when tests fail), plus a screenshot on failure when
E2E_SCREENSHOT_DIR is set.

Needs a running app at E2E_BASE_URL and a Selenium endpoint at
SELENIUM_REMOTE_URL (or E2E_LOCAL_DRIVER=1). Run with: pytest tests_frontend
"""

import logging
import os
from datetime import datetime

import pytest

from e2e.config import E2EConfig
from e2e.errors import SessionConnectionError
from e2e.log import setup_logging
from e2e.session import open_session

logger = logging.getLogger("e2e.specs")

# same code pytest reports for an interrupted run
CONNECTION_ABORT_EXIT_CODE = 2

SPECS_DIR = os.path.dirname(os.path.abspath(__file__))


def pytest_configure(config):
    try:
        setup_logging()
    except SystemExit:
        raise pytest.UsageError(f"Invalid log file path: {os.getenv('LOG_FILE')}") from None


def pytest_collection_modifyitems(config, items):
    for item in items:
        if str(item.path).startswith(SPECS_DIR):
            item.add_marker(pytest.mark.e2e)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results so fixtures can see whether the test failed."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture(scope="session")
def e2e_config():
    return E2EConfig.from_env()


@pytest.fixture(scope="session")
def session(e2e_config):
    try:
        with open_session(e2e_config) as handle:
            yield handle
    except SessionConnectionError as exc:
        pytest.exit(f"Automation endpoint unreachable: {exc}", returncode=CONNECTION_ABORT_EXIT_CODE)


@pytest.fixture(autouse=True)
def screenshot_on_failure(request, session, e2e_config):
    yield
    # load() runs in fixtures, so a barrier timeout fails setup rather than the call
    reports = (getattr(request.node, f"rep_{when}", None) for when in ("setup", "call"))
    failed = any(rep is not None and rep.failed for rep in reports)
    if not e2e_config.screenshot_dir or not failed:
        return

    os.makedirs(e2e_config.screenshot_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    test_name = request.node.name.replace("/", "_").replace(":", "_")
    path = os.path.join(e2e_config.screenshot_dir, f"failure_{test_name}_{timestamp}.png")
    try:
        session.save_screenshot(path)
    except Exception as exc:
        logger.error("Could not save failure screenshot %s: %s", path, exc)
    else:
        logger.info("Failure screenshot saved: %s", path)
