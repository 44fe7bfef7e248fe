"""e2e.log

Optional file logging for a test run, controlled by LOG_FILE + LOG_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "e2e"


def setup_logging() -> logging.Logger:
    """
    Point the "e2e" logger (and its children: e2e.session, e2e.specs) at LOG_FILE.

    No LOG_FILE means no handler. LOG_LEVEL "0" keeps the file empty, "1" logs
    INFO, anything else DEBUG. A path that cannot be opened is reported on
    stderr and ends the process with status 1; the pytest conftest turns that
    into a usage error.
    """
    level = os.getenv("LOG_LEVEL", "0")
    log_path = os.getenv("LOG_FILE")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)  # handler filters

    if not log_path:
        return logger

    try:
        fh = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    except OSError:
        sys.stderr.write("Invalid log file path\n")
        sys.exit(1)

    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))

    if level == "0":
        fh.setLevel(logging.CRITICAL + 1)  # file exists but stays blank
    elif level == "1":
        fh.setLevel(logging.INFO)
    else:
        fh.setLevel(logging.DEBUG)

    logger.addHandler(fh)
    return logger
