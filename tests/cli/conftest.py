from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers():
    # replay binds console handlers to the runner's stderr, which is closed afterwards
    yield
    logger = logging.getLogger("capturelive")
    for h in list(logger.handlers):
        logger.removeHandler(h)
