"""Shared test fixtures."""

import pytest

from mdcext.logging.context import clear_context
from mdcext.logging.logger import reset_logging


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables that affect settings."""
    env_vars_to_clear = [
        "SERVICE_NAME",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "INCLUDE_TIMESTAMP",
        "INCLUDE_LOCATION",
        "INCLUDE_MDC",
        "MDC_KEY_PREFIX",
        "USE_COLORS",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _clear_mdc():
    """Start and finish every test with an empty MDC and unconfigured logging."""
    clear_context()
    yield
    clear_context()
    reset_logging()
