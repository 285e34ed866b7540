"""Fixtures for running the login scenarios against a real console.

Prerequisites:
  export CS_BASE_URL=http://cloudstack.example.com:8080
  export CS_USERNAME=admin CS_PASSWORD=...           # optional, default admin/password
  export CS_SUITE_SETTINGS=suite.yaml                # optional selector overrides
  export CS_IGNORE_HTTPS_ERRORS=true                 # optional, self-signed console certs

Run with:
  pytest tests/e2e/ -v --browser chromium
"""
import os
import pytest

from config import ENV_BASE_URL, load_settings
from probe import require_console


@pytest.fixture(scope="session")
def live_settings():
    if not os.environ.get(ENV_BASE_URL):
        pytest.skip(f"{ENV_BASE_URL} not set, no console to test against")
    return load_settings()


@pytest.fixture(scope="session")
def suite_settings(live_settings):
    """Live settings, once the console has answered a plain HTTP probe.

    An unreachable console raises ConsoleUnreachableError here, so pytest
    reports it as a setup ERROR instead of a scenario FAILED.
    """
    require_console(live_settings)
    return live_settings


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, suite_settings):
    if not suite_settings.ignore_https_errors:
        return browser_context_args
    return {**browser_context_args, "ignore_https_errors": True}
