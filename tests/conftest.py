"""Shared test fixtures for the console login suite."""
import os
import sys
import pytest

# Add harness directory to path so imports work the same as when installed
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "harness"))


SUITE_ENV_VARS = [
    "CS_USERNAME",
    "CS_PASSWORD",
    "CS_DOMAIN",
    "CS_BASE_URL",
    "CS_SUITE_SETTINGS",
    "CS_TIMEOUT_MS",
    "CS_IGNORE_HTTPS_ERRORS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every suite environment variable for the duration of a test."""
    for name in SUITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings_file(tmp_path):
    """Write a YAML settings file and return its path."""
    def _write(content: str):
        path = tmp_path / "suite.yaml"
        path.write_text(content)
        return str(path)
    return _write
