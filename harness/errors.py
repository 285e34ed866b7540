"""Failures that are not plain assertion failures.

Assertion failures from ``playwright.sync_api.expect`` are left as
``AssertionError``. The classes here mark problems with the environment the
scenarios run in, so a run can tell "console down" apart from "login broken".
"""


class ScenarioError(Exception):
    pass


class ConsoleUnreachableError(ScenarioError):
    """The console under test could not be reached at all."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Console unreachable at {url}: {reason}")


class SettingsError(ScenarioError):
    """The suite settings could not be loaded or failed validation."""
