"""Login scenarios for the console under test.

Every scenario opens the login path on the page it is given, so each one
starts unauthenticated and can run alone or in any order. A scenario either
returns normally or raises: ``AssertionError`` when the console behaved
wrongly, ``ConsoleUnreachableError`` when it could not be reached.
"""
import logging
from typing import Optional

from playwright.sync_api import Page

from credentials import valid_credentials, invalid_credentials
from login_page import LoginPage
from models import Credentials, SuiteSettings

logger = logging.getLogger("scenarios")


def check_login_form(page: Page, settings: SuiteSettings):
    """Username, password and submit controls are all visible."""
    login_page = LoginPage(page, settings)
    login_page.open()
    login_page.expect_form_visible()
    logger.info("Login form rendered at %s", settings.login_url)


def login_with_valid_credentials(page: Page, settings: SuiteSettings,
                                 credentials: Optional[Credentials] = None):
    """Valid credentials lead to the dashboard."""
    if credentials is None:
        credentials = valid_credentials()

    login_page = LoginPage(page, settings)
    login_page.open()
    login_page.login(credentials)
    login_page.expect_dashboard()
    if not login_page.expect_user_menu():
        logger.debug("No user menu selector configured, skipping user menu check")
    logger.info("Logged in as %s, landed on %s", credentials.username, page.url)


def login_with_invalid_credentials(page: Page, settings: SuiteSettings):
    """Invalid credentials must not reach the dashboard."""
    credentials = invalid_credentials()

    login_page = LoginPage(page, settings)
    login_page.open()
    login_page.login(credentials)
    login_page.wait_until_settled()
    login_page.expect_not_dashboard()
    if not login_page.expect_error_shown():
        logger.debug("No error message selector configured, skipping error check")
    logger.info("Login as %s rejected", credentials.username)


def check_not_authenticated(page: Page, settings: SuiteSettings):
    """Reopening the login path on the same page still shows the login form."""
    login_page = LoginPage(page, settings)
    login_page.open()
    login_page.expect_not_dashboard()
    login_page.expect_form_visible()
