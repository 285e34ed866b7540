"""Page object for the console login form."""
import logging

from playwright.sync_api import Page, expect, Error as PlaywrightError

from errors import ConsoleUnreachableError
from models import Credentials, SuiteSettings

logger = logging.getLogger("login_page")


class LoginPage:
    def __init__(self, page: Page, settings: SuiteSettings):
        self.page = page
        self.settings = settings
        locators = settings.locators
        self.username = page.locator(locators.username_input)
        self.password = page.locator(locators.password_input)
        self.submit_button = page.locator(locators.submit_button)
        self.domain = page.locator(locators.domain_input)
        self.user_menu = page.locator(locators.user_menu) if locators.user_menu else None
        self.error = page.locator(locators.error_message) if locators.error_message else None

    @property
    def timeout(self):
        return self.settings.timeout_ms

    def open(self):
        url = self.settings.login_url
        logger.debug("Opening login page %s", url)
        try:
            self.page.goto(url, timeout=self.timeout)
        except PlaywrightError as e:
            reason = (str(e).splitlines() or [e.__class__.__name__])[0]
            raise ConsoleUnreachableError(url, reason) from e

    def fill_credentials(self, credentials: Credentials):
        self.username.fill(credentials.username, timeout=self.timeout)
        self.password.fill(credentials.password, timeout=self.timeout)
        if credentials.domain:
            self.domain.fill(credentials.domain, timeout=self.timeout)

    def submit(self):
        self.submit_button.click(timeout=self.timeout)

    def login(self, credentials: Credentials):
        logger.info("Submitting login form as %s", credentials.username)
        self.fill_credentials(credentials)
        self.submit()

    def wait_until_settled(self):
        self.page.wait_for_load_state("networkidle", timeout=self.timeout)

    def expect_form_visible(self):
        expect(self.username).to_be_visible(timeout=self.timeout)
        expect(self.password).to_be_visible(timeout=self.timeout)
        expect(self.submit_button).to_be_visible(timeout=self.timeout)

    def expect_dashboard(self):
        expect(self.page).to_have_url(self.settings.dashboard_regex, timeout=self.timeout)

    def expect_not_dashboard(self):
        expect(self.page).not_to_have_url(self.settings.dashboard_regex, timeout=self.timeout)

    def expect_user_menu(self):
        # Only checked when a user menu selector is configured
        if self.user_menu is None:
            return False
        expect(self.user_menu).to_be_visible(timeout=self.timeout)
        return True

    def expect_error_shown(self):
        if self.error is None:
            return False
        expect(self.error).to_be_visible(timeout=self.timeout)
        return True
