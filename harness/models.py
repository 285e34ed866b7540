import re
from pydantic import BaseModel, field_validator, Field
from typing import Optional


class Credentials(BaseModel):
    username: str
    password: str = Field(repr=False)
    domain: Optional[str] = None


class LocatorSet(BaseModel):
    """Selectors the scenarios rely on.

    The first three are the login form contract. ``user_menu`` and
    ``error_message`` are unset by default: their markup differs between
    console releases, so the matching checks only run once they are configured.
    """

    username_input: str = 'input[name="username"]'
    password_input: str = 'input[name="password"]'
    submit_button: str = 'button[type="submit"]'
    domain_input: str = 'input[name="domain"]'
    user_menu: Optional[str] = None
    error_message: Optional[str] = None

    @field_validator("username_input", "password_input", "submit_button", "domain_input")
    @classmethod
    def validate_required_selector(cls, v):
        if not v or not v.strip():
            raise ValueError("Selector must not be empty")
        return v

    @field_validator("user_menu", "error_message")
    @classmethod
    def blank_selector_is_unset(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class SuiteSettings(BaseModel):
    base_url: str = "http://localhost:8080"
    login_path: str = "/client"
    dashboard_pattern: str = r".*dashboard.*"
    timeout_ms: Optional[float] = None
    ignore_https_errors: bool = False
    locators: LocatorSet = LocatorSet()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if not re.match(r"^https?://", v):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("login_path")
    @classmethod
    def validate_login_path(cls, v):
        if not v.startswith("/"):
            v = "/" + v
        return v

    @field_validator("dashboard_pattern")
    @classmethod
    def validate_dashboard_pattern(cls, v):
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid dashboard_pattern: {e}")
        return v

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("timeout_ms must be positive")
        return v

    @property
    def login_url(self) -> str:
        return self.base_url + self.login_path

    @property
    def dashboard_regex(self) -> re.Pattern:
        return re.compile(self.dashboard_pattern)
