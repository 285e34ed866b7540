"""Suite settings: built-in defaults, an optional YAML file, then environment."""
import os
import logging
from typing import Optional

import yaml
from pydantic import ValidationError

from errors import SettingsError
from models import SuiteSettings

logger = logging.getLogger("config")

ENV_BASE_URL = "CS_BASE_URL"
ENV_SETTINGS_FILE = "CS_SUITE_SETTINGS"
ENV_TIMEOUT_MS = "CS_TIMEOUT_MS"
ENV_IGNORE_HTTPS_ERRORS = "CS_IGNORE_HTTPS_ERRORS"


class main:
    def __init__(self):
        self.settings = {}
        return None

    def add_settings(self, settings_location: str, setting_name: str):
        with open(settings_location, "r") as f:
            open_settings = yaml.safe_load(f)
        self.settings[setting_name] = open_settings or {}
        return self.settings


def _env_overrides(env) -> dict:
    overrides = {}
    base_url = env.get(ENV_BASE_URL)
    if base_url:
        overrides["base_url"] = base_url
    timeout = env.get(ENV_TIMEOUT_MS)
    if timeout:
        try:
            overrides["timeout_ms"] = float(timeout)
        except ValueError:
            raise SettingsError(f"{ENV_TIMEOUT_MS} must be a number, got {timeout!r}")
    ignore_https = env.get(ENV_IGNORE_HTTPS_ERRORS)
    if ignore_https:
        overrides["ignore_https_errors"] = ignore_https.lower() == "true"
    return overrides


def load_settings(settings_file: Optional[str] = None, env=None) -> SuiteSettings:
    """Resolve suite settings.

    Precedence (highest to lowest):
    1. Environment variables (CS_BASE_URL, CS_TIMEOUT_MS, CS_IGNORE_HTTPS_ERRORS)
    2. YAML settings file (argument, or CS_SUITE_SETTINGS)
    3. Defaults from SuiteSettings
    """
    if env is None:
        env = os.environ

    config = main()
    settings_file = settings_file or env.get(ENV_SETTINGS_FILE)
    if settings_file:
        try:
            config.add_settings(settings_file, "suite")
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Cannot read settings file {settings_file}: {e}") from e
        if not isinstance(config.settings["suite"], dict):
            raise SettingsError(f"Settings file {settings_file} must contain a mapping")
        logger.info("Loaded suite settings from %s", settings_file)

    values = dict(config.settings.get("suite", {}))
    values.update(_env_overrides(env))

    try:
        settings = SuiteSettings(**values)
    except ValidationError as e:
        raise SettingsError(f"Invalid suite settings: {e}") from e

    logger.debug("Suite settings resolved: base_url=%s login_path=%s",
                 settings.base_url, settings.login_path)
    return settings
