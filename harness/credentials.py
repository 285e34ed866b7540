import os
import logging

from models import Credentials

logger = logging.getLogger("credentials")

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password"

INVALID_USERNAME = "invalid_user"
INVALID_PASSWORD = "wrong_password"

ENV_USERNAME = "CS_USERNAME"
ENV_PASSWORD = "CS_PASSWORD"
ENV_DOMAIN = "CS_DOMAIN"


def valid_credentials(env=None) -> Credentials:
    """Credentials expected to log in.

    Each value comes from the environment first; an unset or empty variable
    falls back to the literal default.
    """
    if env is None:
        env = os.environ
    username = env.get(ENV_USERNAME) or DEFAULT_USERNAME
    password = env.get(ENV_PASSWORD) or DEFAULT_PASSWORD
    domain = env.get(ENV_DOMAIN) or None
    if username == DEFAULT_USERNAME and password == DEFAULT_PASSWORD:
        logger.debug("Using default console credentials")
    return Credentials(username=username, password=password, domain=domain)


def invalid_credentials() -> Credentials:
    return Credentials(username=INVALID_USERNAME, password=INVALID_PASSWORD)
