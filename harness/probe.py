"""HTTP reachability probe for the console login path."""

import time
import logging

import httpx

from errors import ConsoleUnreachableError
from models import SuiteSettings

logger = logging.getLogger("probe")

DEFAULT_TIMEOUT = 10


def check_console(target_url: str, timeout: int = DEFAULT_TIMEOUT,
                  tls_verify: bool = True) -> dict:
    """GET the target URL. Returns result dict.

    Any response below 500 counts as reachable: a login page behind a
    redirect or an auth wall still proves the console is up.
    """
    start = time.monotonic()
    try:
        with httpx.Client(verify=tls_verify, timeout=timeout,
                          follow_redirects=True) as client:
            resp = client.get(target_url)
            elapsed_ms = int((time.monotonic() - start) * 1000)

            if resp.status_code < 500:
                return {
                    "status": "reachable",
                    "response_time_ms": elapsed_ms,
                    "status_code": resp.status_code,
                }
            else:
                return {
                    "status": "unreachable",
                    "response_time_ms": elapsed_ms,
                    "status_code": resp.status_code,
                    "error_message": f"Server error {resp.status_code}",
                }
    except httpx.TimeoutException:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        return {
            "status": "unreachable",
            "response_time_ms": elapsed_ms,
            "error_message": f"Timeout after {timeout}s",
        }
    except httpx.HTTPError as e:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        return {
            "status": "unreachable",
            "response_time_ms": elapsed_ms,
            "error_message": str(e) or e.__class__.__name__,
        }


def require_console(settings: SuiteSettings, timeout: int = DEFAULT_TIMEOUT) -> dict:
    """Probe the login URL and raise ConsoleUnreachableError if it is down."""
    url = settings.login_url
    result = check_console(url, timeout=timeout,
                           tls_verify=not settings.ignore_https_errors)
    if result["status"] != "reachable":
        logger.warning("Console probe failed for %s: %s", url, result["error_message"])
        raise ConsoleUnreachableError(url, result["error_message"])
    logger.info("Console reachable at %s (%s, %dms)",
                url, result["status_code"], result["response_time_ms"])
    return result
