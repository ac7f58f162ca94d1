import logging
from http import HTTPStatus

import requests

from app.core.config import Settings, settings as default_settings
from app.core.errors import ErrorKind, ServiceError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "GitHub user not found"
UNAVAILABLE_MESSAGE = "GitHub API unavailable"


def _status_text(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).name}"
    except ValueError:
        return str(code)


def classify_status(code: int) -> ServiceError | None:
    """Map an upstream status code to a ServiceError, or None for 2xx."""
    if 200 <= code < 300:
        return None
    if code == 404:
        return ServiceError(ErrorKind.UPSTREAM_NOT_FOUND, 404, NOT_FOUND_MESSAGE)
    # wording is shared with the 404 case on purpose; clients match on it
    return ServiceError(
        ErrorKind.UPSTREAM_ERROR,
        code,
        f"GitHub user not found or error occurred: {_status_text(code)}",
    )


class GitHubClient:
    """
    Unauthenticated GET access to the two GitHub user endpoints.

    Bodies are returned as raw bytes; parsing happens in the assembler.
    Each call is a standalone ``requests.get``, so one client can be shared
    by every worker thread. Nothing is retried.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.settings.GITHUB_USER_AGENT,
        }

    def fetch_profile_json(self, username: str) -> bytes | ServiceError:
        return self._get(f"/users/{username}")

    def fetch_repositories_json(self, username: str) -> bytes | ServiceError:
        return self._get(f"/users/{username}/repos")

    def _get(self, path: str) -> bytes | ServiceError:
        url = f"{self.settings.GITHUB_API}{path}"
        try:
            r = requests.get(url, headers=self.headers, timeout=self.settings.GITHUB_TIMEOUT)
        except requests.RequestException as e:
            logger.warning(f"GET {url} failed: {e}")
            return ServiceError(ErrorKind.UPSTREAM_UNAVAILABLE, HTTPStatus.BAD_GATEWAY.value, UNAVAILABLE_MESSAGE, cause=e)

        error = classify_status(r.status_code)
        if error is not None:
            logger.warning(f"GET {url} returned {r.status_code}")
            return error
        return r.content
