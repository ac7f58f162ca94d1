import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from app.core.cache import ProfileCache
from app.core.errors import ServiceError
from app.services.assembler import ProfileAssembler
from app.utils.validation import is_valid_username

logger = logging.getLogger(__name__)

INVALID_USERNAME_MESSAGE = "Invalid GitHub username"
USER_NOT_FOUND_MESSAGE = "GitHub user not found"


class Outcome(str, Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    DEGRADED_WITH_CACHE = "degraded_with_cache"
    DEGRADED_NO_CACHE = "degraded_no_cache"


@dataclass(frozen=True)
class UserLookup:
    outcome: Outcome
    status: int
    body: Dict[str, Any]


class UserInfoService:
    """
    Request handler for ``/users/{username}``.

    Owns the per-username cache and is the only place that decides between
    fresh data, stale cached data and an error. The cache is written only
    after a fully successful assemble; a 404 from GitHub never serves a
    cached copy, any other failure does when one exists.
    """

    def __init__(self, assembler: ProfileAssembler, cache: ProfileCache | None = None):
        self.assembler = assembler
        self.cache = cache if cache is not None else ProfileCache()

    def lookup(self, username: str | None) -> UserLookup:
        if not is_valid_username(username):
            logger.info(f"Rejected invalid username {username!r}")
            return UserLookup(Outcome.INVALID, 400, {"error": INVALID_USERNAME_MESSAGE})

        result = self.assembler.assemble(username)
        if not isinstance(result, ServiceError):
            self.cache.put(username, result)
            logger.info(f"Fetched {username} ({len(result.repositories or ())} repositories)")
            return UserLookup(Outcome.SUCCESS, 200, result.to_json())

        if result.is_not_found:
            logger.info(f"GitHub user {username} not found")
            return UserLookup(
                Outcome.NOT_FOUND,
                404,
                {"error": USER_NOT_FOUND_MESSAGE, "status": 404, "cached": False},
            )

        return self._fallback(username, result)

    def _fallback(self, username: str, error: ServiceError) -> UserLookup:
        cached = self.cache.get(username)
        if cached is not None:
            logger.warning(f"Serving cached profile for {username} after upstream failure: {error}")
            return UserLookup(
                Outcome.DEGRADED_WITH_CACHE,
                error.status,
                {"data": cached.to_json(), "error": error.message, "status": error.status, "cached": True},
            )
        logger.warning(f"No cached profile for {username} after upstream failure: {error}")
        return UserLookup(
            Outcome.DEGRADED_NO_CACHE,
            error.status,
            {"error": error.message, "status": error.status, "cached": False},
        )
