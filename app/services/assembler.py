from typing import Any, Dict, Tuple

from pydantic import TypeAdapter, ValidationError

from app.core.errors import ErrorKind, ServiceError
from app.models import Profile, Repository
from app.services.github import GitHubClient
from app.utils.time import format_created_at

PROFILE_PARSE_MESSAGE = "Failed to parse GitHub user info response"
REPOS_PARSE_MESSAGE = "Failed to parse GitHub repository list response"

_user_object = TypeAdapter(Dict[str, Any])
# GitHub may answer with a bare null; that surfaces as "repositories": null
_repository_list = TypeAdapter(Tuple[Repository, ...] | None)


def _unparsable(message: str, cause: Exception) -> ServiceError:
    return ServiceError(ErrorKind.RESPONSE_UNPARSABLE, 502, message, cause=cause)


def to_profile(user: Dict[str, Any]) -> Profile:
    """Translate a raw ``/users/{name}`` payload into a Profile without repositories."""
    return Profile(
        username=user.get("login"),
        display_name=user.get("name"),
        avatar=user.get("avatar_url"),
        location=user.get("location"),
        email=user.get("email"),
        url=user.get("url"),
        created_at=format_created_at(user.get("created_at")),
    )


def parse_profile(raw: bytes) -> Profile | ServiceError:
    try:
        return to_profile(_user_object.validate_json(raw))
    except ValidationError as e:
        return _unparsable(PROFILE_PARSE_MESSAGE, e)


def parse_repositories(raw: bytes) -> Tuple[Repository, ...] | None | ServiceError:
    try:
        return _repository_list.validate_json(raw)
    except ValidationError as e:
        return _unparsable(REPOS_PARSE_MESSAGE, e)


class ProfileAssembler:
    """Combines the profile and repository calls into one Profile."""

    def __init__(self, client: GitHubClient):
        self.client = client

    def assemble(self, username: str) -> Profile | ServiceError:
        raw_user = self.client.fetch_profile_json(username)
        if isinstance(raw_user, ServiceError):
            return raw_user
        profile = parse_profile(raw_user)
        if isinstance(profile, ServiceError):
            return profile

        raw_repos = self.client.fetch_repositories_json(username)
        if isinstance(raw_repos, ServiceError):
            return raw_repos
        repos = parse_repositories(raw_repos)
        if isinstance(repos, ServiceError):
            return repos

        return profile.with_repositories(repos)
