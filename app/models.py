from typing import Any, Dict, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    """Minimal projection of a GitHub repository; extra upstream keys are ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str | None = None
    url: str | None = None


class Profile(BaseModel):
    """
    Assembled user record: GitHub profile fields plus the repository list.

    Instances are immutable. ``repositories`` is a tuple, so the cached copy
    can be handed out as-is without callers being able to change it.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    username: str = Field(..., min_length=1, alias="user_name")
    display_name: str | None = None
    avatar: str | None = None
    location: str | None = Field(None, alias="geo_location")
    email: str | None = None
    url: str | None = None
    created_at: str | None = None
    repositories: Tuple[Repository, ...] | None = None

    def with_repositories(self, repositories: Iterable[Repository] | None) -> "Profile":
        repos = tuple(repositories) if repositories is not None else None
        return self.model_copy(update={"repositories": repos})

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
