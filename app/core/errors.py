from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    RESPONSE_UNPARSABLE = "response_unparsable"


@dataclass(frozen=True)
class ServiceError:
    """
    Classified failure carried back to the orchestrator as a return value.

    ``status`` is the HTTP status the gateway answers with; for upstream
    errors it is GitHub's own status code passed through.
    """
    kind: ErrorKind
    status: int
    message: str
    cause: BaseException | None = None

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.UPSTREAM_NOT_FOUND

    def __str__(self) -> str:
        return f"{self.status} {self.message}"
