from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.services.users import UserInfoService

router = APIRouter()


def get_user_service(request: Request) -> UserInfoService:
    return request.app.state.user_service


@router.get(
    "/users/{username}",
    summary="GitHub profile with repositories",
    responses={
        400: {"description": "Invalid GitHub username"},
        404: {"description": "GitHub user not found"},
        502: {"description": "GitHub API unavailable or unparsable; may include cached data"},
    },
)
def get_user(username: str, service: UserInfoService = Depends(get_user_service)):
    """
    Profile fields plus public repositories for a GitHub user.

    When GitHub fails with anything other than 404, the last successful
    response for that user is returned under ``data`` with ``cached: true``.
    """
    lookup = service.lookup(username)
    return JSONResponse(status_code=lookup.status, content=lookup.body)
