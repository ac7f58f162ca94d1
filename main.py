from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # .env must be loaded before settings are read

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cache import ProfileCache
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.routers import health, users
from app.services.assembler import ProfileAssembler
from app.services.github import GitHubClient
from app.services.users import UserInfoService

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "REST API for retrieving GitHub user profile information and repositories.\n\n"
    "Responses are cached per user; when the GitHub API is unavailable or erroring, "
    "the last successful response is served alongside the error."
)


def create_app(settings: Settings | None = None, client: GitHubClient | None = None) -> FastAPI:
    settings = settings or default_settings
    client = client or GitHubClient(settings)

    app = FastAPI(title="GitHub User Information API", version="0.1.0", description=DESCRIPTION)
    app.state.user_service = UserInfoService(ProfileAssembler(client), ProfileCache())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail, "status": exc.status_code})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error", "status": 500, "cached": False})

    app.include_router(health.router)
    app.include_router(users.router, prefix="", tags=["users"])
    return app


configure_logging(default_settings.LOG_LEVEL)
app = create_app()

# uvicorn main:app --reload --port 8080
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)
