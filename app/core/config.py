import os
from typing import List


def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    GITHUB_API: str = "https://api.github.com"
    GITHUB_TIMEOUT: float = 20.0
    GITHUB_USER_AGENT: str = "github-user-gateway"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    PORT: int = 8080

    def __init__(
        self,
        github_api: str | None = None,
        github_timeout: float | None = None,
        user_agent: str | None = None,
        cors_origins: List[str] | None = None,
        log_level: str | None = None,
        port: int | None = None,
    ):
        self.GITHUB_API = (github_api or os.getenv("GITHUB_API", self.GITHUB_API)).rstrip("/")
        self.GITHUB_TIMEOUT = github_timeout if github_timeout is not None else float(os.getenv("GITHUB_TIMEOUT", str(self.GITHUB_TIMEOUT)))
        self.GITHUB_USER_AGENT = user_agent or os.getenv("GITHUB_USER_AGENT", self.GITHUB_USER_AGENT)
        self.CORS_ORIGINS = cors_origins if cors_origins is not None else _origins(os.getenv("CORS_ORIGINS", "*"))
        self.LOG_LEVEL = (log_level or os.getenv("LOG_LEVEL", self.LOG_LEVEL)).upper()
        self.PORT = port if port is not None else int(os.getenv("PORT", str(self.PORT)))

settings = Settings()
