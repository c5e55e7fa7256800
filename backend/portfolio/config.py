from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The defaults reproduce a fixed deployment: port 3000, the document at
    ``backend/data/database.json`` and the pages under ``backend/frontend``.
    """

    app_title: str = "Portfolio Content API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["*"]

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    public_host: str = "localhost"   # Only used for the startup banner URLs

    # Storage & static assets
    data_file: Path = _BACKEND_DIR / "data" / "database.json"
    frontend_dir: Path = _BACKEND_DIR / "frontend"
    public_dir: Path = _BACKEND_DIR / "public"

    # Admin dashboard
    activity_feed_limit: int = 5

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # JSON document store

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def base_url(self) -> str:
        return f"http://{self.public_host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
