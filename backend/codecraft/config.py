"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Redis (project and file records)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    MAX_CODE_LENGTH: int = 200_000

    # Rate Limiting (executor calls per client)
    RATE_LIMIT_MAX_EXECUTIONS: int = 30
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    # Remote executors. Empty means "not configured".
    PYTHON_EXECUTOR_URL: str = ""
    SQL_EXECUTOR_URL: str = ""
    JAVASCRIPT_EXECUTOR_URL: str = ""
    EXECUTOR_TIMEOUT_SECONDS: float = 15.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
