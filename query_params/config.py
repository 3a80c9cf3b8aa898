"""Configuration management using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from query_params.exceptions import DEFAULT_MISSING_PARAMETER_MESSAGE

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_ENV_FILES: tuple[Path, ...] = (BASE_DIR / ".env",)
ENV_FILE_OVERRIDES: dict[str, tuple[Path, ...]] = {
    "testing": (BASE_DIR / ".env.test",),
}


class Settings(BaseSettings):
    """Query parameter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    FLASK_ENV: str = Field(default="development")

    # Resolver defaults applied by QueryArgs
    QUERY_ARRAY_DELIMITER: str = Field(
        default=",",
        description="Separator used to split delimited query parameters"
    )
    QUERY_MISSING_PARAMETER_MESSAGE: str = Field(
        default=DEFAULT_MISSING_PARAMETER_MESSAGE,
        description="Message reported when a required query parameter is missing"
    )

    # Flask error handler
    QUERY_ERROR_STATUS_CODE: int = Field(
        default=400,
        ge=400,
        le=499,
        description="HTTP status returned for query parameter errors"
    )

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.FLASK_ENV == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings(_env_file=_resolve_env_files())


def _resolve_env_files() -> tuple[str, ...]:
    """Select environment files based on FLASK_ENV."""
    env = os.getenv("FLASK_ENV")
    candidate_paths: list[Path] = list(DEFAULT_ENV_FILES)

    override = ENV_FILE_OVERRIDES.get(env or "")
    if override:
        candidate_paths.extend(override)

    unique_paths = dict.fromkeys(candidate_paths)
    return tuple(str(path) for path in unique_paths)
