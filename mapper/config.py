"""Client-side configuration loaded from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkspaceConfig(BaseModel):
    """Runtime settings for a workspace session."""

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the project server",
    )
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")
    grid_size: int = Field(default=25, description="Snap grid for placed and moved nodes")
    user_id: str | None = Field(
        default=None,
        description="Signed-in user; unset means reads return empty results",
    )

    @field_validator("api_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("grid_size")
    @classmethod
    def _positive_grid(cls, value: int) -> int:
        if value < 1:
            raise ValueError("MAPPER_GRID_SIZE must be at least 1")
        return value


@lru_cache(maxsize=1)
def get_config() -> WorkspaceConfig:
    """Load and cache configuration."""
    load_dotenv()
    return WorkspaceConfig(
        api_url=os.getenv("MAPPER_API_URL", "http://localhost:8000"),
        timeout=float(os.getenv("MAPPER_TIMEOUT", "10.0")),
        grid_size=int(os.getenv("MAPPER_GRID_SIZE", "25")),
        user_id=os.getenv("MAPPER_USER_ID") or None,
    )
