"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (repository checkout)
BASE_DIR = Path(__file__).resolve().parent.parent

# Sample mazes shipped inside the package
PACKAGE_MAZES_DIR = Path(__file__).resolve().parent / "mazes"


class Settings(BaseSettings):
    """Application settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Game"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Maze sources
    maze_file: Path = Path("maze.txt")
    mazes_dir: Path = PACKAGE_MAZES_DIR

    # Grid bounds
    max_rows: int = 105
    max_cols: int = 105

    # Possible-paths mode
    max_paths_to_show: int = 20
    random_seed: Optional[int] = None

    # HTTP sessions: completed or quit sessions kept before the oldest are dropped
    max_finished_sessions: int = 100

    # Console
    message_delay_seconds: float = 1.0

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    @field_validator("max_rows", "max_cols", "max_paths_to_show", "max_finished_sessions")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Bounds and caps must be positive."""
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("message_delay_seconds")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
