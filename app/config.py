"""Planner settings loaded from the environment and an optional .env file."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Runtime configuration for the API, storage, logging and progress rules."""

    app_name: str = Field(default="Fitness Planner API")
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = Field(default=False, description="Auto-reload the server.")

    database_url: str = Field(
        default="sqlite:///./data/planner.db",
        description="SQLAlchemy URL; SQLite files get their directory created.",
    )
    sql_echo: bool = Field(default=False, description="Log every SQL statement.")

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))
    log_file_name: str = Field(default="planner.log")

    progress_rules_path: Path = Field(
        default=PACKAGE_DIR / "data" / "progress_rules.yaml",
        description="Thresholds and messages for progress recommendations.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {value!r}")
        return level

    @property
    def log_file(self) -> Path:
        return self.log_dir / self.log_file_name


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process; tests set env vars before first use."""

    settings = Settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
