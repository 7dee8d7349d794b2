"""Application configuration loaded from the environment.

Every setting can be overridden with a ``GYMPOINT_``-prefixed environment
variable or a ``.env`` file in the working directory, e.g.
``GYMPOINT_DATABASE_PATH=/var/lib/gympoint/gympoint.db``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API, the CLI and the mail worker."""

    model_config = SettingsConfigDict(
        env_prefix="GYMPOINT_",
        env_file=".env",
        extra="ignore",
    )

    database_path: str = "gympoint.db"

    # "memory" keeps jobs in-process; useful for local runs without a broker
    queue_backend: Literal["celery", "memory"] = "celery"
    broker_url: str = "redis://localhost:6379/0"

    smtp_host: str = "localhost"
    smtp_port: int = Field(default=25, ge=1, le=65535)
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = False
    smtp_timeout: float = 30.0
    mail_from: str = "Gympoint <noreply@gympoint.com>"

    log_level: str = "INFO"
    log_dir: str = "logs"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return Settings()
