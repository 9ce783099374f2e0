"""
Shared configuration base.

Every settings class reads environment variables first, then ``.env``.
Unknown variables are ignored so one ``.env`` can serve all sections.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Env/.env loading rules plus the process-wide log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied at startup by configure_logging",
    )
