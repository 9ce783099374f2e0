"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Bind address and CORS configuration for the API process
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from stats_service.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """uvicorn bind address and CORS policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=8000, description="Port uvicorn listens on")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
