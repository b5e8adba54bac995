"""Configuration management for deskdash.

Settings come from ``DESKDASH_*`` environment variables or a local ``.env``
file. Command-line flags may override the remote address and timeout.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:3001"
DEFAULT_REQUEST_TIMEOUT = 5.0


class Settings(BaseSettings):
    """deskdash settings with env and file support."""

    model_config = SettingsConfigDict(env_prefix="DESKDASH_", env_file=".env", extra="ignore")

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL, description="Base address of the dashboard service"
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Per-request timeout in seconds, uniform across operations",
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    # Development service
    dev_host: str = Field(default="127.0.0.1", description="Bind host for `deskdash serve`")
    dev_port: int = Field(default=3001, description="Bind port for `deskdash serve`")


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
