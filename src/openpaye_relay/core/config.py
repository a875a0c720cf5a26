"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseSettings):
    """HTTP front door configuration."""

    model_config = {"env_prefix": "OPENPAYE_RELAY_SERVER_"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias="PORT")
    messages_path: str = "/messages"


class OpenPayeConfig(BaseSettings):
    """Upstream OpenPaye REST API configuration."""

    model_config = {"env_prefix": "OPENPAYE_RELAY_API_"}

    base_url: str = "https://api.openpaye.co/v1"
    timeout: float | None = None  # seconds; None leaves outbound calls unbounded


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "OPENPAYE_RELAY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    server_name: str = "openpaye-mcp"

    server: ServerConfig = Field(default_factory=ServerConfig)
    openpaye: OpenPayeConfig = Field(default_factory=OpenPayeConfig)
