"""
Configuration management for the calculator MCP server.

Loads environment variables (and a ``.env`` file if present) and provides
logging setup shared by the stdio and HTTP entry points.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_SERVER_NAME = "example-calculator-mcp"


class ConfigurationError(Exception):
    """Exception raised for invalid server configuration."""
    pass


class ServerSettings(BaseModel):
    """Runtime settings for both transports."""
    host: str = Field(default="0.0.0.0", description="HTTP bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="HTTP listen port")
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    sse_keepalive_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Seconds between keep-alive pings on /sse event streams"
    )
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    mcp_json_response: bool = Field(
        default=False,
        description="Answer /mcp requests with plain JSON instead of an event stream"
    )
    server_name: str = Field(default=DEFAULT_SERVER_NAME, description="Advertised MCP server name")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> "ServerSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            overrides: Values that take precedence over the environment, e.g.
                command-line options; None values are ignored

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        raw = {
            "host": env.get("HOST"),
            "port": env.get("PORT"),
            "log_level": env.get("LOG_LEVEL"),
            "log_file": env.get("LOG_FILE") or None,
            "sse_keepalive_seconds": env.get("SSE_KEEPALIVE_SECONDS"),
            "server_name": env.get("MCP_SERVER_NAME"),
            "mcp_json_response": env.get("MCP_JSON_RESPONSE"),
        }
        origins = env.get("CORS_ORIGINS")
        if origins:
            raw["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        if overrides:
            raw.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**{k: v for k, v in raw.items() if v is not None})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid server configuration: {e}") from e


def load_settings(
    env_file: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ServerSettings:
    """
    Load ``.env`` (when present) and read settings from the environment.

    Args:
        env_file: Explicit .env path; falls back to python-dotenv's search
        overrides: Values that take precedence over the environment

    Returns:
        Server settings
    """
    if env_file is not None and env_file.exists():
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()
    return ServerSettings.from_env(overrides=overrides)


def configure_logging(settings: ServerSettings):
    """
    Configure root logging once per process.

    Log records go to stderr so the stdio transport keeps stdout for the
    protocol stream.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
