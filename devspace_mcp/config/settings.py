"""
Server configuration and logging context.

Settings are read once from environment variables at process start and
carried through the server inside an explicit ServerContext. Nothing here
is module-level mutable state.

Environment Variables:
    DEVSPACE_TIMEOUT=300000     - Per-command timeout in milliseconds (0 disables)
    DEVSPACE_MAX_RETRIES=3      - Accepted and logged; no retry path consumes it
    DEVSPACE_BINARY=devspace    - Executable invoked for every operation
    LOG_LEVEL=info              - debug, info, warn/warning, error

Usage:
    from devspace_mcp.config.settings import ServerContext

    context = ServerContext.from_env()
    context.logger.info("Starting with timeout %sms", context.settings.timeout_ms)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import __version__

DEFAULT_TIMEOUT_MS = 300_000
DEFAULT_MAX_RETRIES = 3
DEFAULT_BINARY = "devspace"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


class ServerSettings(BaseModel):
    """Validated server configuration."""

    model_config = ConfigDict(frozen=True)

    name: str = "devspace-mcp-server"
    version: str = __version__
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    log_level: str = "info"
    binary: str = DEFAULT_BINARY

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in LOG_LEVELS:
            available = ", ".join(LOG_LEVELS)
            raise ValueError(f"Unknown log level '{v}'. Available levels: {available}")
        return level

    @field_validator("binary")
    @classmethod
    def validate_binary(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DEVSPACE_BINARY must not be empty")
        return v.strip()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ServerSettings with environment overrides applied

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        return cls(
            timeout_ms=env.get("DEVSPACE_TIMEOUT", str(DEFAULT_TIMEOUT_MS)),
            max_retries=env.get("DEVSPACE_MAX_RETRIES", str(DEFAULT_MAX_RETRIES)),
            log_level=env.get("LOG_LEVEL", "info"),
            binary=env.get("DEVSPACE_BINARY", DEFAULT_BINARY),
        )

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]


def configure_logging(level: int) -> None:
    """Send log records to stderr; stdout carries the MCP transport."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


@dataclass(frozen=True)
class ServerContext:
    """Settings and logger handed to the request pipeline."""

    settings: ServerSettings
    logger: logging.Logger

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerContext":
        settings = ServerSettings.from_env(environ)
        configure_logging(settings.logging_level)
        return cls(settings=settings, logger=logging.getLogger("devspace_mcp"))

    @classmethod
    def for_settings(cls, settings: ServerSettings) -> "ServerContext":
        """Build a context without touching global logging configuration."""
        return cls(settings=settings, logger=logging.getLogger("devspace_mcp"))
