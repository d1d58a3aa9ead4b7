"""
Server-level configuration.

Settings that shape the HTTP process itself rather than any one
subsystem: log verbosity and which browser origins may call the API.
Subsystem settings (planner, board, observability) hang off the unified
Settings class.

Dependencies: pydantic, pydantic_settings
System role: Root of the settings hierarchy
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Server settings read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for the planner service",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated browser origins allowed to call the API, or *",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        """Origins for CORSMiddleware; empty entries are dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
