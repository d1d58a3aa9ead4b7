"""
Board document configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Limits applied to shared board documents
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BoardSettings(BaseSettings):
    """Settings for in-process board documents."""

    model_config = SettingsConfigDict(
        env_prefix="BOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    max_objects_per_board: int = Field(
        default=500,
        gt=0,
        description="Maximum number of objects a single board may hold",
    )
