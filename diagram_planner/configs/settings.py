"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from diagram_planner.configs.base import BaseSettings
from diagram_planner.configs.board import BoardSettings
from diagram_planner.configs.observability import ObservabilitySettings
from diagram_planner.configs.planner import PlannerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    planner: PlannerSettings = PlannerSettings()
    board: BoardSettings = BoardSettings()
    observability: ObservabilitySettings = ObservabilitySettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from diagram_planner.configs import get_settings
        settings = get_settings()
    """
    return Settings()
