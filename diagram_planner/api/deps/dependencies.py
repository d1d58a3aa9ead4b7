"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: diagram_planner.configs, diagram_planner.application, diagram_planner.boundary
System role: DI container for service injection
"""

from diagram_planner.application.services import DiagramService
from diagram_planner.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._board_store = None
        self._planner = None
        self._diagram_service = None

    @property
    def board_store(self):
        """Get cached board store."""
        if self._board_store is None:
            from diagram_planner.boundary.board.board_store import BoardStore

            settings = get_settings()
            self._board_store = BoardStore(
                max_objects_per_board=settings.board.max_objects_per_board,
            )
        return self._board_store

    @property
    def planner(self):
        """Get cached diagram planner."""
        if self._planner is None:
            # Lazy import to avoid loading the Bedrock client at startup
            from diagram_planner.core.diagrams.planner import DiagramPlanner

            self._planner = DiagramPlanner.from_settings(get_settings().planner)
        return self._planner

    @property
    def diagram_service(self):
        """Get cached diagram service."""
        if self._diagram_service is None:
            settings = get_settings()
            self._diagram_service = DiagramService(
                board_store=self.board_store,
                planner=self.planner,
                max_attempts=settings.planner.max_plan_attempts,
            )
        return self._diagram_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._board_store = None
        self._planner = None
        self._diagram_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_diagram_service() -> DiagramService:
    """
    Get diagram service instance.

    Returns:
        DiagramService: Service sharing the cached board store and planner
    """
    return get_service_cache().diagram_service
