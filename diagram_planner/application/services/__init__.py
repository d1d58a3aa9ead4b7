"""Application services."""

from diagram_planner.application.services.diagram_service import DiagramService

__all__ = ["DiagramService"]
