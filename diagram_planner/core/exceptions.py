"""
Exception hierarchy for the diagram planner.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DiagramPlannerException(Exception):
    """Base exception for all diagram planner errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class BoardNotFoundError(DiagramPlannerException):
    """Raised when a board document cannot be found."""

    def __init__(self, board_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize board not found error.

        Args:
            board_id: ID of the missing board
            details: Additional context
        """
        details = details or {}
        details["board_id"] = board_id
        super().__init__(f"Board not found: {board_id}", details)


class PlanningServiceError(DiagramPlannerException):
    """Raised when the planning model call itself fails (transport, auth, timeout)."""

    def __init__(
        self,
        message: str,
        diagram_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize planning service error.

        Args:
            message: Error message
            diagram_type: Diagram type being planned
            details: Additional context
        """
        details = details or {}
        if diagram_type:
            details["diagram_type"] = diagram_type
        super().__init__(message, details)
