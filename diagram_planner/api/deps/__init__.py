"""API-specific dependencies."""

from .dependencies import (
    get_diagram_service,
    get_service_cache,
)

__all__ = [
    "get_diagram_service",
    "get_service_cache",
]
