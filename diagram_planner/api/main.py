"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, diagram_planner.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import logging
from diagram_planner.api.deps.dependencies import get_service_cache
from diagram_planner.configs import get_settings
from diagram_planner.core.exceptions import DiagramPlannerException
from diagram_planner.models.common import ErrorResponse
from diagram_planner.observability.logger import configure_logging
from diagram_planner.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import diagrams_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Diagram Planner API",
        description="Plans structured diagrams with an LLM and renders them onto shared boards",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(DiagramPlannerException)
    async def diagram_planner_exception_handler(
        request: Request, exc: DiagramPlannerException
    ) -> JSONResponse:
        logging.getLogger(__name__).error(
            f"{__name__}:exception_handler - {request.method} {request.url.path}: {exc}"
        )
        body = ErrorResponse(error=exc.message, details=exc.details or None)
        return JSONResponse(status_code=500, content=body.model_dump())

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "diagram_planner.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
