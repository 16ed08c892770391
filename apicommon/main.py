"""
Main FastAPI application entry point.

Builds a minimal application wired with the envelope exception handlers and
two system routes. Host applications usually call
``register_exception_handlers`` on their own app instead; this module shows
the wiring and gives ASGI servers something to run:

    uvicorn apicommon.main:app
"""

from fastapi import FastAPI, Response

from apicommon.core.config import settings
from apicommon.presentation.errors import register_exception_handlers
from apicommon.presentation.responses import ApiResponse, ok


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI application with exception handlers and system routes.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    # Global exception handlers (envelope error responses)
    register_exception_handlers(app)

    @app.get("/", response_model=ApiResponse[dict[str, str]])
    async def root() -> Response:
        """
        Root endpoint - service identity.

        Returns:
            Response: Success envelope with name and version.
        """
        return ok({"name": settings.app_name, "version": settings.app_version})

    @app.get("/health", response_model=ApiResponse[dict[str, str]])
    async def health() -> Response:
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            Response: Success envelope with health status.
        """
        return ok({"status": "healthy"})

    return app


app = create_app()
