"""
Application entry point.

Creates the FastAPI application and wires together:
- Error handlers (every error answered by the HTTP translator)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from svcerr.core.config import settings
from svcerr.shared.errors.handlers import register_error_handlers
from svcerr.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers the error handlers.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service_name=settings.project_name,
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    return app


app = create_app()
