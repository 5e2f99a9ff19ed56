"""
Centralized error handlers for FastAPI.

Every error leaving a route goes through the HTTP translator, so clients
always get the same status mapping and error body. No stack traces or
internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from svcerr.domain.errors.error import Error, HTTPErr
from svcerr.interfaces.http.translator import error_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(Error)
    async def handle_error(_request: Request, exc: Error) -> Response:
        """Handle classified errors built by this package."""
        return error_response(exc, logger)

    @app.exception_handler(HTTPErr)
    async def handle_http_err(_request: Request, exc: HTTPErr) -> Response:
        """Handle errors carrying an explicit HTTP status."""
        return error_response(exc, logger)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        return error_response(exc, logger)
