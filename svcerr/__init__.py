"""
svcerr: structured service errors and their HTTP translation.

Handlers build errors with ``new_error`` / ``response_error`` as they
propagate, and hand them to ``http_error`` at the HTTP boundary.
"""

from svcerr.domain.errors import (
    BadArgumentError,
    Code,
    Error,
    HTTPErr,
    Kind,
    Op,
    Parameter,
    PlainError,
    kind_is,
    new_error,
    response_error,
    strip_stack,
)
from svcerr.interfaces.http.translator import error_response, http_error

__all__ = [
    "BadArgumentError",
    "Code",
    "Error",
    "HTTPErr",
    "Kind",
    "Op",
    "Parameter",
    "PlainError",
    "error_response",
    "http_error",
    "kind_is",
    "new_error",
    "response_error",
    "strip_stack",
]
