"""
Error model.

All errors produced by request-handling code are built from here.
They are mapped to HTTP responses at the interface layer.
"""

from svcerr.domain.errors.builder import BadArgumentError, new_error, response_error
from svcerr.domain.errors.error import (
    Error,
    HTTPErr,
    Location,
    PlainError,
    kind_is,
    strip_stack,
)
from svcerr.domain.errors.kinds import Code, Kind, Op, Parameter

__all__ = [
    "BadArgumentError",
    "Code",
    "Error",
    "HTTPErr",
    "Kind",
    "Location",
    "Op",
    "Parameter",
    "PlainError",
    "kind_is",
    "new_error",
    "response_error",
    "strip_stack",
]
