"""
HTTP error translator.

Maps any error to an HTTP status and a JSON error body, logs it once and
writes the response. The full error chain only ever reaches the log; the
client sees the classification, code, parameter and a message with the
location preamble stripped.

The translator never fails: errors that were not built by this package
are answered with a generic 500 "Unanticipated" response.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from starlette.responses import Response

from svcerr.core.config import settings
from svcerr.domain.errors.error import Error, HTTPErr, describe, strip_stack
from svcerr.domain.errors.kinds import Kind
from svcerr.interfaces.http.schemas import ErrorResponse, ServiceError
from svcerr.interfaces.http.writer import BufferedResponseWriter, ResponseWriter
from svcerr.shared.logging import log_with_context

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_500 = 500

UNANTICIPATED_CODE = "Unanticipated"

KIND_STATUS: Mapping[Kind, int] = MappingProxyType(
    {
        Kind.Other: HTTP_400,
        Kind.Invalid: HTTP_400,
        Kind.Exist: HTTP_400,
        Kind.NotExist: HTTP_400,
        Kind.Private: HTTP_400,
        Kind.BrokenLink: HTTP_400,
        Kind.Validation: HTTP_400,
        Kind.InvalidRequest: HTTP_400,
        Kind.Unauthenticated: HTTP_401,
        Kind.Unauthorized: HTTP_403,
        Kind.Permission: HTTP_403,
        Kind.IO: HTTP_500,
        Kind.Internal: HTTP_500,
        Kind.Database: HTTP_500,
        Kind.Unanticipated: HTTP_500,
    }
)

# Auth failures never carry details to the client.
_STATUS_ONLY_KINDS = frozenset({Kind.Unauthenticated, Kind.Unauthorized})


def status_for_kind(kind: Kind) -> int:
    """Return the HTTP status code for an error classification."""
    return KIND_STATUS[kind]


@dataclass(frozen=True)
class Translation:
    """Outcome of translating one error.

    Attributes:
        status: HTTP status code to send.
        body: JSON body, or an empty string for a status-only response.
        log_message: Message of the single log entry for this error.
        context: Structured fields attached to the log entry.
    """

    status: int
    body: str = ""
    log_message: str = ""
    context: Mapping[str, Any] = field(default_factory=dict)


def _body(kind: str = "", code: str = "", param: str = "", message: str = "") -> str:
    """Serialize the error body, or return "" when every field is empty."""
    if not (kind or code or param or message):
        return ""
    error = ServiceError(kind=kind, code=code, param=param, message=message)
    return ErrorResponse(error=error).to_json()


def _translate_nil() -> Translation:
    status = status_for_kind(Kind.Other)
    return Translation(
        status=status,
        log_message=f"HTTP {status} - nil error, no response body sent",
        context={"status": status},
    )


def _translate_error(err: Error) -> Translation:
    status = status_for_kind(err.kind)
    if err.kind in _STATUS_ONLY_KINDS:
        return Translation(
            status=status,
            log_message=f"HTTP {status} - {err}",
            context={"status": status, "kind": str(err.kind)},
        )
    if err.status_only():
        return Translation(
            status=status,
            log_message=f"HTTP {status} - {err}, no response body sent",
            context={"status": status, "kind": str(err.kind)},
        )

    # Work on a copy: the caller's value keeps its full chain.
    full = err.copy()
    log_message = f"HTTP {status} - {full}"
    message = ""
    if full.err is not None:
        full.err = strip_stack(full)
        full.stack_stripped = True
        message = str(full)

    kind = "" if full.kind is Kind.Other else str(full.kind)
    return Translation(
        status=status,
        body=_body(kind, str(full.code), str(full.param), message),
        log_message=log_message,
        context={
            "status": status,
            "kind": str(full.kind),
            "code": str(full.code),
            "param": str(full.param),
        },
    )


def _translate_http_err(err: HTTPErr) -> Translation:
    status = err.status or status_for_kind(err.kind)
    body = "" if err.status_only() else _body(
        err.err_kind(), err.err_code(), err.err_param(), str(err)
    )
    if not body:
        return Translation(
            status=status,
            log_message=f"HTTP {status} - status only, no response body sent",
            context={"status": status},
        )
    return Translation(
        status=status,
        body=body,
        log_message=f"HTTP {status} - {err}",
        context={
            "status": status,
            "kind": err.err_kind(),
            "code": err.err_code(),
            "param": err.err_param(),
        },
    )


def _translate_unanticipated(err: Any) -> Translation:
    return Translation(
        status=HTTP_500,
        body=_body(
            str(Kind.Unanticipated),
            UNANTICIPATED_CODE,
            message=settings.unanticipated_message,
        ),
        log_message=f"Unknown Error - HTTP {HTTP_500} - {describe(err)}",
        context={"status": HTTP_500, "error_type": type(err).__name__},
    )


def translate(err: Optional[BaseException]) -> Translation:
    """Decide status, body and log entry for ``err`` without side effects.

    ``err`` itself is never mutated.
    """
    if err is None:
        return _translate_nil()
    if isinstance(err, Error):
        return _translate_error(err)
    if isinstance(err, HTTPErr):
        return _translate_http_err(err)
    return _translate_unanticipated(err)


def send_error(writer: ResponseWriter, body: str, status_code: int) -> None:
    """Write an error response.

    The JSON content type is only declared when there is a body to send.
    """
    if body:
        writer.set_header("Content-Type", "application/json")
    writer.set_header("X-Content-Type-Options", "nosniff")
    writer.write_header(status_code)
    if body:
        writer.write(body + "\n")


def http_error(
    writer: ResponseWriter,
    err: Optional[BaseException],
    log: Optional[logging.Logger] = None,
) -> None:
    """Log ``err`` and write it to ``writer`` as an HTTP error response.

    Args:
        writer: Destination of the response.
        err: Any error, or None.
        log: Logger receiving the single ERROR entry. Defaults to this
            module's logger.
    """
    translation = translate(err)
    log_with_context(
        log or logger,
        logging.ERROR,
        translation.log_message,
        **translation.context,
    )
    send_error(writer, translation.body, translation.status)


def error_response(
    err: Optional[BaseException], log: Optional[logging.Logger] = None
) -> Response:
    """Translate ``err`` into a Starlette response."""
    writer = BufferedResponseWriter()
    http_error(writer, err, log)
    return writer.to_response()
