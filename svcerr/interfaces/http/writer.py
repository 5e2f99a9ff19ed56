"""
Response writer collaborator.

The translator only ever sets headers, writes a status once and writes
a body. ResponseWriter is that contract; BufferedResponseWriter records
the calls and turns them into a Starlette response.
"""

import logging
from typing import Optional, Protocol

from starlette.responses import Response

logger = logging.getLogger(__name__)


class ResponseWriter(Protocol):
    """Write side of an HTTP response."""

    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""
        ...

    def write_header(self, status_code: int) -> None:
        """Send the status line. Only the first call has an effect."""
        ...

    def write(self, body: str) -> None:
        """Append ``body`` to the response."""
        ...


class BufferedResponseWriter:
    """In-memory ResponseWriter.

    Attributes:
        headers: Headers set so far.
        status_code: Status written, or None before write_header.
        body: Body written so far.
    """

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: Optional[int] = None
        self.body = ""

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def write_header(self, status_code: int) -> None:
        if self.status_code is not None:
            logger.warning(
                "superfluous write_header: status %d already written, ignoring %d",
                self.status_code,
                status_code,
            )
            return
        self.status_code = status_code

    def write(self, body: str) -> None:
        if self.status_code is None:
            self.write_header(200)
        self.body += body

    def to_response(self) -> Response:
        """Build the Starlette response described by the recorded calls."""
        response = Response(
            content=self.body or None,
            status_code=self.status_code or 200,
        )
        for name, value in self.headers.items():
            response.headers[name] = value
        return response
