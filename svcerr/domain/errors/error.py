"""
Error values carried up the call stack.

Error is one link of a causal chain: it records a classification, an
optional code and parameter, the wrapped cause and the location it was
created at. HTTPErr is the flat variant handlers can build directly when
they already know the HTTP status to answer with.

Both are exceptions, so they can be raised, but they are equally valid as
plain return values. No framework imports allowed.
"""

import inspect
import os
from dataclasses import dataclass
from typing import Optional

from svcerr.domain.errors.kinds import Code, Kind, Op, Parameter

# Marks the end of a link's own info in a rendered chain.
DELIMITER = "|:"
_SEPARATOR = "|"


@dataclass(frozen=True)
class Location:
    """Source position an Error was created at."""

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.function} ({self.file}:{self.line})"


def capture_location(depth: int = 1) -> Location:
    """Return the location ``depth`` frames above the caller.

    ``depth=1`` is the caller's caller, which is what a constructor wants.
    """
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return Location(function="?", file="?", line=0)
    code = frame.f_code
    return Location(
        function=code.co_name,
        file=os.path.basename(code.co_filename),
        line=frame.f_lineno,
    )


def describe(exc: BaseException) -> str:
    """Return the message of any exception, falling back to its type name.

    An Error keeps its own rendering, even when empty.
    """
    text = str(exc)
    if text or isinstance(exc, Error):
        return text
    return type(exc).__name__


class PlainError(Exception):
    """Error that carries only a message, e.g. a chain with its preamble removed."""


class Error(Exception):
    """One link in a causal error chain.

    Attributes:
        kind: Classification of the failure.
        code: Optional machine-readable code.
        param: Optional name of the offending parameter.
        op: Optional logical operation name.
        err: Wrapped cause, another Error or any exception.
        location: Where the error was constructed.
        stack_stripped: Set once the value has replaced its cause with the
            stripped rendering of itself; it then renders that text only.
    """

    def __init__(
        self,
        *,
        kind: Kind = Kind.Other,
        code: str = "",
        param: str = "",
        op: str = "",
        err: Optional[BaseException] = None,
        location: Optional[Location] = None,
    ) -> None:
        super().__init__()
        self.kind = kind
        self.code = Code(code)
        self.param = Parameter(param)
        self.op = Op(op)
        self.err = err
        self.location = location if location is not None else capture_location()
        self.stack_stripped = False
        if err is not None:
            self.__cause__ = err

    def status_only(self) -> bool:
        """Return True when no code, parameter or cause is set.

        The kind alone only selects the HTTP status, so no body is sent.
        """
        return not self.code and not self.param and self.err is None

    def copy(self) -> "Error":
        """Return a shallow value copy that can be mutated independently."""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.__cause__ = self.__cause__
        return clone

    def render(self) -> str:
        """Render the chain: own info, then ``|: `` and the cause."""
        if self.stack_stripped:
            return "" if self.err is None else describe(self.err)

        parts = []
        if self.op:
            parts.append(self.op)
        if self.location is not None:
            parts.append(str(self.location))
        if self.kind is not Kind.Other:
            parts.append(str(self.kind))
        if self.code:
            parts.append(self.code)
        if self.param:
            parts.append(self.param)

        text = _SEPARATOR.join(parts)
        if self.err is not None:
            text = f"{text}{DELIMITER} {describe(self.err)}"
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Error(kind={self.kind!s}, code={self.code!r}, "
            f"param={self.param!r}, err={self.err!r})"
        )


def strip_stack(err: Optional[BaseException]) -> Optional[BaseException]:
    """Remove the leading location preamble from an Error's rendering.

    For an Error, the text after the first delimiter is returned as a
    PlainError. When there is no delimiter the full rendering is kept.
    Any other value is returned unchanged.
    """
    if not isinstance(err, Error):
        return err

    text = err.render()
    idx = text.find(DELIMITER)
    if idx < 0:
        return PlainError(text)
    return PlainError(text[idx + len(DELIMITER) + 1:])


def kind_is(kind: Kind, err: Optional[BaseException]) -> bool:
    """Report whether ``err`` is an Error of the given kind.

    An Error whose own kind is Other defers to the first wrapped Error that
    carries a kind.
    """
    if not isinstance(err, Error):
        return False
    if err.kind is not Kind.Other:
        return err.kind is kind
    if err.err is not None:
        return kind_is(kind, err.err)
    return kind is Kind.Other


class HTTPErr(Exception):
    """Error answered with an explicit HTTP status.

    Carries a single wrapped error rather than a chain.
    """

    def __init__(
        self,
        *,
        status: int = 0,
        kind: Kind = Kind.Other,
        code: str = "",
        param: str = "",
        err: Optional[BaseException] = None,
    ) -> None:
        super().__init__()
        self.status = status
        self.kind = kind
        self.code = Code(code)
        self.param = Parameter(param)
        self.err = err
        if err is not None:
            self.__cause__ = err

    def err_kind(self) -> str:
        """Return the kind name, or an empty string when unset."""
        if self.kind is Kind.Other:
            return ""
        return str(self.kind)

    def err_code(self) -> str:
        return str(self.code)

    def err_param(self) -> str:
        return str(self.param)

    def status_only(self) -> bool:
        """Return True when only the status is set, so no body is sent."""
        return (
            self.status != 0
            and self.kind is Kind.Other
            and not self.param
            and not self.code
            and self.err is None
        )

    def set_err(self, message: str) -> None:
        """Attach a plain error carrying ``message``."""
        self.err = PlainError(message)
        self.__cause__ = self.err

    def __str__(self) -> str:
        if self.err is None:
            return ""
        return describe(self.err)

    def __repr__(self) -> str:
        return (
            f"HTTPErr(status={self.status}, kind={self.kind!s}, "
            f"code={self.code!r}, param={self.param!r}, err={self.err!r})"
        )
