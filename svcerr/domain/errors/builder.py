"""
Error builders.

new_error and response_error assemble an error from a variable list of
arguments. The type of each argument decides which field it fills:

    Kind                  classification
    Code or str           code
    Parameter             parameter
    Op                    operation name (new_error only)
    int                   HTTP status (response_error only)
    Error                 wrapped cause, merged with the new value
    any other exception   wrapped cause

If more than one argument of a type is given, the last one wins. An
argument of any other type aborts the build and a BadArgumentError is
returned instead.

A wrapped Error is never mutated: the builders work on a private copy.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from svcerr.domain.errors.error import (
    Error,
    HTTPErr,
    Location,
    capture_location,
    strip_stack,
)
from svcerr.domain.errors.kinds import Code, Kind, Op, Parameter
from svcerr.shared.logging import log_with_context

logger = logging.getLogger(__name__)


class BadArgumentError(TypeError):
    """Returned by a builder given an argument of an unknown type."""


@dataclass
class _Fields:
    """Fields collected from builder arguments."""

    status: int = 0
    kind: Kind = Kind.Other
    code: Code = Code("")
    param: Parameter = Parameter("")
    op: Op = Op("")
    err: Optional[BaseException] = None


def _collect(
    name: str,
    args: tuple[object, ...],
    location: Location,
    on_error: Callable[[Error, _Fields], Error],
    accept_status: bool = False,
    accept_op: bool = True,
) -> Union[_Fields, BadArgumentError]:
    if not args:
        raise TypeError(f"call to {name} with no arguments")

    fields = _Fields()
    for arg in args:
        if isinstance(arg, Kind):
            fields.kind = arg
        elif isinstance(arg, Parameter):
            fields.param = arg
        elif accept_op and isinstance(arg, Op):
            fields.op = arg
        elif isinstance(arg, str) and not isinstance(arg, Op):
            fields.code = Code(arg)
        elif isinstance(arg, Error):
            fields.err = on_error(arg, fields)
        elif isinstance(arg, BaseException):
            fields.err = arg
        elif accept_status and isinstance(arg, int) and not isinstance(arg, bool):
            fields.status = arg
        else:
            logger.error(
                "%s: bad call from %s:%d: %r", name, location.file, location.line, args
            )
            return BadArgumentError(
                f"unknown type {type(arg).__name__}, value {arg!r} in error call"
            )
    return fields


def _merge(cur: _Fields, prev: Error) -> None:
    """Suppress fields repeated between ``cur`` and the wrapped ``prev``.

    A field equal on both links is cleared on ``prev``; a field only set on
    ``prev`` is pulled up into ``cur``.
    """
    if prev.kind is cur.kind:
        prev.kind = Kind.Other
    if cur.kind is Kind.Other:
        cur.kind = prev.kind
        prev.kind = Kind.Other

    if prev.code == cur.code:
        prev.code = Code("")
    if not cur.code:
        cur.code = prev.code
        prev.code = Code("")

    if prev.param == cur.param:
        prev.param = Parameter("")
    if not cur.param:
        cur.param = prev.param
        prev.param = Parameter("")


def _private_copy(cause: Error, _fields: _Fields) -> Error:
    return cause.copy()


def _log_and_strip(cause: Error, fields: _Fields) -> Error:
    """Log the full chain of ``cause``, then hide its preamble from clients."""
    full = cause.copy()
    log_with_context(
        logger,
        logging.ERROR,
        f"Response error: {full}",
        status=fields.status,
        kind=str(full.kind),
        param=str(full.param),
        code=str(full.code),
    )
    # Without a cause there is no message for the client, only the preamble.
    if full.err is not None:
        full.err = strip_stack(full)
    full.stack_stripped = True
    return full


def new_error(*args: object) -> Union[Error, BadArgumentError]:
    """Build an Error from its arguments, wrapping at most one cause.

    Raises:
        TypeError: If called with no arguments.
    """
    location = capture_location()
    fields = _collect("new_error", args, location, _private_copy)
    if isinstance(fields, BadArgumentError):
        return fields

    if isinstance(fields.err, Error):
        _merge(fields, fields.err)

    return Error(
        kind=fields.kind,
        code=fields.code,
        param=fields.param,
        op=fields.op,
        err=fields.err,
        location=location,
    )


def response_error(*args: object) -> Union[HTTPErr, BadArgumentError]:
    """Build an HTTPErr from its arguments.

    A wrapped Error has its full chain logged here; the HTTPErr only keeps
    the stripped message for the client.

    Raises:
        TypeError: If called with no arguments.
    """
    location = capture_location()
    fields = _collect(
        "response_error",
        args,
        location,
        _log_and_strip,
        accept_status=True,
        accept_op=False,
    )
    if isinstance(fields, BadArgumentError):
        return fields

    if isinstance(fields.err, Error):
        _merge(fields, fields.err)

    return HTTPErr(
        status=fields.status,
        kind=fields.kind,
        code=fields.code,
        param=fields.param,
        err=fields.err,
    )
