"""
Error classification taxonomy.

Kind is the closed set of failure categories that drives HTTP status
selection. Code, Parameter and Op are distinct string types so the
error builders can tell them apart at runtime.
No framework imports allowed.
"""

from enum import Enum


class Kind(Enum):
    """Category of failure. ``Other`` is the zero/default value."""

    Other = 0
    Invalid = 1
    Permission = 2
    IO = 3
    Exist = 4
    NotExist = 5
    Private = 6
    Internal = 7
    BrokenLink = 8
    Database = 9
    Validation = 10
    Unanticipated = 11
    InvalidRequest = 12
    Unauthenticated = 13
    Unauthorized = 14

    def __str__(self) -> str:
        return self.name


class Code(str):
    """Machine-readable, service-defined error code (e.g. ``invalid_date``)."""


class Parameter(str):
    """Name of the offending request field or argument."""


class Op(str):
    """Logical operation name, e.g. ``users.create``."""
