"""
Pydantic schemas for HTTP error responses.

These schemas define the error body contract:

    {"error": {"kind": ..., "code": ..., "param": ..., "message": ...}}

Empty fields are omitted from the serialized form.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, field_validator


class ServiceError(BaseModel):
    """Client-visible description of an error. Every field is optional."""

    kind: Optional[str] = None
    code: Optional[str] = None
    param: Optional[str] = None
    message: Optional[str] = None

    @field_validator("kind", "code", "param", "message", mode="before")
    @classmethod
    def empty_to_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty strings as unset so they are dropped on output."""
        if value == "":
            return None
        return value


class ErrorResponse(BaseModel):
    """Response body wrapping a ServiceError under the ``error`` key."""

    error: ServiceError

    def to_json(self) -> str:
        """Serialize with unset fields omitted."""
        return self.model_dump_json(exclude_none=True)
