"""Response envelope models.

Every response produced by the helper is wrapped in this envelope:
{ success: bool, data?: T, error?: ErrorBody, pagination?: P, message?: str, meta: M }

Only the fields an intent sets are emitted, so an explicit ``data: null``
survives while an unset ``data`` is absent. Payloads inside ``data`` are
serialized in full.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

T = TypeVar("T")


class ErrorStatus(str, Enum):
    """Machine-readable status string carried in ``error.status``."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class _SparseModel(BaseModel):
    """Serializes only the fields that were explicitly set."""

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: SerializerFunctionWrapHandler) -> dict:
        body = handler(self)
        return {key: value for key, value in body.items() if key in self.model_fields_set}


class ErrorBody(_SparseModel):
    """The ``error`` object of an error-family envelope."""

    code: int
    status: str
    message: str
    details: str | None = None


class ApiResponse(_SparseModel, Generic[T]):
    """JSON envelope for all API responses."""

    success: bool
    data: T | None = None
    error: ErrorBody | None = None
    pagination: Any = None
    message: str | None = None
    meta: Any = None

    def content(self) -> dict:
        """Render the JSON-compatible body handed to the transport."""
        return self.model_dump(mode="json", by_alias=True)
