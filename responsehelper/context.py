"""Capability interface the helper needs from a web framework.

A context only has to read the request meta and write one JSON response.
``ResponseHelper`` depends on nothing else, so any framework can be plugged
in with a thin adapter (see ``responsehelper.adapters.starlette``).
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class ResponseContext(Protocol[R_co]):
    """Per-request handle: optional meta in, one status-coded JSON body out."""

    def get_meta(self) -> Any | None:
        """Return the value stored under the request's meta slot, or ``None``."""
        ...

    def json(self, status_code: int, content: dict) -> R_co:
        """Write ``content`` with ``status_code``; return the transport's result."""
        ...
