"""Request meta middleware.

Generates (or propagates) a UUID request ID for every incoming request and
seeds the request meta slot that every envelope echoes:

    request.state.request_id = "<id>"
    request.state.meta = {"request_id": "<id>", "timestamp": "<UTC ISO-8601>"}

The request ID is also returned in the ``X-Request-ID`` response header.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


class RequestMetaMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a request ID and meta to each request.

    If the incoming request already carries the request ID header the
    provided value is reused; otherwise a new UUID4 is generated.
    """

    def __init__(
        self,
        app,  # noqa: ANN001
        header_name: str = "X-Request-ID",
        meta_key: str = "meta",
    ) -> None:
        super().__init__(app)
        self._header_name = header_name
        self._meta_key = meta_key

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Reuse caller-provided ID or generate a fresh one.
        request_id = request.headers.get(self._header_name) or str(uuid.uuid4())
        request.state.request_id = request_id
        setattr(
            request.state,
            self._meta_key,
            {
                "request_id": request_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

        response: Response = await call_next(request)
        response.headers[self._header_name] = request_id
        return response
