"""Error hierarchy and FastAPI exception handlers.

Handlers can raise an ``ApiError`` subclass instead of building a response
by hand. The exception handlers registered here turn those errors (plus
FastAPI's RequestValidationError, Starlette's HTTPException and unhandled
exceptions) into the same envelopes ``ResponseHelper`` writes.
"""

from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from responsehelper.adapters.starlette import StarletteResponder


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ApiError(Exception):
    """Base error for all errors rendered as an envelope."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, details: str | None = None) -> None:
        self.message = message or self.__class__.message
        self.details = details
        super().__init__(self.message)


class BadRequestError(ApiError):
    """Malformed or invalid input."""

    status_code = 400
    message = "Bad request"


class UnauthorizedError(ApiError):
    """Missing or invalid credentials."""

    status_code = 401
    message = "Unauthorized"


class ForbiddenError(ApiError):
    """Authenticated but not allowed."""

    status_code = 403
    message = "Forbidden"


class NotFoundError(ApiError):
    """Resource not found."""

    status_code = 404
    message = "Resource not found"


class ConflictError(ApiError):
    """Request conflicts with the current state of a resource.

    Raised without ``details``, the rendered ``error.details`` repeats the
    message, the same text ``str(err)`` gives a conflict built from an error.
    """

    status_code = 409
    message = "Conflict"


class AlreadyExistsError(ConflictError):
    """Duplicate resource: message is ``"<resource> already exists"``.

    Without ``details`` the body carries that text in both ``error.message``
    and ``error.details``.
    """

    def __init__(self, resource: str, details: str | None = None) -> None:
        self.resource = resource
        super().__init__(f"{resource} already exists", details)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _render(
    responder: StarletteResponder,
    request: Request,
    status_code: int,
    message: str,
    details: str | None,
    cause: BaseException,
) -> Response:
    """Dispatch a (status, message, details) triple to the matching intent."""
    if status_code == 400:
        return responder.bad_request(request, message, details or "")
    if status_code == 401:
        return responder.unauthorized(request, message)
    if status_code == 403:
        return responder.forbidden(request, message)
    if status_code == 404:
        return responder.not_found(request, message)
    if status_code == 500:
        return responder.internal_error(request, message, cause)

    # Conflicts raised without an underlying error carry their own text.
    if status_code == 409 and details is None:
        details = message

    ctx = responder.context(request)
    reply = responder.helper.builder.error(
        HTTPStatus(status_code), message, details, meta=ctx.get_meta()
    )
    return responder.helper.send(ctx, reply)


def register_error_handlers(
    app: FastAPI,
    responder: StarletteResponder,
    request_id_header: str = "X-Request-ID",
) -> None:
    """Wire up all exception handlers on the FastAPI application.

    Unhandled exceptions are rendered outside the request meta middleware,
    so their handler echoes the request ID header itself.
    """

    async def _api_error_handler(request: Request, exc: ApiError) -> Response:
        return _render(responder, request, exc.status_code, exc.message, exc.details, exc)

    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
        response = _render(responder, request, exc.status_code, message, None, exc)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        field_errors = "; ".join(
            f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return responder.bad_request(request, "Validation error", field_errors)

    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        # internal_error logs the traceback.
        response = responder.internal_error(request, "Internal server error", exc)
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers[request_id_header] = request_id
        return response

    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
