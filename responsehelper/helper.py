"""Response helper: one operation per response intent.

Each operation reads the request meta from the context, asks the
``ResponseBuilder`` for the envelope, and writes it to the context exactly
once. Whatever the context's ``json`` returns is handed back, so with the
Starlette adapter a handler can ``return helper.success(ctx, data)``.

Example response bodies::

    helper.bad_request(ctx, "Invalid input", "The 'name' field is required.")
    # 400 {"success": false,
    #      "error": {"code": 400, "status": "BAD_REQUEST",
    #                "message": "Invalid input",
    #                "details": "The 'name' field is required."},
    #      "meta": {...}}

    helper.deleted(ctx, "qualification")
    # 200 {"success": true,
    #      "message": "qualification deleted successfully",
    #      "meta": {...}}
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from responsehelper.builder import Reply, ResponseBuilder
from responsehelper.config.settings import ResponseHelperSettings
from responsehelper.context import ResponseContext

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _request_id(meta: Any) -> Any:
    """Request ID carried in the meta, for log correlation."""
    return meta.get("request_id") if isinstance(meta, dict) else None


class ResponseHelper:
    """Writes canonical envelopes to a ``ResponseContext``."""

    def __init__(self, builder: ResponseBuilder | None = None) -> None:
        self._builder = builder or ResponseBuilder()

    @classmethod
    def from_settings(cls, settings: ResponseHelperSettings) -> ResponseHelper:
        return cls(
            ResponseBuilder(
                details_policy=settings.details_policy,
                redacted_details=settings.redacted_details,
            )
        )

    @property
    def builder(self) -> ResponseBuilder:
        return self._builder

    def send(self, ctx: ResponseContext[R], reply: Reply) -> R:
        """Write an already built reply."""
        logger.debug(
            "Writing %d response",
            reply.status_code,
            extra={
                "status_code": reply.status_code,
                "success": reply.envelope.success,
                "request_id": _request_id(reply.envelope.meta),
            },
        )
        return ctx.json(reply.status_code, reply.content())

    # -- error family ---------------------------------------------------

    def bad_request(self, ctx: ResponseContext[R], message: str, details: str) -> R:
        return self.send(ctx, self._builder.bad_request(message, details, meta=ctx.get_meta()))

    def unauthorized(self, ctx: ResponseContext[R], message: str) -> R:
        return self.send(ctx, self._builder.unauthorized(message, meta=ctx.get_meta()))

    def forbidden(self, ctx: ResponseContext[R], message: str) -> R:
        return self.send(ctx, self._builder.forbidden(message, meta=ctx.get_meta()))

    def not_found(self, ctx: ResponseContext[R], message: str) -> R:
        return self.send(ctx, self._builder.not_found(message, meta=ctx.get_meta()))

    def conflict(self, ctx: ResponseContext[R], message: str, err: BaseException) -> R:
        return self.send(ctx, self._builder.conflict(message, err, meta=ctx.get_meta()))

    def already_exists(self, ctx: ResponseContext[R], resource: str, err: BaseException) -> R:
        return self.send(ctx, self._builder.already_exists(resource, err, meta=ctx.get_meta()))

    def internal_error(self, ctx: ResponseContext[R], message: str, err: BaseException) -> R:
        reply = self._builder.internal_error(message, err, meta=ctx.get_meta())
        logger.error(
            "%s: %s",
            message,
            err,
            exc_info=(type(err), err, err.__traceback__),
            extra={
                "status_code": reply.status_code,
                "request_id": _request_id(reply.envelope.meta),
            },
        )
        return self.send(ctx, reply)

    # -- success family -------------------------------------------------

    def success(self, ctx: ResponseContext[R], data: Any) -> R:
        return self.send(ctx, self._builder.success(data, meta=ctx.get_meta()))

    def success_with_pagination(self, ctx: ResponseContext[R], data: Any, pagination: Any) -> R:
        return self.send(
            ctx, self._builder.success_with_pagination(data, pagination, meta=ctx.get_meta())
        )

    def created(self, ctx: ResponseContext[R], data: Any) -> R:
        return self.send(ctx, self._builder.created(data, meta=ctx.get_meta()))

    def deleted(self, ctx: ResponseContext[R], noun: str) -> R:
        return self.send(ctx, self._builder.deleted(noun, meta=ctx.get_meta()))

    def no_content(self, ctx: ResponseContext[R]) -> R:
        return self.send(ctx, self._builder.no_content(meta=ctx.get_meta()))
