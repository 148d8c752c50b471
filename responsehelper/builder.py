"""Framework-agnostic response envelope builder.

Maps a response intent to a status code and an envelope. The builder never
touches a request: the caller passes the request meta explicitly, so every
method is a pure function of its arguments.

Example::

    builder = ResponseBuilder()
    reply = builder.not_found("User not found", meta={"request_id": "abc"})
    reply.status_code   # 404
    reply.content()     # {"success": False, "error": {...}, "meta": {...}}
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from responsehelper.config.settings import DetailsPolicy
from responsehelper.models.responses import ApiResponse, ErrorBody, ErrorStatus

DELETED_SUFFIX = " deleted successfully"
ALREADY_EXISTS_SUFFIX = " already exists"


@dataclass(frozen=True)
class Reply:
    """A status code paired with the envelope to serialize."""

    status_code: int
    envelope: ApiResponse

    def content(self) -> dict:
        return self.envelope.content()


def _error_text(err: BaseException) -> str:
    if err is None:
        raise TypeError("an error instance is required, got None")
    return str(err)


class ResponseBuilder:
    """Builds one ``Reply`` per response intent.

    Parameters
    ----------
    details_policy:
        Whether internal-error responses echo the error text or a placeholder.
    redacted_details:
        Placeholder used under ``DetailsPolicy.REDACT``.
    """

    def __init__(
        self,
        details_policy: DetailsPolicy = DetailsPolicy.PASS_THROUGH,
        redacted_details: str = "An internal error occurred",
    ) -> None:
        self._details_policy = details_policy
        self._redacted_details = redacted_details

    @property
    def details_policy(self) -> DetailsPolicy:
        return self._details_policy

    # ------------------------------------------------------------------
    # Error family
    # ------------------------------------------------------------------

    @staticmethod
    def error(
        status: HTTPStatus | int,
        message: str,
        details: str | None = None,
        *,
        meta: Any = None,
        error_status: str | None = None,
        include_null_data: bool = False,
    ) -> Reply:
        """Build an error envelope for any 4xx/5xx status.

        ``error_status`` defaults to the upper-snake reason phrase of the
        status code (``404`` -> ``NOT_FOUND``). ``details`` is emitted only
        when given.
        """
        status = HTTPStatus(status)
        error_fields: dict[str, Any] = {
            "code": status.value,
            "status": error_status or status.phrase.upper().replace(" ", "_").replace("-", "_"),
            "message": message,
        }
        if details is not None:
            error_fields["details"] = details

        envelope_fields: dict[str, Any] = {
            "success": False,
            "error": ErrorBody(**error_fields),
        }
        if include_null_data:
            envelope_fields["data"] = None
        envelope_fields["meta"] = meta
        return Reply(status.value, ApiResponse(**envelope_fields))

    def bad_request(self, message: str, details: str, *, meta: Any = None) -> Reply:
        return self.error(
            HTTPStatus.BAD_REQUEST, message, details,
            meta=meta, error_status=ErrorStatus.BAD_REQUEST.value,
        )

    def unauthorized(self, message: str, *, meta: Any = None) -> Reply:
        return self.error(
            HTTPStatus.UNAUTHORIZED, message,
            meta=meta, error_status=ErrorStatus.UNAUTHORIZED.value,
        )

    def forbidden(self, message: str, *, meta: Any = None) -> Reply:
        return self.error(
            HTTPStatus.FORBIDDEN, message,
            meta=meta, error_status=ErrorStatus.FORBIDDEN.value,
        )

    def not_found(self, message: str, *, meta: Any = None) -> Reply:
        return self.error(
            HTTPStatus.NOT_FOUND, message,
            meta=meta, error_status=ErrorStatus.NOT_FOUND.value,
        )

    def conflict(self, message: str, err: BaseException, *, meta: Any = None) -> Reply:
        return self.error(
            HTTPStatus.CONFLICT, message, _error_text(err),
            meta=meta, error_status=ErrorStatus.CONFLICT.value,
        )

    def already_exists(self, resource: str, err: BaseException, *, meta: Any = None) -> Reply:
        """Conflict for a duplicate resource: ``"<resource> already exists"``."""
        return self.conflict(resource + ALREADY_EXISTS_SUFFIX, err, meta=meta)

    def internal_error(self, message: str, err: BaseException, *, meta: Any = None) -> Reply:
        """500 with ``data`` forced to null.

        Under ``DetailsPolicy.PASS_THROUGH`` the error text is echoed verbatim
        into ``details``; callers facing the public internet should configure
        ``REDACT``.
        """
        details = _error_text(err)
        if self._details_policy is DetailsPolicy.REDACT:
            details = self._redacted_details
        return self.error(
            HTTPStatus.INTERNAL_SERVER_ERROR, message, details,
            meta=meta,
            error_status=ErrorStatus.INTERNAL_SERVER_ERROR.value,
            include_null_data=True,
        )

    # ------------------------------------------------------------------
    # Success family
    # ------------------------------------------------------------------

    @staticmethod
    def success(data: Any, *, meta: Any = None) -> Reply:
        return Reply(HTTPStatus.OK.value, ApiResponse(success=True, data=data, meta=meta))

    @staticmethod
    def success_with_pagination(data: Any, pagination: Any, *, meta: Any = None) -> Reply:
        return Reply(
            HTTPStatus.OK.value,
            ApiResponse(success=True, data=data, pagination=pagination, meta=meta),
        )

    @staticmethod
    def created(data: Any, *, meta: Any = None) -> Reply:
        return Reply(HTTPStatus.CREATED.value, ApiResponse(success=True, data=data, meta=meta))

    @staticmethod
    def deleted(noun: str, *, meta: Any = None) -> Reply:
        return Reply(
            HTTPStatus.OK.value,
            ApiResponse(success=True, message=noun + DELETED_SUFFIX, meta=meta),
        )

    @staticmethod
    def no_content(*, meta: Any = None) -> Reply:
        return Reply(HTTPStatus.NO_CONTENT.value, ApiResponse(success=True, data=None, meta=meta))
