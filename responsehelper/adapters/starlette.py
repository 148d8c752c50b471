"""Starlette / FastAPI binding for ``ResponseContext``.

The request meta lives on ``request.state`` (populated by
``RequestMetaMiddleware``). Writing produces a ``JSONResponse`` which the
route handler returns.
"""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from responsehelper.helper import ResponseHelper

_NO_BODY_STATUSES: frozenset[int] = frozenset({204, 304})


class StarletteContext:
    """``ResponseContext`` over a Starlette request.

    A context accepts a single write; a second one raises ``RuntimeError``.
    """

    def __init__(self, request: Request, meta_key: str = "meta") -> None:
        self._request = request
        self._meta_key = meta_key
        self.response: Response | None = None

    @property
    def request(self) -> Request:
        return self._request

    def get_meta(self) -> Any | None:
        return getattr(self._request.state, self._meta_key, None)

    def json(self, status_code: int, content: dict) -> Response:
        if self.response is not None:
            raise RuntimeError("response already written for this request")
        if status_code in _NO_BODY_STATUSES:
            # HTTP forbids a body on these statuses.
            self.response = Response(status_code=status_code)
        else:
            self.response = JSONResponse(status_code=status_code, content=content)
        return self.response


class StarletteResponder:
    """Same intents as ``ResponseHelper``, taking a ``Request`` directly.

    Example::

        responder = StarletteResponder(helper)

        @app.get("/users/{user_id}")
        async def get_user(request: Request, user_id: str):
            user = await repo.find(user_id)
            if user is None:
                return responder.not_found(request, "User not found")
            return responder.success(request, user)
    """

    def __init__(self, helper: ResponseHelper | None = None, meta_key: str = "meta") -> None:
        self.helper = helper or ResponseHelper()
        self.meta_key = meta_key

    def context(self, request: Request) -> StarletteContext:
        return StarletteContext(request, meta_key=self.meta_key)

    def bad_request(self, request: Request, message: str, details: str) -> Response:
        return self.helper.bad_request(self.context(request), message, details)

    def unauthorized(self, request: Request, message: str) -> Response:
        return self.helper.unauthorized(self.context(request), message)

    def forbidden(self, request: Request, message: str) -> Response:
        return self.helper.forbidden(self.context(request), message)

    def not_found(self, request: Request, message: str) -> Response:
        return self.helper.not_found(self.context(request), message)

    def conflict(self, request: Request, message: str, err: BaseException) -> Response:
        return self.helper.conflict(self.context(request), message, err)

    def already_exists(self, request: Request, resource: str, err: BaseException) -> Response:
        return self.helper.already_exists(self.context(request), resource, err)

    def internal_error(self, request: Request, message: str, err: BaseException) -> Response:
        return self.helper.internal_error(self.context(request), message, err)

    def success(self, request: Request, data: Any) -> Response:
        return self.helper.success(self.context(request), data)

    def success_with_pagination(self, request: Request, data: Any, pagination: Any) -> Response:
        return self.helper.success_with_pagination(self.context(request), data, pagination)

    def created(self, request: Request, data: Any) -> Response:
        return self.helper.created(self.context(request), data)

    def deleted(self, request: Request, noun: str) -> Response:
        return self.helper.deleted(self.context(request), noun)

    def no_content(self, request: Request) -> Response:
        return self.helper.no_content(self.context(request))
