"""Middleware package — error hierarchy, exception handlers and request meta."""

from responsehelper.middleware.error_handler import (
    AlreadyExistsError,
    ApiError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    register_error_handlers,
)
from responsehelper.middleware.request_meta import RequestMetaMiddleware

__all__ = [
    "AlreadyExistsError",
    "ApiError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "RequestMetaMiddleware",
    "UnauthorizedError",
    "register_error_handlers",
]
