"""Canonical JSON response envelopes for HTTP handlers."""

from responsehelper.adapters.starlette import StarletteContext, StarletteResponder
from responsehelper.app import install_response_helper
from responsehelper.builder import Reply, ResponseBuilder
from responsehelper.config.settings import DetailsPolicy, ResponseHelperSettings
from responsehelper.context import ResponseContext
from responsehelper.helper import ResponseHelper
from responsehelper.models import ApiResponse, ErrorBody, ErrorStatus, Pagination

__all__ = [
    "ApiResponse",
    "DetailsPolicy",
    "ErrorBody",
    "ErrorStatus",
    "Pagination",
    "Reply",
    "ResponseBuilder",
    "ResponseContext",
    "ResponseHelper",
    "ResponseHelperSettings",
    "StarletteContext",
    "StarletteResponder",
    "install_response_helper",
]
