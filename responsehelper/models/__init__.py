"""Public models for the response helper."""

from responsehelper.models.pagination import Pagination
from responsehelper.models.responses import ApiResponse, ErrorBody, ErrorStatus

__all__ = [
    "ApiResponse",
    "ErrorBody",
    "ErrorStatus",
    "Pagination",
]
