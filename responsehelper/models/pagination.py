"""Typed pagination metadata for paginated success responses."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Page position of a collection response.

    Serialized with camelCase keys::

        {"currentPage": 3, "pageSize": 10, "totalPages": 3, "totalRecords": 27}
    """

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage", ge=1)
    page_size: int = Field(alias="pageSize", ge=1)
    total_pages: int = Field(alias="totalPages", ge=0)
    total_records: int = Field(alias="totalRecords", ge=0)

    @classmethod
    def from_counts(cls, page: int, page_size: int, total_records: int) -> Pagination:
        """Derive ``total_pages`` from the record count.

        A non-positive ``page_size`` fails the model's own constraint with
        a ``ValidationError``.
        """
        total_pages = math.ceil(total_records / page_size) if page_size > 0 else 0
        return cls(
            current_page=page,
            page_size=page_size,
            total_pages=total_pages,
            total_records=total_records,
        )
