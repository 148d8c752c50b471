"""Pydantic Settings for the response helper.

All environment variables use the RESPONSEHELPER_ prefix.
Example: RESPONSEHELPER_DETAILS_POLICY=redact, RESPONSEHELPER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class DetailsPolicy(str, Enum):
    """What to put in ``error.details`` of a 500 response."""

    PASS_THROUGH = "pass_through"  # str(err), may leak internals
    REDACT = "redact"  # fixed placeholder


class ResponseHelperSettings(BaseSettings):
    """Response helper configuration validated from environment variables."""

    log_level: str = "INFO"

    # Internal error sanitization
    details_policy: DetailsPolicy = DetailsPolicy.PASS_THROUGH
    redacted_details: str = Field(default="An internal error occurred", min_length=1)

    # Request-scoped meta
    meta_key: str = Field(default="meta", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    request_id_header: str = Field(default="X-Request-ID", min_length=1)

    model_config = {"env_prefix": "RESPONSEHELPER_"}
