"""Wire the response helper onto a FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from responsehelper.adapters.starlette import StarletteResponder
from responsehelper.config.settings import ResponseHelperSettings
from responsehelper.helper import ResponseHelper
from responsehelper.logging_config import configure_logging
from responsehelper.middleware.error_handler import register_error_handlers
from responsehelper.middleware.request_meta import RequestMetaMiddleware

logger = logging.getLogger(__name__)


def install_response_helper(
    app: FastAPI,
    settings: ResponseHelperSettings | None = None,
    *,
    configure_logs: bool = False,
) -> StarletteResponder:
    """Register middleware and exception handlers, return the responder.

    The responder is also stored on ``app.state.responder`` so routes can
    reach it through ``request.app.state.responder``.
    """
    settings = settings or ResponseHelperSettings()

    if configure_logs:
        configure_logging(settings.log_level)

    responder = StarletteResponder(
        ResponseHelper.from_settings(settings), meta_key=settings.meta_key
    )
    register_error_handlers(app, responder, request_id_header=settings.request_id_header)
    app.add_middleware(
        RequestMetaMiddleware,
        header_name=settings.request_id_header,
        meta_key=settings.meta_key,
    )
    app.state.responder = responder

    logger.info(
        "Response helper installed (details_policy=%s)", settings.details_policy.value
    )
    return responder
