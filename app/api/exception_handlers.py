from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import ConfigurationError, SuggestionServiceError

logger = logging.getLogger("app.suggestions.http")


def _log_failure(*, request: Request, status_code: int, error: str) -> None:
    # Do not log request bodies: they carry symptom descriptions.
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    logger.info(
        "Suggestion request failed",
        extra={
            "request_id": request_id,
            "http_method": request.method,
            "request_path": request.url.path,  # no query string
            "status_code": status_code,
            "error": error,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(ConfigurationError)
    async def handle_configuration_error(
        request: Request,
        exc: ConfigurationError,
    ) -> JSONResponse:
        _log_failure(request=request, status_code=503, error="not_configured")
        return JSONResponse(status_code=503, content={"detail": exc.message})

    @app.exception_handler(SuggestionServiceError)
    async def handle_suggestion_service_error(
        request: Request,
        exc: SuggestionServiceError,
    ) -> JSONResponse:
        _log_failure(request=request, status_code=502, error="service_error")
        return JSONResponse(status_code=502, content={"detail": exc.message})
