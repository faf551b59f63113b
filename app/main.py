from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.llm.deps import get_gemini_client
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.suggestions.router import router as suggestions_router

setup_logging()


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Build the Gemini handle once at startup so a missing key is reported
        # immediately rather than on the first suggestion request.
        get_gemini_client()
        yield

    app = FastAPI(
        title="Remedy Suggestion API",
        description=(
            "Suggests remedies for a free-text symptom description by asking an AI model "
            "to choose from a caller-supplied candidate list.\n\n"
            "Design principles:\n"
            "- Suggestions are best-effort; an unusable model answer yields an empty list.\n"
            "- Results are always a subset of the submitted candidates.\n"
            "- Logging and metrics never include symptom text, prompts or model output."
        ),
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "health",
                "description": (
                    "Basic uptime and readiness checks for load balancers and monitoring."
                ),
            },
            {
                "name": "suggestions",
                "description": "AI remedy suggestions for a symptom description.",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "This endpoint intentionally does not call the AI service, so it can be used "
            "safely for basic uptime checks."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(suggestions_router)
    return app


app = create_app()
