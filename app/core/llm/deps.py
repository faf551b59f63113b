from __future__ import annotations

import logging
from functools import lru_cache

from app.core.llm.gemini_client import GeminiClient, GeminiConfig
from app.core.settings import get_settings

logger = logging.getLogger("app.llm")


@lru_cache
def get_gemini_client() -> GeminiClient | None:
    """
    Build the process-wide Gemini client once.

    Returns None when no API key is configured so the suggestion service can
    raise a ConfigurationError per call instead of failing at startup.
    """

    settings = get_settings()
    if not settings.ai_enabled:
        logger.warning(
            "Gemini API key not found; AI features will be disabled. "
            "Set GEMINI_API_KEY in the environment or .env file."
        )
        return None

    config = GeminiConfig(api_key=str(settings.gemini_api_key).strip())
    return GeminiClient(config=config)
