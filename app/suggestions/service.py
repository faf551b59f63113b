from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import ValidationError

from app.core.metrics import suggestion_requests_total
from app.domain.exceptions import ConfigurationError, SuggestionServiceError
from app.suggestions.prompt import build_suggestion_prompt
from app.suggestions.schemas import (
    SUGGESTION_RESPONSE_SCHEMA,
    CandidateItem,
    _LLMSuggestionJSON,
)

logger = logging.getLogger("app.suggestions")


class LLMClient(Protocol):
    async def generate_json_text(self, *, prompt: str, response_schema: dict[str, Any]) -> str: ...


def _filter_identifiers(*, raw: list[Any], candidates: Sequence[CandidateItem]) -> list[str]:
    valid = {c.identifier for c in candidates}
    return [item for item in raw if isinstance(item, str) and item in valid]


class SuggestionAdapter:
    """
    Maps a symptom description onto a subset of the caller's candidate remedies.

    All reasoning happens in the external model. This class only builds the
    prompt, makes exactly one call and keeps the identifiers it can verify.
    There are no retries, no caching and no local timeout.
    """

    def __init__(self, *, client: LLMClient | None):
        self._client = client

    async def suggest(self, query: str, candidates: Sequence[CandidateItem]) -> list[str]:
        if self._client is None:
            suggestion_requests_total.labels(outcome="not_configured").inc()
            logger.warning(
                "AI suggestion requested but service is not configured",
                extra={"outcome": "not_configured"},
            )
            raise ConfigurationError()

        prompt = build_suggestion_prompt(query=query, candidates=candidates)

        try:
            text = await self._client.generate_json_text(
                prompt=prompt, response_schema=SUGGESTION_RESPONSE_SCHEMA
            )
        except Exception:  # noqa: BLE001 - every transport/SDK failure collapses to one error kind
            suggestion_requests_total.labels(outcome="service_error").inc()
            logger.exception(
                "Error fetching AI suggestions",
                extra={"outcome": "service_error", "candidate_count": len(candidates)},
            )
            raise SuggestionServiceError() from None

        try:
            parsed = _LLMSuggestionJSON.model_validate(json.loads(text.strip()))
        except (ValueError, ValidationError):
            # Received but unusable: degrade to "no suggestions". Content is not logged.
            suggestion_requests_total.labels(outcome="unparseable").inc()
            logger.warning(
                "AI suggestion response could not be parsed",
                extra={"outcome": "unparseable", "candidate_count": len(candidates)},
            )
            return []

        identifiers = _filter_identifiers(raw=parsed.remedies, candidates=candidates)
        outcome = "suggested" if identifiers else "empty"
        suggestion_requests_total.labels(outcome=outcome).inc()
        logger.info(
            "AI suggestions generated",
            extra={
                "outcome": outcome,
                "candidate_count": len(candidates),
                "suggestion_count": len(identifiers),
            },
        )
        return identifiers
