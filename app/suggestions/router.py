from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.llm.deps import get_gemini_client
from app.core.llm.gemini_client import GeminiClient
from app.suggestions.schemas import SuggestionRequest, SuggestionsOut
from app.suggestions.service import SuggestionAdapter

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


def get_suggestion_adapter(
    client: GeminiClient | None = Depends(get_gemini_client),
) -> SuggestionAdapter:
    return SuggestionAdapter(client=client)


@router.post(
    "",
    response_model=SuggestionsOut,
    summary="Suggest remedies for a symptom description",
    description=(
        "Asks the AI service which of the supplied candidates match the symptoms.\n\n"
        "Returns an empty list when nothing matches or the service answer could not be "
        "understood. Returns 503 when no API key is configured and 502 when the service "
        "call fails."
    ),
    responses={
        502: {"description": "AI service call failed"},
        503: {"description": "AI service not configured"},
    },
)
async def create_suggestions(
    payload: SuggestionRequest,
    adapter: SuggestionAdapter = Depends(get_suggestion_adapter),
) -> SuggestionsOut:
    # ConfigurationError / SuggestionServiceError are mapped in app.api.exception_handlers.
    identifiers = await adapter.suggest(payload.query, payload.candidates)
    return SuggestionsOut(identifiers=identifiers)
