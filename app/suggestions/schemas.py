from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

REMEDIES_KEY = "remedies"

# Structured-output directive sent with every request. Type names follow the
# Gemini schema dialect (OBJECT/ARRAY/STRING).
SUGGESTION_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        REMEDIES_KEY: {
            "type": "ARRAY",
            "items": {
                "type": "STRING",
                "description": "The abbreviation of a suggested remedy.",
            },
            "description": "An array of suggested remedy abbreviations.",
        },
    },
    "required": [REMEDIES_KEY],
}


class CandidateItem(BaseModel):
    """A remedy the caller allows the service to choose from."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(examples=["Arnica montana"])
    identifier: str = Field(min_length=1, examples=["ARN"])


class SuggestionRequest(BaseModel):
    query: str = Field(
        description="Free-text symptom description. Never logged.",
        examples=["Bruised feeling after a fall, worse from touch"],
    )
    candidates: list[CandidateItem] = Field(
        description="Closed list of remedies the suggestions must come from.",
    )


class SuggestionsOut(BaseModel):
    identifiers: list[str] = Field(
        description=(
            "Identifiers judged relevant, in the order the service returned them. "
            "Always a subset of the request's candidate identifiers; may be empty."
        ),
        examples=[["ARN", "BELL"]],
    )


class _LLMSuggestionJSON(BaseModel):
    """
    Internal schema for the LLM response payload.

    Elements are left untyped so that one bad element drops only itself during
    filtering instead of invalidating the whole answer.
    """

    remedies: list[Any]
