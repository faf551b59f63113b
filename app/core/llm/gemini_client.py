from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types

GEMINI_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = GEMINI_MODEL


class GeminiClient:
    """
    Minimal Gemini client focused on schema-constrained JSON output.

    Design notes:
    - No logging in this module (prompts/outputs may contain health data).
    - Stateless requests; the SDK client is created once and reused.
    - Returns the raw response text. Callers parse and validate it, since the
      schema directive is a request to the service, not a guarantee.
    - SDK exceptions propagate unchanged; callers decide how to surface them.
    """

    def __init__(self, *, config: GeminiConfig, sdk_client: genai.Client | None = None):
        self._config = config
        self._sdk = sdk_client or genai.Client(api_key=config.api_key)

    @property
    def model(self) -> str:
        return self._config.model

    async def generate_json_text(self, *, prompt: str, response_schema: dict[str, Any]) -> str:
        response = await self._sdk.aio.models.generate_content(
            model=self._config.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
            ),
        )
        return response.text or ""
