from __future__ import annotations

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Liveness response; does not reflect AI service availability."""

    status: str = Field(
        description="`ok` means the API process is up. The AI key is not checked here.",
        examples=["ok"],
    )
