from __future__ import annotations

import pytest

from app.suggestions.schemas import CandidateItem


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    # Never let a developer's real key leak into tests.
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    # Settings and the Gemini handle are cached via @lru_cache; clear per test.
    from app.core.llm.deps import get_gemini_client
    from app.core.settings import get_settings

    get_settings.cache_clear()
    get_gemini_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_gemini_client.cache_clear()


@pytest.fixture
def candidates() -> list[CandidateItem]:
    return [
        CandidateItem(name="Arnica montana", identifier="ARN"),
        CandidateItem(name="Nux vomica", identifier="NUX-V"),
        CandidateItem(name="Belladonna", identifier="BELL"),
    ]


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c
