from __future__ import annotations

import json
import logging

from app.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.suggestions",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="AI suggestions generated",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_tolerates_missing_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload["message"] == "AI suggestions generated"
    assert payload["level"] == "INFO"
    assert payload["request_id"] is None
    assert "outcome" not in payload


def test_formatter_includes_suggestion_metadata() -> None:
    payload = json.loads(
        JsonFormatter().format(
            _record(outcome="suggested", candidate_count=3, suggestion_count=2, http_method="POST")
        )
    )

    assert payload["outcome"] == "suggested"
    assert payload["candidate_count"] == 3
    assert payload["suggestion_count"] == 2
    assert payload["method"] == "POST"
