from __future__ import annotations

from collections.abc import Sequence

from app.suggestions.schemas import CandidateItem


def format_candidate_lines(candidates: Sequence[CandidateItem]) -> str:
    return "\n".join(f"- {c.name} ({c.identifier})" for c in candidates)


def build_suggestion_prompt(*, query: str, candidates: Sequence[CandidateItem]) -> str:
    """
    Create the single prompt sent to the model.

    The query is embedded verbatim. The model is limited to the listed
    identifiers and told to answer with JSON only: {"remedies": [...]}.
    """

    return "\n".join(
        [
            "You are an expert in homeopathy. Based on the following symptoms, "
            "suggest the most relevant remedies.",
            "",
            f'Symptoms: "{query}"',
            "",
            "Refer ONLY to the following list of available remedies and provide your answer "
            'as a JSON object with a single key "remedies" which contains an array of the '
            'remedy abbreviations. For example: {"remedies": ["ARN", "NUX-V"]}.',
            "If no remedies seem appropriate, return an empty array within the JSON object. "
            "Do not include any explanation.",
            "",
            "Available Remedies:",
            format_candidate_lines(candidates),
        ]
    )
