"""LLM integration layer.

This package is intentionally small and conservative:
- No prompt/output logging (symptom descriptions are health data).
- Configured once at startup from the environment.
- Treated as a pure/stateless function by callers.
"""
