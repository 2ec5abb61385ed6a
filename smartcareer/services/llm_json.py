# smartcareer/services/llm_json.py
"""Turn the model's completion text into a QuizOutcome."""
from __future__ import annotations
import json

from .errors import MalformedResponse
from .models import (
    TOTAL_QUESTIONS, QuizOutcome, QuizQuestion, CareerRecommendationSet,
)

FENCE = "```"


def strip_code_fence(text: str) -> str:
    """
    Return the body of the first ``` fenced block (minus a leading 'json' tag),
    or the text unchanged when there is no complete fence.
    """
    start = text.find(FENCE)
    if start < 0:
        return text
    end = text.find(FENCE, start + len(FENCE))
    if end < 0:
        return text
    body = text[start + len(FENCE):end].strip()
    if body.startswith("json"):
        body = body[4:].strip()
    return body


def load_json_object(text: str) -> dict:
    try:
        data = json.loads(strip_code_fence(text))
    except ValueError as e:
        raise MalformedResponse(f"AI response is not valid JSON: {e}", raw=text) from e
    if not isinstance(data, dict):
        raise MalformedResponse("AI response is not a JSON object", raw=text)
    return data


def parse_outcome(text: str, answer_count: int) -> QuizOutcome:
    data = load_json_object(text)
    kind = data.get("type")
    expected = "results" if answer_count >= TOTAL_QUESTIONS else "question"

    if kind not in ("question", "results"):
        raise MalformedResponse(f"Unknown response type: {kind!r}", raw=text)
    if kind != expected:
        raise MalformedResponse(
            f"Expected a {expected!r} response after {answer_count} answers, got {kind!r}",
            raw=text,
        )

    try:
        if kind == "question":
            return QuizQuestion.from_dict(data, expected_number=answer_count + 1)
        return CareerRecommendationSet.from_dict(data)
    except ValueError as e:
        raise MalformedResponse(f"Unexpected {kind} shape: {e}", raw=text) from e


__all__ = ["strip_code_fence", "load_json_object", "parse_outcome"]
