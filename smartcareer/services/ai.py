# smartcareer/services/ai.py
from __future__ import annotations
import logging
from typing import Optional

import openai

from .errors import UpstreamError, EmptyResponse

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """
    One chat completion per call against an OpenAI-compatible endpoint
    (OpenRouter by default). SDK failures come back as UpstreamError with the
    HTTP status attached so the retry policy can classify them.
    """

    def __init__(self, client: "openai.OpenAI", model: str, max_tokens: int = 512,
                 temperature: Optional[float] = 0.5):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    def complete(self, messages: list[dict[str, str]]) -> str:
        kwargs = dict(model=self.model, messages=messages, max_tokens=self.max_tokens)
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        try:
            resp = self.client.chat.completions.create(**kwargs)
        except openai.APIStatusError as e:
            body = _response_text(e)
            logger.warning("AI provider error %s: %s", e.status_code, body[:150])
            raise UpstreamError(f"AI service error {e.status_code}: {body[:150]}",
                                status=e.status_code, body=body) from e
        except openai.OpenAIError as e:
            logger.warning("AI provider request failed: %s", e)
            raise UpstreamError(f"AI service request failed: {e}") from e

        choices = getattr(resp, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise EmptyResponse("Empty response from AI")
        return content.strip()


def _response_text(err: "openai.APIStatusError") -> str:
    try:
        return err.response.text or str(err)
    except Exception:
        return str(err)


__all__ = ["ChatCompletionClient"]
