# smartcareer/services/quiz.py
"""
Career quiz orchestrator.

Given the answers collected so far, ask the model for either the next
question or the final career results. Stateless per call: the caller keeps
the answer history (see services/session.py) and calls get_next_step again
after each selection.
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Protocol, Sequence

from .ai import ChatCompletionClient
from .errors import ConfigurationError
from .llm_json import parse_outcome
from .models import QuizOutcome
from .prompts import build_messages
from .retry import RetryPolicy, call_with_retry

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "sk-"


class CompletionClient(Protocol):
    def complete(self, messages: list[dict[str, str]]) -> str: ...


@dataclass(frozen=True)
class QuizSettings:
    api_key: str
    base_url: str = "https://openrouter.ai/api/v1"
    model: str = "deepseek/deepseek-r1-0528:free"
    max_tokens: int = 512
    temperature: Optional[float] = 0.5
    max_retries: int = 5
    retry_delay: float = 6.0
    request_timeout: float = 60.0
    referer: str = ""
    title: str = ""

    @classmethod
    def from_config(cls, config: Mapping) -> "QuizSettings":
        """Build from a Flask config (or any mapping with the same keys)."""
        return cls(
            api_key=(config.get("OPENROUTER_API_KEY") or "").strip(),
            base_url=config.get("OPENROUTER_BASE_URL") or cls.base_url,
            model=config.get("QUIZ_MODEL") or cls.model,
            max_tokens=int(config.get("QUIZ_MAX_TOKENS", cls.max_tokens)),
            temperature=config.get("QUIZ_TEMPERATURE", cls.temperature),
            max_retries=int(config.get("QUIZ_MAX_RETRIES", cls.max_retries)),
            retry_delay=float(config.get("QUIZ_RETRY_DELAY", cls.retry_delay)),
            request_timeout=float(config.get("QUIZ_REQUEST_TIMEOUT", cls.request_timeout)),
            referer=config.get("APP_REFERER") or "",
            title=config.get("APP_TITLE") or "",
        )

    def validate(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                "OPENROUTER_API_KEY is not set. Get a key at https://openrouter.ai/keys"
            )
        if not self.api_key.startswith(API_KEY_PREFIX):
            raise ConfigurationError(
                f"OPENROUTER_API_KEY looks malformed (expected it to start with '{API_KEY_PREFIX}')"
            )
        if self.max_retries < 0:
            raise ConfigurationError("QUIZ_MAX_RETRIES must be >= 0")
        if self.retry_delay < 0:
            raise ConfigurationError("QUIZ_RETRY_DELAY must be >= 0")

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_retries=self.max_retries, delay=self.retry_delay)


class QuizOrchestrator:
    def __init__(
        self,
        settings: QuizSettings,
        client: CompletionClient,
        sleep: Callable[[float], None] = time.sleep,
    ):
        settings.validate()
        self.settings = settings
        self.client = client
        self.sleep = sleep

    def get_next_step(self, answers: Sequence[str]) -> QuizOutcome:
        """
        Return the next QuizQuestion (0-4 answers) or the CareerRecommendationSet
        (5 answers). Raises a QuizError subclass when no outcome can be produced.
        """
        answers = list(answers)
        messages = build_messages(answers)

        text = call_with_retry(
            lambda: self.client.complete(messages),
            self.settings.retry_policy,
            sleep=self.sleep,
        )
        outcome = parse_outcome(text, len(answers))
        logger.info("Quiz step after %d answers -> %s", len(answers), outcome.kind)
        return outcome


def build_orchestrator(settings: QuizSettings, sleep: Callable[[float], None] = time.sleep) -> QuizOrchestrator:
    """Validate settings, then wire an OpenAI SDK client pointed at settings.base_url."""
    settings.validate()
    from ..extensions import init_openai

    client = ChatCompletionClient(
        init_openai(settings),
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
    )
    return QuizOrchestrator(settings, client, sleep=sleep)


__all__ = ["API_KEY_PREFIX", "QuizSettings", "QuizOrchestrator", "build_orchestrator"]
