# smartcareer/extensions.py
from __future__ import annotations
import logging
from openai import OpenAI

from smartcareer.services.errors import ConfigurationError
from smartcareer.services.quiz import QuizSettings, build_orchestrator

# 1) Small factory to build an OpenAI SDK client aimed at OpenRouter
def init_openai(settings: QuizSettings) -> OpenAI:
    headers = {}
    if settings.referer:
        headers["HTTP-Referer"] = settings.referer
    if settings.title:
        headers["X-Title"] = settings.title
    return OpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.request_timeout,
        max_retries=0,  # retries are ours (services/retry.py)
        default_headers=headers or None,
    )

# 2) Quiz orchestrator from app config; None when credentials are missing
def init_quiz(config) -> tuple[object | None, str | None]:
    """Returns (orchestrator, error_message)."""
    try:
        return build_orchestrator(QuizSettings.from_config(config)), None
    except ConfigurationError as e:
        logging.warning("Quiz disabled: %s", e)
        return None, str(e)
