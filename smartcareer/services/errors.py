# smartcareer/services/errors.py
from __future__ import annotations
from typing import Optional


class QuizError(Exception):
    """Base class for everything the quiz orchestrator can raise."""


class ConfigurationError(QuizError):
    """Missing or malformed credentials. Raised before any network call."""


class UpstreamError(QuizError):
    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class TransientUpstreamError(UpstreamError):
    """Retryable failure that outlived the retry budget."""

    def __init__(self, message: str, attempts: int, last_error: Optional[Exception] = None):
        status = getattr(last_error, "status", None)
        body = getattr(last_error, "body", "")
        super().__init__(message, status=status, body=body)
        self.attempts = attempts
        self.last_error = last_error


class EmptyResponse(QuizError):
    pass


class MalformedResponse(QuizError):
    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


__all__ = [
    "QuizError", "ConfigurationError", "UpstreamError", "TransientUpstreamError",
    "EmptyResponse", "MalformedResponse",
]
