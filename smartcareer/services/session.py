# smartcareer/services/session.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from .models import (
    TOTAL_QUESTIONS, QuizOutcome, QuizQuestion, CareerRecommendationSet,
)


class QuizState(str, Enum):
    AWAITING_FIRST_QUESTION = "awaiting_first_question"
    AWAITING_ANSWER = "awaiting_answer"
    RESULTS = "results"


class QuizSession:
    """
    Caller-side quiz progress: the answers so far plus whatever the orchestrator
    returned last. Errors propagate; they are also kept on last_error so a UI
    can show them next to a retry action.
    """

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator
        self._answers: list[str] = []
        self.question: Optional[QuizQuestion] = None
        self.results: Optional[CareerRecommendationSet] = None
        self.last_error: Optional[Exception] = None

    @property
    def answers(self) -> tuple[str, ...]:
        return tuple(self._answers)

    @property
    def state(self) -> QuizState:
        if self.results is not None:
            return QuizState.RESULTS
        if self.question is None and not self._answers:
            return QuizState.AWAITING_FIRST_QUESTION
        return QuizState.AWAITING_ANSWER

    @property
    def progress(self) -> float:
        return len(self._answers) / TOTAL_QUESTIONS * 100

    def start(self) -> QuizOutcome:
        return self._load_next()

    def answer(self, text: str) -> QuizOutcome:
        if self.results is not None:
            raise ValueError("Quiz already finished; restart to play again")
        if self.question is None:
            raise ValueError("No question is waiting for an answer")
        text = (text or "").strip()
        if not text:
            raise ValueError("Answer must not be empty")
        self._answers.append(text)
        self.question = None
        return self._load_next()

    def retry(self) -> QuizOutcome:
        return self._load_next()

    def restart(self) -> QuizOutcome:
        self._answers.clear()
        self.question = None
        self.results = None
        return self._load_next()

    def _load_next(self) -> QuizOutcome:
        self.last_error = None
        try:
            outcome = self.orchestrator.get_next_step(self.answers)
        except Exception as e:
            self.last_error = e
            raise

        if isinstance(outcome, CareerRecommendationSet):
            self.question, self.results = None, outcome
        else:
            self.question, self.results = outcome, None
        return outcome


__all__ = ["QuizState", "QuizSession"]
