# tests/conftest.py
import json
import pytest

from smartcareer.services.errors import UpstreamError
from smartcareer.services.quiz import QuizSettings, QuizOrchestrator


def question_payload(number=1, **extra):
    data = {
        "type": "question",
        "question": f"Question {number}: what do you enjoy most?",
        "questionNumber": number,
        "totalQuestions": 5,
        "options": [
            {"id": "a", "label": "Drawing and design", "icon": "brush"},
            {"id": "b", "label": "Helping people", "icon": "people"},
            {"id": "c", "label": "Travelling", "icon": "globe"},
            {"id": "d", "label": "Running a business", "icon": "business"},
        ],
    }
    data.update(extra)
    return data


def results_payload(**extra):
    data = {
        "type": "results",
        "careers": [
            {"title": "UX Designer", "description": "Design intuitive products.",
             "matchPercent": 92, "tags": ["Design", "Creative"]},
            {"title": "Product Manager", "description": "Lead product strategy.",
             "matchPercent": 85, "tags": ["Business", "Leadership", "Strategy"]},
            {"title": "Data Analyst", "description": "Turn data into insight.",
             "matchPercent": 78, "tags": ["Data", "SQL"]},
        ],
    }
    data.update(extra)
    return data


class FakeCompletionClient:
    """Replays scripted replies: strings are returned, exceptions raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, messages):
        self.calls.append(messages)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class RecordingSleep:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def settings():
    return QuizSettings(api_key="sk-or-test-key")


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_orchestrator(settings, sleep):
    def _make(*replies):
        client = FakeCompletionClient(*replies)
        return QuizOrchestrator(settings, client, sleep=sleep), client
    return _make


@pytest.fixture
def question_json():
    return lambda number=1, **extra: json.dumps(question_payload(number, **extra))


@pytest.fixture
def results_json():
    return lambda **extra: json.dumps(results_payload(**extra))


@pytest.fixture
def rate_limited():
    return lambda: UpstreamError("AI service error 429: rate limited", status=429)


@pytest.fixture
def fake_client():
    return FakeCompletionClient
