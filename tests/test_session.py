# tests/test_session.py
import pytest

from smartcareer.services.errors import MalformedResponse
from smartcareer.services.session import QuizSession, QuizState


def test_full_quiz_flow(make_orchestrator, question_json, results_json):
    replies = [question_json(n) for n in range(1, 6)] + [results_json()]
    quiz, client = make_orchestrator(*replies)
    session = QuizSession(quiz)
    assert session.state is QuizState.AWAITING_FIRST_QUESTION

    session.start()
    for n in range(1, 6):
        assert session.state is QuizState.AWAITING_ANSWER
        assert session.question.question_number == n
        assert session.progress == (n - 1) * 20
        session.answer(session.question.options[0].label)

    assert session.state is QuizState.RESULTS
    assert session.progress == 100
    assert len(session.results.careers) == 3
    assert session.answers == ("Drawing and design",) * 5
    assert len(client.calls) == 6


def test_answer_requires_pending_question(make_orchestrator):
    session = QuizSession(make_orchestrator()[0])
    with pytest.raises(ValueError):
        session.answer("Helping people")


def test_blank_answer_rejected(make_orchestrator, question_json):
    session = QuizSession(make_orchestrator(question_json(1))[0])
    session.start()
    with pytest.raises(ValueError):
        session.answer("   ")
    assert session.answers == ()


def test_failed_step_keeps_answer_and_retry_resumes(make_orchestrator, question_json):
    quiz, client = make_orchestrator(question_json(1), "not json", question_json(2))
    session = QuizSession(quiz)
    session.start()

    with pytest.raises(MalformedResponse):
        session.answer("Travelling")
    assert isinstance(session.last_error, MalformedResponse)
    assert session.answers == ("Travelling",)
    assert session.question is None

    session.retry()
    assert session.last_error is None
    assert session.question.question_number == 2
    assert '["Travelling"]' in client.calls[-1][1]["content"]


def test_restart_clears_progress(make_orchestrator, question_json, results_json):
    replies = [question_json(n) for n in range(1, 6)] + [results_json(), question_json(1)]
    session = QuizSession(make_orchestrator(*replies)[0])
    session.start()
    for _ in range(5):
        session.answer("Helping people")
    with pytest.raises(ValueError):
        session.answer("one more")

    session.restart()
    assert session.answers == ()
    assert session.results is None
    assert session.question.question_number == 1
