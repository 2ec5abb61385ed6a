# tests/test_llm_json.py
import json
import pytest

from conftest import question_payload, results_payload
from smartcareer.services.errors import MalformedResponse
from smartcareer.services.llm_json import strip_code_fence, load_json_object, parse_outcome
from smartcareer.services.models import QuizQuestion, CareerRecommendationSet


@pytest.mark.parametrize("wrapped", [
    '```json\n{"type": "results"}\n```',
    '```\n{"type": "results"}\n```',
    'Sure! Here it is:\n```json {"type": "results"} ```\nGood luck.',
])
def test_fence_is_stripped(wrapped):
    assert strip_code_fence(wrapped) == '{"type": "results"}'


@pytest.mark.parametrize("text", ['{"a": 1}', "```json only an opening fence", ""])
def test_text_without_complete_fence_is_untouched(text):
    assert strip_code_fence(text) == text


def test_fenced_and_bare_parse_identically():
    raw = json.dumps(results_payload())
    assert load_json_object(f"```json\n{raw}\n```") == load_json_object(raw) == results_payload()


def test_not_json_keeps_raw_text():
    with pytest.raises(MalformedResponse) as exc:
        load_json_object("not json")
    assert exc.value.raw == "not json"


def test_json_array_is_rejected():
    with pytest.raises(MalformedResponse):
        load_json_object("[1, 2, 3]")


def test_question_and_results_are_discriminated():
    assert isinstance(parse_outcome(json.dumps(question_payload(2)), 1), QuizQuestion)
    assert isinstance(parse_outcome(json.dumps(results_payload()), 5), CareerRecommendationSet)


@pytest.mark.parametrize("payload", [{"type": "bogus"}, {"question": "no type"}, {"type": None}])
def test_missing_or_unknown_type_is_malformed(payload):
    with pytest.raises(MalformedResponse):
        parse_outcome(json.dumps(payload), 0)


def test_results_before_fifth_answer_is_malformed():
    with pytest.raises(MalformedResponse, match="Expected a 'question'"):
        parse_outcome(json.dumps(results_payload()), 3)


def test_question_after_fifth_answer_is_malformed():
    with pytest.raises(MalformedResponse, match="Expected a 'results'"):
        parse_outcome(json.dumps(question_payload(5)), 5)


def test_shape_errors_carry_raw_text():
    text = json.dumps(question_payload(1, options=[]))
    with pytest.raises(MalformedResponse) as exc:
        parse_outcome(text, 0)
    assert exc.value.raw == text
