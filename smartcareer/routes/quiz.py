# smartcareer/routes/quiz.py
from flask import Blueprint, request, jsonify, current_app
from smartcareer.services.errors import (
    TransientUpstreamError, UpstreamError,
    EmptyResponse, MalformedResponse,
)
from smartcareer.services.models import TOTAL_QUESTIONS

quiz_bp = Blueprint("quiz", __name__)

def _read_answers(payload):
    """Returns (answers, error_message)."""
    answers = payload.get("answers") if isinstance(payload, dict) else None
    if answers is None:
        return [], None
    if not isinstance(answers, list) or not all(isinstance(a, str) for a in answers):
        return None, "'answers' must be a list of strings."
    if len(answers) > TOTAL_QUESTIONS:
        return None, f"At most {TOTAL_QUESTIONS} answers are accepted."
    return answers, None

@quiz_bp.post("/quiz-next")
def quiz_next():
    try:
        payload = request.get_json(silent=True) or {}
        answers, problem = _read_answers(payload)
        if problem:
            return jsonify(error="bad_request", message=problem), 400

        quiz = current_app.config.get("QUIZ")
        if quiz is None:
            reason = current_app.config.get("QUIZ_CONFIG_ERROR") or "Quiz is not configured."
            return jsonify(error="config_error", message=reason), 500

        try:
            outcome = quiz.get_next_step(answers)
        except TransientUpstreamError as e:
            current_app.logger.error("Quiz AI still unavailable after %d attempts", e.attempts)
            return jsonify(error="ai_unavailable", message="AI service is busy. Please try again shortly.",
                           status=e.status), 503
        except UpstreamError as e:
            current_app.logger.error("Quiz AI provider error %s: %s", e.status, e.body[:300])
            return jsonify(error="ai_error", message="AI service error", status=e.status), 502
        except EmptyResponse:
            current_app.logger.error("Quiz AI returned an empty completion")
            return jsonify(error="empty_response", message="Empty response from AI"), 502
        except MalformedResponse as e:
            current_app.logger.error("Quiz AI returned malformed output: %s | raw=%r", e, e.raw[:300])
            return jsonify(error="malformed_response", message=str(e)), 502

        return jsonify(outcome.to_dict())

    except Exception:
        current_app.logger.exception("Unhandled error in /quiz-next")
        return jsonify(error="server_error", message="Something went wrong on our side. Please try again."), 500
