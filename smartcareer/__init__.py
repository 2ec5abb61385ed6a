# smartcareer/__init__.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import get_config
from .extensions import init_quiz
from .routes import register_routes

def create_app(env: str | None = None, quiz=None) -> Flask:
    """
    App factory. Pass `quiz` (anything with get_next_step(answers)) to skip
    building the OpenRouter-backed orchestrator, e.g. in tests.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    # CORS & logging
    CORS(
        app,
        origins=app.config["CORS_ORIGINS"] or "*",
        send_wildcard=not app.config["CORS_ORIGINS"],
        allow_headers=app.config["CORS_ALLOW_HEADERS"],
        methods=["GET", "POST", "OPTIONS"],
    )
    logging.basicConfig(level=logging.INFO)

    # Quiz orchestrator (None + reason when credentials are missing)
    if quiz is not None:
        app.config["QUIZ"], app.config["QUIZ_CONFIG_ERROR"] = quiz, None
    else:
        app.config["QUIZ"], app.config["QUIZ_CONFIG_ERROR"] = init_quiz(app.config)

    # ---------- Blueprints ----------
    register_routes(app)

    @app.get("/healthz")
    def health():
        return {
            "ok": True,
            "ts": datetime.now(timezone.utc).isoformat(),
            "quiz": "ready" if app.config["QUIZ"] is not None else "unconfigured",
        }

    # --- Error Handler ---#
    @app.errorhandler(HTTPException)
    def _eh_http(e):
        code = (e.name or "error").lower().replace(" ", "_")
        return jsonify(error=code, message=e.description), e.code

    return app
