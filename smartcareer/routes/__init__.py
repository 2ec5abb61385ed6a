from __future__ import annotations
from flask import Flask

def register_routes(app: Flask) -> None:
    from .quiz import quiz_bp

    app.register_blueprint(quiz_bp)

    # -------- Alias helper --------
    def alias_endpoint(source_ep: str, rule: str, alias_ep: str):
        if source_ep in app.view_functions and alias_ep not in app.view_functions:
            app.add_url_rule(rule, endpoint=alias_ep, view_func=app.view_functions[source_ep],
                             methods=["POST"])

    # Same path the mobile app used against the hosted edge function
    alias_endpoint("quiz.quiz_next", "/functions/v1/quiz-next", "quiz_next_fn")
