# smartcareer/services/prompts.py
from __future__ import annotations
import json
from typing import Sequence

from .models import TOTAL_QUESTIONS, ICON_MAP

# Kept short: smaller prompts answer faster on the free tier models.
SYSTEM_PROMPT = f"""You are a Career quiz AI. Output ONLY valid JSON, no markdown.

If answers.length < {TOTAL_QUESTIONS}: return next question:
{{"type":"question","question":"...?","questionNumber":1-{TOTAL_QUESTIONS},"totalQuestions":{TOTAL_QUESTIONS},"options":[{{"id":"a","label":"...","icon":"brush"}},{{"id":"b","label":"...","icon":"people"}},{{"id":"c","label":"...","icon":"globe"}},{{"id":"d","label":"...","icon":"business"}}]}}
Icons: {", ".join(ICON_MAP)}.

If answers.length === {TOTAL_QUESTIONS}: return results:
{{"type":"results","careers":[{{"title":"...","description":"...","matchPercent":85,"tags":["Tag1","Tag2"]}},{{"title":"...","description":"...","matchPercent":82,"tags":["Tag1","Tag2"]}},{{"title":"...","description":"...","matchPercent":80,"tags":["Tag1","Tag2"]}}]}}
Exactly 3 careers, matchPercent 75-98, 2-4 tags each."""


def build_user_message(answers: Sequence[str]) -> str:
    if not answers:
        return "Start the quiz. Send the first question."
    so_far = f"User's answers so far: {json.dumps(list(answers), ensure_ascii=False)}."
    if len(answers) >= TOTAL_QUESTIONS:
        return f"{so_far} We have {TOTAL_QUESTIONS} answers. Return career results."
    return f"{so_far} Return question number {len(answers) + 1} (next question with 4 options)."


def build_messages(answers: Sequence[str]) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_message(answers)},
    ]
