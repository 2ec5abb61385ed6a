# smartcareer/services/models.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Union

logger = logging.getLogger(__name__)

TOTAL_QUESTIONS = 5
CAREER_COUNT = 3
MATCH_MIN, MATCH_MAX = 75, 98
MIN_TAGS, MAX_TAGS = 2, 4

# ---------- Icons ----------

# icon key sent by the model -> Ionicons glyph shown by the app
ICON_MAP = {
    "brush":     "brush",
    "palette":   "color-palette",
    "people":    "people",
    "globe":     "globe",
    "business":  "business",
    "ribbon":    "ribbon",
    "flash":     "flash",
    "trophy":    "trophy",
    "construct": "construct",
    "target":    "locate",
    "handshake": "hand-left",
    "code":      "code",
    "analytics": "analytics",
}
FALLBACK_ICON = "ellipse"

def resolve_icon(key: str | None) -> str:
    return ICON_MAP.get((key or "").strip().lower(), FALLBACK_ICON)

# ---------- field helpers ----------

def _require_str(data: dict, name: str, *, allow_empty: bool = False) -> str:
    value = data.get(name)
    if not isinstance(value, str):
        raise ValueError(f"'{name}' must be a string")
    value = value.strip()
    if not value and not allow_empty:
        raise ValueError(f"'{name}' must not be empty")
    return value

def _require_list(data: dict, name: str) -> list:
    value = data.get(name)
    if not isinstance(value, list):
        raise ValueError(f"'{name}' must be a list")
    return value

# ---------- Question ----------

@dataclass(frozen=True)
class QuizOption:
    id: str
    label: str
    icon: str = ""

    @property
    def icon_name(self) -> str:
        return resolve_icon(self.icon)

    @classmethod
    def from_dict(cls, data, position: int) -> "QuizOption":
        if not isinstance(data, dict):
            raise ValueError(f"option {position + 1} must be an object")
        raw_id = data.get("id")
        opt_id = str(raw_id).strip() if raw_id not in (None, "") else chr(ord("a") + position)
        icon = data.get("icon")
        return cls(
            id=opt_id,
            label=_require_str(data, "label"),
            icon=icon.strip() if isinstance(icon, str) else "",
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "icon": self.icon}


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    question_number: int
    options: tuple[QuizOption, ...]
    total_questions: int = TOTAL_QUESTIONS

    kind = "question"

    @classmethod
    def from_dict(cls, data: dict, expected_number: int) -> "QuizQuestion":
        text = _require_str(data, "question")
        raw_options = _require_list(data, "options")
        if not raw_options:
            raise ValueError("'options' must not be empty")
        options = tuple(QuizOption.from_dict(o, i) for i, o in enumerate(raw_options))

        number = data.get("questionNumber")
        if number != expected_number:
            logger.warning("Model sent questionNumber=%r, expected %d; using %d",
                           number, expected_number, expected_number)
        return cls(question=text, question_number=expected_number, options=options)

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "question": self.question,
            "questionNumber": self.question_number,
            "totalQuestions": self.total_questions,
            "options": [o.to_dict() for o in self.options],
        }

# ---------- Results ----------

@dataclass(frozen=True)
class CareerRecommendation:
    title: str
    description: str
    match_percent: int
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data, position: int) -> "CareerRecommendation":
        if not isinstance(data, dict):
            raise ValueError(f"career {position + 1} must be an object")

        pct = data.get("matchPercent")
        if isinstance(pct, bool) or not isinstance(pct, (int, float)) or not math.isfinite(pct):
            raise ValueError(f"career {position + 1}: 'matchPercent' must be a finite number")
        pct = min(MATCH_MAX, max(MATCH_MIN, int(round(pct))))

        raw_tags = _require_list(data, "tags")
        if not all(isinstance(t, str) for t in raw_tags):
            raise ValueError(f"career {position + 1}: 'tags' must be strings")
        tags = tuple(t.strip() for t in raw_tags if t.strip())[:MAX_TAGS]
        if len(tags) < MIN_TAGS:
            raise ValueError(f"career {position + 1}: expected at least {MIN_TAGS} tags")

        description = data.get("description", "")
        if description is None:
            description = ""
        if not isinstance(description, str):
            raise ValueError(f"career {position + 1}: 'description' must be a string")

        return cls(
            title=_require_str(data, "title"),
            description=description.strip(),
            match_percent=pct,
            tags=tags,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "matchPercent": self.match_percent,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class CareerRecommendationSet:
    careers: tuple[CareerRecommendation, ...]

    kind = "results"

    @classmethod
    def from_dict(cls, data: dict) -> "CareerRecommendationSet":
        raw = _require_list(data, "careers")
        if len(raw) < CAREER_COUNT:
            raise ValueError(f"expected {CAREER_COUNT} careers, got {len(raw)}")
        if len(raw) > CAREER_COUNT:
            logger.info("Model sent %d careers; keeping the first %d", len(raw), CAREER_COUNT)
        return cls(careers=tuple(
            CareerRecommendation.from_dict(c, i) for i, c in enumerate(raw[:CAREER_COUNT])
        ))

    def to_dict(self) -> dict:
        return {"type": self.kind, "careers": [c.to_dict() for c in self.careers]}


QuizOutcome = Union[QuizQuestion, CareerRecommendationSet]

__all__ = [
    "TOTAL_QUESTIONS", "ICON_MAP", "FALLBACK_ICON", "resolve_icon",
    "QuizOption", "QuizQuestion", "CareerRecommendation", "CareerRecommendationSet",
    "QuizOutcome",
]
