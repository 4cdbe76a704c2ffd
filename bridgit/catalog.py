from __future__ import annotations

import json
from typing import Any

from bridgit.config import get_settings


def _load_catalog() -> dict[str, Any]:
    raw = json.loads(get_settings().catalog_path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Catalog must be a JSON object")
    return raw


CATALOG: dict[str, Any] = _load_catalog()

LANGUAGES: list[str] = [str(lang) for lang in CATALOG["languages"]]
US_STATES: list[str] = [str(s) for s in CATALOG["us_states"]]
YEARS_IN_US: list[dict[str, str]] = list(CATALOG["years_in_us"])
QUESTIONS: list[dict[str, Any]] = sorted(CATALOG["questions"], key=lambda q: q["order"])
QUESTIONS_BY_ID: dict[str, dict[str, Any]] = {q["id"]: q for q in QUESTIONS}
CATEGORIES: list[str] = [str(c) for c in CATALOG["categories"]]
MAX_CATEGORIES: int = int(CATALOG.get("max_categories", 3))
BRIDGE_TOPICS: list[str] = [str(t) for t in CATALOG["bridge_topics"]]
LEARN_TOPICS: list[str] = [str(t) for t in CATALOG["learn_topics"]]
TOPIC_SECTIONS: list[str] = [str(s) for s in CATALOG["topic_sections"]]


def get_question(question_id: str) -> dict[str, Any] | None:
    return QUESTIONS_BY_ID.get(question_id)


def as_dict() -> dict[str, Any]:
    return {
        "languages": LANGUAGES,
        "us_states": US_STATES,
        "years_in_us": YEARS_IN_US,
        "questions": QUESTIONS,
        "categories": CATEGORIES,
        "max_categories": MAX_CATEGORIES,
        "bridge_topics": BRIDGE_TOPICS,
        "learn_topics": LEARN_TOPICS,
    }
