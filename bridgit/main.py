from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from bridgit import catalog, engine
from bridgit.engine import OnboardingError, UnknownTopic
from bridgit.session import Session
from bridgit.state import OnboardingState, ProfileForm, Screen


app = FastAPI(title="Bridgit")
session = Session()


class LanguageRequest(BaseModel):
    language: str = Field(min_length=1)


class CategoryRequest(BaseModel):
    category: str


def _view(state: OnboardingState) -> dict[str, Any]:
    screen = engine.resolve_screen(state)
    return {
        "screen": screen.value,
        "profile_step": engine.profile_step(state) if screen is Screen.PROFILE_AND_PREFERENCES else None,
        "selected_language": state.selected_language,
        "has_selected_language": state.has_selected_language,
        "is_profile_complete": state.is_profile_complete,
        "profile": state.profile.model_dump(mode="json") if state.profile else None,
        "selected_categories": sorted(state.selected_categories),
        "can_confirm_personalization": engine.can_confirm_personalization(state),
    }


def _dispatch(action: dict[str, Any]) -> dict[str, Any]:
    try:
        state = session.dispatch(action)
    except OnboardingError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _view(state)


def _require_home() -> OnboardingState:
    state = session.state
    if engine.resolve_screen(state) is not Screen.HOME:
        raise HTTPException(status_code=409, detail="Finish onboarding first")
    return state


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/catalog")
def get_catalog() -> dict[str, Any]:
    return catalog.as_dict()


@app.post("/session")
def start() -> dict[str, Any]:
    return _view(session.restart())


@app.get("/state")
def get_state() -> dict[str, Any]:
    return _view(session.state)


@app.post("/language")
def confirm_language(req: LanguageRequest) -> dict[str, Any]:
    return _dispatch({"kind": "confirm_language", "language": req.language})


@app.post("/profile")
def commit_profile(form: ProfileForm) -> dict[str, Any]:
    return _dispatch({"kind": "commit_profile", "form": form.model_dump(mode="json")})


@app.post("/categories/toggle")
def toggle_category(req: CategoryRequest) -> dict[str, Any]:
    return _dispatch({"kind": "toggle_category", "category": req.category})


@app.post("/personalization/confirm")
def confirm_personalization() -> dict[str, Any]:
    return _dispatch({"kind": "confirm_personalization"})


@app.get("/topics")
def topics(query: str | None = None) -> dict[str, Any]:
    _require_home()
    return {
        "bridge_topics": engine.filter_topics(catalog.BRIDGE_TOPICS, query),
        "learn_topics": list(catalog.LEARN_TOPICS),
    }


@app.get("/topics/{topic}")
def topic_detail(topic: str) -> dict[str, Any]:
    _require_home()
    try:
        sections = engine.topic_sections(topic)
    except UnknownTopic as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"topic": topic, "sections": sections}


@app.get("/account")
def account() -> dict[str, str]:
    return engine.account_summary(_require_home())
