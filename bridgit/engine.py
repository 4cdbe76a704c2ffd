from __future__ import annotations

import logging
from typing import Literal

from bridgit import catalog
from bridgit.state import OnboardingState, Profile, ProfileForm, Screen

logger = logging.getLogger(__name__)

ProfileStep = Literal["profile", "personalization"]


class OnboardingError(ValueError):
    """Raised when a screen calls a commit operation whose precondition does not hold."""


class UnknownTopic(OnboardingError):
    pass


def resolve_screen(state: OnboardingState) -> Screen:
    if not state.has_selected_language:
        return Screen.LANGUAGE_SELECT
    if not state.is_profile_complete:
        return Screen.PROFILE_AND_PREFERENCES
    return Screen.HOME


def profile_step(state: OnboardingState) -> ProfileStep:
    return "profile" if state.profile is None else "personalization"


def confirm_language(state: OnboardingState, language: str) -> OnboardingState:
    language = (language or "").strip()
    if not language:
        raise OnboardingError("Language must not be empty.")
    state.selected_language = language
    state.has_selected_language = True
    logger.info("Language confirmed: %s", language)
    return state


def can_advance_from_profile(source: OnboardingState | ProfileForm | Profile) -> bool:
    # Preference answers are optional; only the name gates the Next button.
    if isinstance(source, OnboardingState):
        return source.profile is not None and bool(source.profile.name)
    return bool(source.name)


def select_preference(answers: dict[str, str], question_id: str, option: str) -> dict[str, str]:
    question = catalog.get_question(question_id)
    if not question:
        raise OnboardingError(f"Unknown question: {question_id}")
    options = [str(o) for o in (question.get("options") or [])]
    if option not in options:
        raise OnboardingError(f"Choose one of: {', '.join(options)}")
    answers[question_id] = option
    return answers


def commit_profile(state: OnboardingState, form: ProfileForm) -> OnboardingState:
    if not state.has_selected_language:
        raise OnboardingError("Select a language first.")
    if state.is_profile_complete:
        raise OnboardingError("Onboarding is already complete.")
    if not can_advance_from_profile(form):
        raise OnboardingError("Name is required.")
    if form.state not in catalog.US_STATES:
        raise OnboardingError(f"Unknown state: {form.state}")

    answers: dict[str, str] = {}
    for question_id, option in form.answers.items():
        select_preference(answers, question_id, option)

    state.profile = Profile(
        name=form.name,
        years_in_us=form.years_in_us,
        state=form.state,
        preference_answers=answers,
    )
    logger.info("Profile committed (%d preference answers)", len(answers))
    return state


def _require_personalization_step(state: OnboardingState) -> None:
    screen = resolve_screen(state)
    if screen is not Screen.PROFILE_AND_PREFERENCES:
        raise OnboardingError(f"Categories cannot be changed on the {screen.value} screen.")
    if profile_step(state) != "personalization":
        raise OnboardingError("Complete your profile first.")


def toggle_category(state: OnboardingState, category: str) -> OnboardingState:
    _require_personalization_step(state)
    if category not in catalog.CATEGORIES:
        raise OnboardingError(f"Unknown category: {category}")
    if category in state.selected_categories:
        state.selected_categories = state.selected_categories - {category}
    elif len(state.selected_categories) < catalog.MAX_CATEGORIES:
        state.selected_categories = state.selected_categories | {category}
    else:
        logger.debug("Ignoring %r, %d categories already selected", category, catalog.MAX_CATEGORIES)
    return state


def can_confirm_personalization(state: OnboardingState) -> bool:
    return len(state.selected_categories) >= 1


def confirm_personalization(state: OnboardingState) -> OnboardingState:
    _require_personalization_step(state)
    if not can_confirm_personalization(state):
        raise OnboardingError("Choose at least one category.")
    state.is_profile_complete = True
    logger.info("Onboarding complete: %s", ", ".join(sorted(state.selected_categories)))
    return state


def filter_topics(topics: list[str], query: str | None) -> list[str]:
    needle = (query or "").lower()
    if not needle:
        return list(topics)
    return [t for t in topics if needle in t.lower()]


def topic_sections(topic: str) -> list[str]:
    if topic not in catalog.BRIDGE_TOPICS and topic not in catalog.LEARN_TOPICS:
        raise UnknownTopic(f"Unknown topic: {topic}")
    return list(catalog.TOPIC_SECTIONS)


def account_summary(state: OnboardingState) -> dict[str, str]:
    profile = state.profile
    return {
        "name": profile.name if profile else "",
        "language": state.selected_language,
        "state": profile.state if profile else "",
    }
