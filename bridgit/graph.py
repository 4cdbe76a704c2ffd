from typing import Annotated, Literal, Union

from langgraph.graph import END, StateGraph
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from bridgit import engine
from bridgit.engine import OnboardingError
from bridgit.state import OnboardingState, ProfileForm


class ConfirmLanguage(BaseModel):
    kind: Literal["confirm_language"] = "confirm_language"
    language: str


class CommitProfile(BaseModel):
    kind: Literal["commit_profile"] = "commit_profile"
    form: ProfileForm


class ToggleCategory(BaseModel):
    kind: Literal["toggle_category"] = "toggle_category"
    category: str


class ConfirmPersonalization(BaseModel):
    kind: Literal["confirm_personalization"] = "confirm_personalization"


Action = Annotated[
    Union[ConfirmLanguage, CommitProfile, ToggleCategory, ConfirmPersonalization],
    Field(discriminator="kind"),
]
_ACTIONS = TypeAdapter(Action)


def classify(state: OnboardingState) -> OnboardingState:
    raw = state.pending_action
    if not raw:
        raise OnboardingError("No action to apply.")
    try:
        action = _ACTIONS.validate_python(raw)
    except ValidationError as exc:
        raise OnboardingError(f"Invalid action: {exc.errors()[0].get('msg')}") from exc

    state.last_action = action.model_dump(mode="json")
    return state


def mutate(state: OnboardingState) -> OnboardingState:
    action = _ACTIONS.validate_python(state.last_action)

    if isinstance(action, ConfirmLanguage):
        state = engine.confirm_language(state, action.language)
    elif isinstance(action, CommitProfile):
        state = engine.commit_profile(state, action.form)
    elif isinstance(action, ToggleCategory):
        state = engine.toggle_category(state, action.category)
    else:
        state = engine.confirm_personalization(state)

    state.pending_action = None
    state.last_action = None
    return state


builder = StateGraph(OnboardingState)
builder.add_node("classify", classify)
builder.add_node("mutate", mutate)

builder.set_entry_point("classify")
builder.add_edge("classify", "mutate")
builder.add_edge("mutate", END)

app_graph = builder.compile()


def apply_action(state: OnboardingState, action: dict) -> OnboardingState:
    state = state.model_copy(deep=True)
    state.pending_action = action
    state.last_action = None
    result = app_graph.invoke(state)
    if not isinstance(result, OnboardingState):
        result = OnboardingState.model_validate(result)
    return result
