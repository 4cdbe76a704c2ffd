from enum import Enum
from typing import Any, Dict, Optional, Set

from pydantic import BaseModel, Field


class Screen(str, Enum):
    LANGUAGE_SELECT = "language_select"
    PROFILE_AND_PREFERENCES = "profile_and_preferences"
    HOME = "home"


class YearsInUS(str, Enum):
    LESS_THAN_1 = "Less than 1"
    THREE_PLUS = "3+"
    TEN_PLUS = "10+"


class Profile(BaseModel):
    name: str
    years_in_us: YearsInUS = YearsInUS.LESS_THAN_1
    state: str = "Alabama"
    preference_answers: Dict[str, str] = Field(default_factory=dict)


class OnboardingState(BaseModel):
    selected_language: str = "English"
    has_selected_language: bool = False
    is_profile_complete: bool = False

    profile: Optional[Profile] = None
    selected_categories: Set[str] = Field(default_factory=set)

    pending_action: Optional[Dict[str, Any]] = None
    last_action: Optional[Dict[str, Any]] = None


class ProfileForm(BaseModel):
    name: str = ""
    years_in_us: YearsInUS = YearsInUS.LESS_THAN_1
    state: str = "Alabama"
    answers: Dict[str, str] = Field(default_factory=dict)
