"""
Pytest configuration and fixtures for Bridgit tests.
"""

import pytest
from fastapi.testclient import TestClient

from bridgit import main
from bridgit.state import OnboardingState, Profile, ProfileForm


@pytest.fixture
def fresh_state():
    """State as created at the start of a session."""
    return OnboardingState()


@pytest.fixture
def language_state():
    """State right after the language screen was confirmed."""
    return OnboardingState(selected_language="Spanish", has_selected_language=True)


@pytest.fixture
def profile_state(language_state):
    """State on the personalization step: profile committed, no categories yet."""
    language_state.profile = Profile(name="Ana", state="Texas")
    return language_state


@pytest.fixture
def ana_form():
    return ProfileForm(
        name="Ana",
        years_in_us="3+",
        state="Texas",
        answers={"tech_comfort": "Beginner"},
    )


@pytest.fixture
def client():
    """HTTP client bound to a freshly restarted session."""
    main.session.restart()
    with TestClient(main.app) as test_client:
        yield test_client
    main.session.restart()
