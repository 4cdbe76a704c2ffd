"""
HTTP tests for the FastAPI surface.
"""


def _onboard(client, categories=("Banking",)):
    client.post("/language", json={"language": "Spanish"})
    client.post("/profile", json={"name": "Ana", "years_in_us": "10+", "state": "Texas"})
    for category in categories:
        client.post("/categories/toggle", json={"category": category})
    return client.post("/personalization/confirm")


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_catalog(self, client):
        body = client.get("/catalog").json()
        assert len(body["us_states"]) == 50
        assert body["max_categories"] == 3
        assert [q["id"] for q in body["questions"]] == ["help_format", "tech_comfort", "form_help_frequency"]


class TestOnboardingFlow:

    def test_initial_state(self, client):
        body = client.get("/state").json()
        assert body["screen"] == "language_select"
        assert body["selected_language"] == "English"
        assert body["profile_step"] is None

    def test_language_confirm(self, client):
        body = client.post("/language", json={"language": "Spanish"}).json()
        assert body["screen"] == "profile_and_preferences"
        assert body["profile_step"] == "profile"
        assert body["selected_language"] == "Spanish"

    def test_empty_language_is_unprocessable(self, client):
        assert client.post("/language", json={"language": ""}).status_code == 422
        assert client.post("/language", json={"language": "  "}).status_code == 409
        assert client.get("/state").json()["screen"] == "language_select"

    def test_profile_requires_name(self, client):
        client.post("/language", json={"language": "Spanish"})
        resp = client.post("/profile", json={"name": "", "answers": {"tech_comfort": "Beginner"}})
        assert resp.status_code == 409
        assert client.get("/state").json()["profile"] is None

    def test_profile_commit(self, client):
        client.post("/language", json={"language": "Spanish"})
        body = client.post(
            "/profile",
            json={"name": "Ana", "years_in_us": "3+", "state": "Ohio", "answers": {"help_format": "Visual guides"}},
        ).json()
        assert body["profile_step"] == "personalization"
        assert body["profile"]["preference_answers"] == {"help_format": "Visual guides"}
        assert body["can_confirm_personalization"] is False

    def test_invalid_years_is_unprocessable(self, client):
        client.post("/language", json={"language": "Spanish"})
        assert client.post("/profile", json={"name": "Ana", "years_in_us": "5"}).status_code == 422

    def test_category_limit(self, client):
        client.post("/language", json={"language": "Spanish"})
        client.post("/profile", json={"name": "Ana"})
        for category in ["Banking", "Housing", "Taxes & money"]:
            client.post("/categories/toggle", json={"category": category})
        body = client.post("/categories/toggle", json={"category": "Communication"}).json()
        assert body["selected_categories"] == ["Banking", "Housing", "Taxes & money"]

    def test_confirm_without_categories_conflicts(self, client):
        client.post("/language", json={"language": "Spanish"})
        client.post("/profile", json={"name": "Ana"})
        assert client.post("/personalization/confirm").status_code == 409
        assert client.get("/state").json()["screen"] == "profile_and_preferences"

    def test_reaches_home(self, client):
        body = _onboard(client).json()
        assert body["screen"] == "home"
        assert body["is_profile_complete"] is True

    def test_new_session_starts_over(self, client):
        _onboard(client)
        body = client.post("/session").json()
        assert body["screen"] == "language_select"
        assert body["selected_categories"] == []


class TestHome:

    def test_topics_locked_before_home(self, client):
        assert client.get("/topics").status_code == 409
        assert client.get("/account").status_code == 409

    def test_topics_search(self, client):
        _onboard(client)
        body = client.get("/topics", params={"query": "hous"}).json()
        assert body["bridge_topics"] == ["Housing"]
        assert len(body["learn_topics"]) == 8

    def test_topic_detail(self, client):
        _onboard(client)
        assert client.get("/topics/Banking").json()["sections"] == ["Overview", "Step-by-Step", "FAQ"]
        assert client.get("/topics/Cooking").status_code == 404

    def test_account(self, client):
        _onboard(client)
        assert client.get("/account").json() == {"name": "Ana", "language": "Spanish", "state": "Texas"}


class TestFlowOrder:

    def test_toggle_before_language_conflicts(self, client):
        assert client.post("/categories/toggle", json={"category": "Banking"}).status_code == 409
        assert client.get("/state").json()["selected_categories"] == []

    def test_confirm_without_profile_conflicts(self, client):
        client.post("/language", json={"language": "Spanish"})
        assert client.post("/categories/toggle", json={"category": "Banking"}).status_code == 409
        assert client.post("/personalization/confirm").status_code == 409
        body = client.get("/state").json()
        assert body["screen"] == "profile_and_preferences"
        assert body["profile"] is None

    def test_home_keeps_categories(self, client):
        _onboard(client)
        assert client.post("/categories/toggle", json={"category": "Banking"}).status_code == 409
        assert client.get("/state").json()["selected_categories"] == ["Banking"]
        assert client.get("/account").json()["name"] == "Ana"
