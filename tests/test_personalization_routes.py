"""
Tests for the /personalization endpoints.

Pure computation behind every route, so no dependency overrides are
needed: requests go through the real core through ``TestClient``.
"""

from __future__ import annotations

import pytest

LION_ANSWERS = ["A", "A", "C", "A", "D"]


class TestHealthAndMetrics:
    def test_health(self, api_client) -> None:
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_metrics_exposition(self, api_client) -> None:
        api_client.post("/personalization/chronotype", json={"answers": LION_ANSWERS})
        response = api_client.get("/metrics")
        assert response.status_code == 200
        assert "sleep_chronotype_results_total" in response.text


class TestQuestionnaireEndpoint:
    def test_returns_five_questions(self, api_client) -> None:
        data = api_client.get("/personalization/questions").json()
        assert len(data["questions"]) == 5
        assert data["challenge_question_index"] == 2
        assert [o["code"] for o in data["questions"][0]["options"]] == ["A", "B", "C", "D"]


class TestChronotypeEndpoint:
    def test_lion(self, api_client) -> None:
        response = api_client.post("/personalization/chronotype", json={"answers": LION_ANSWERS})
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "Lion"
        assert data["scores"] == {"Lion": 17, "Bear": 7, "Wolf": 0, "Dolphin": 2}
        assert data["profile"]["title"] == "The Lion"

    @pytest.mark.parametrize("answers", [["A"] * 4, ["A"] * 6])
    def test_wrong_count_is_422(self, api_client, answers: list[str]) -> None:
        response = api_client.post("/personalization/chronotype", json={"answers": answers})
        assert response.status_code == 422
        assert "exactly 5 answers" in response.json()["detail"]

    def test_unknown_code_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/chronotype", json={"answers": ["A", "B", "Z", "A", "A"]}
        )
        assert response.status_code == 422

    def test_profile_lookup(self, api_client) -> None:
        data = api_client.get("/personalization/chronotypes/Wolf").json()
        assert data["title"] == "The Wolf"

    def test_unknown_profile_falls_back(self, api_client) -> None:
        data = api_client.get("/personalization/chronotypes/Owl").json()
        assert data["title"] == "Unknown Type"


class TestPersonaEndpoint:
    def test_stress_melter_default(self, api_client) -> None:
        response = api_client.post(
            "/personalization/persona",
            json={"challenge": "D", "stress_level": "low", "thoughts_state": "calm"},
        )
        assert response.status_code == 200
        assert response.json()["persona"] == "Stress Melter"

    def test_alias_and_scores(self, api_client) -> None:
        data = api_client.post(
            "/personalization/persona",
            json={
                "challenge": "waking_frequently",
                "stress_level": "high",
                "thoughts_state": "racing",
            },
        ).json()
        assert data == {
            "persona": "Stress Melter",
            "mind_quieter": 3,
            "stress_melter": 3,
            "deep_sleeper": 3,
        }

    def test_unknown_challenge_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/persona",
            json={"challenge": "snoring", "stress_level": "low", "thoughts_state": "calm"},
        )
        assert response.status_code == 422
        assert "challenge must be one of" in response.json()["detail"]

    def test_unknown_stress_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/persona",
            json={"challenge": "A", "stress_level": "extreme", "thoughts_state": "calm"},
        )
        assert response.status_code == 422


class TestRecipeEndpoint:
    def test_mind_quieter_bear(self, api_client) -> None:
        response = api_client.post(
            "/personalization/recipe",
            json={"chronotype": "Bear", "persona": "Mind Quieter"},
        )
        assert response.status_code == 200
        tracks = response.json()["tracks"]
        assert [t["type"] for t in tracks] == ["Sleep Story", "Forest Sounds", "Crickets"]
        assert [t["weight"] for t in tracks] == pytest.approx([6 / 11, 4 / 11, 1 / 11])

    def test_preferences_shift_weights(self, api_client) -> None:
        neutral = api_client.post(
            "/personalization/recipe",
            json={"chronotype": "Bear", "persona": "Deep Sleeper"},
        ).json()["tracks"]
        liked = api_client.post(
            "/personalization/recipe",
            json={
                "chronotype": "Bear",
                "persona": "Deep Sleeper",
                "preferences": {"white_noise": "like"},
            },
        ).json()["tracks"]
        assert liked[0]["weight"] > neutral[0]["weight"]
        assert sum(t["weight"] for t in liked) == pytest.approx(1.0)

    def test_unknown_persona_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/recipe",
            json={"chronotype": "Bear", "persona": "Night Owl"},
        )
        assert response.status_code == 422
        assert "unknown persona" in response.json()["detail"]

    def test_bad_preference_level_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/recipe",
            json={
                "chronotype": "Bear",
                "persona": "Deep Sleeper",
                "preferences": {"white_noise": "love"},
            },
        )
        assert response.status_code == 422


class TestPlanEndpoint:
    def test_plan_matches_recipe(self, api_client) -> None:
        response = api_client.post(
            "/personalization/plan",
            json={
                "chronotype": "Lion",
                "persona": "Stress Melter",
                "user_id": "u42",
                "timestamp_ms": 1700000000000,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["requests"]) == len(data["tracks"]) == 4
        assert data["requests"][0]["kind"] == "speech"
        assert data["requests"][3]["file_name"] == "morning-birds-u42-1700000000000-3.mp3"

    def test_blank_user_is_422(self, api_client) -> None:
        response = api_client.post(
            "/personalization/plan",
            json={"chronotype": "Lion", "persona": "Stress Melter", "user_id": "  ", "timestamp_ms": 0},
        )
        assert response.status_code == 422
        assert "user_id" in response.json()["detail"]

    def test_path_like_user_id_stays_in_one_file_name(self, api_client) -> None:
        response = api_client.post(
            "/personalization/plan",
            json={"chronotype": "Lion", "persona": "Stress Melter", "user_id": "a/../b", "timestamp_ms": 0},
        )
        assert response.status_code == 200
        names = [r["file_name"] for r in response.json()["requests"]]
        assert names[0] == "guided-meditation-a-b-0-0.mp3"
        assert all("/" not in n and ".." not in n for n in names)
