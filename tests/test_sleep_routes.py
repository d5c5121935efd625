"""Tests for the /sleep endpoints."""

from __future__ import annotations


class TestAudioParametersEndpoint:
    def test_defaults(self, api_client) -> None:
        response = api_client.post("/sleep/audio-parameters", json={"profile": {}})
        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "nature"
        assert data["intensity"] == "medium"
        assert data["duration"] == 180
        assert data["prompt"].endswith(
            "Duration: 180 minutes. Optimized for deep, restorative sleep."
        )

    def test_poor_recent_sleep(self, api_client) -> None:
        response = api_client.post(
            "/sleep/audio-parameters",
            json={
                "profile": {
                    "sound_preferences": ["asmr", "white_noise"],
                    "sleep_environment": "city",
                    "stress_level": 9,
                },
                "recent_sessions": [
                    {"start_time": "2024-03-01T22:00:00", "duration": 300, "quality": 40},
                ],
                "time_of_day": "night",
            },
        )
        data = response.json()
        assert data["category"] == "white_noise"
        assert data["intensity"] == "low"
        assert data["environmental_factors"] == ["noise_masking", "consistent_volume"]
        assert "urban noise" in data["prompt"]

    def test_unknown_category_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/audio-parameters",
            json={"profile": {"sound_preferences": ["jazz"]}},
        )
        assert response.status_code == 422
        assert "category must be one of" in response.json()["detail"]

    def test_bad_time_of_day_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/audio-parameters",
            json={"profile": {}, "time_of_day": "noon"},
        )
        assert response.status_code == 422


class TestSleepScoreEndpoint:
    def test_score(self, api_client) -> None:
        response = api_client.post(
            "/sleep/score",
            json={
                "profile": {},
                "session": {"start_time": "2024-03-01T22:00:00", "duration": 480, "quality": 70},
            },
        )
        assert response.status_code == 200
        assert response.json() == {"score": 86}

    def test_end_before_start_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/score",
            json={
                "profile": {},
                "session": {
                    "start_time": "2024-03-02T06:00:00",
                    "end_time": "2024-03-01T22:00:00",
                },
            },
        )
        assert response.status_code == 422
        assert "end_time" in response.json()["detail"]

    def test_mixed_timezone_session_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/score",
            json={
                "profile": {},
                "session": {
                    "start_time": "2024-03-01T22:00:00Z",
                    "end_time": "2024-03-02T06:00:00",
                },
            },
        )
        assert response.status_code == 422
        assert "timezone" in response.json()["detail"]

    def test_mixed_timezone_recent_session_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/audio-parameters",
            json={
                "profile": {},
                "recent_sessions": [
                    {"start_time": "2024-03-01T22:00:00", "end_time": "2024-03-02T06:00:00+01:00"},
                ],
            },
        )
        assert response.status_code == 422

    def test_stress_out_of_range_is_422(self, api_client) -> None:
        response = api_client.post(
            "/sleep/score",
            json={"profile": {"stress_level": 12}, "session": {"start_time": "2024-03-01T22:00:00"}},
        )
        assert response.status_code == 422
