"""
Tests for core/sleep/audio_params.py — soundscape parameters and prompt text.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.sleep import (
    AudioGenerationParams,
    SleepProfile,
    SleepSession,
    build_sleep_prompt,
    generate_audio_parameters,
)
from core.sleep.audio_params import DEFAULT_AVERAGE_QUALITY, average_quality


def _sessions(*qualities: int | None) -> list[SleepSession]:
    return [
        SleepSession(start_time=datetime(2024, 3, day, 22, 0), duration=480, quality=q)
        for day, q in enumerate(qualities, start=1)
    ]


class TestAverageQuality:
    def test_no_sessions_uses_default(self) -> None:
        assert average_quality([]) == DEFAULT_AVERAGE_QUALITY

    def test_unrated_counts_as_zero(self) -> None:
        assert average_quality(_sessions(80, None)) == 40


class TestCategory:
    def test_defaults_to_nature(self, sleep_profile: SleepProfile) -> None:
        assert generate_audio_parameters(sleep_profile).category == "nature"

    def test_first_preference_wins(self) -> None:
        profile = SleepProfile(sound_preferences=("asmr", "white_noise"))
        assert generate_audio_parameters(profile).category == "asmr"

    def test_poor_sleep_prefers_white_noise(self) -> None:
        profile = SleepProfile(sound_preferences=("asmr", "nature", "white_noise"))
        params = generate_audio_parameters(profile, _sessions(40, 50))
        assert params.category == "white_noise"

    def test_poor_sleep_falls_back_to_nature(self) -> None:
        profile = SleepProfile(sound_preferences=("ambient", "nature"))
        assert generate_audio_parameters(profile, _sessions(30)).category == "nature"

    def test_poor_sleep_keeps_first_preference_otherwise(self) -> None:
        profile = SleepProfile(sound_preferences=("ambient",))
        assert generate_audio_parameters(profile, _sessions(30)).category == "ambient"


class TestIntensity:
    def test_default_is_medium(self, sleep_profile: SleepProfile) -> None:
        assert generate_audio_parameters(sleep_profile).intensity == "medium"

    def test_high_stress_is_low(self) -> None:
        assert generate_audio_parameters(SleepProfile(stress_level=8)).intensity == "low"

    def test_anxiety_issue_is_low(self) -> None:
        profile = SleepProfile(sleep_issues=("stress_anxiety",))
        assert generate_audio_parameters(profile).intensity == "low"

    def test_low_stress_and_good_sleep_is_high(self) -> None:
        profile = SleepProfile(stress_level=2)
        assert generate_audio_parameters(profile, _sessions(85, 90)).intensity == "high"

    def test_morning_forces_high_nature(self) -> None:
        profile = SleepProfile(stress_level=9, sound_preferences=("asmr",))
        params = generate_audio_parameters(profile, time_of_day="morning")
        assert (params.category, params.intensity) == ("nature", "high")

    def test_night_forces_low(self) -> None:
        profile = SleepProfile(stress_level=2)
        params = generate_audio_parameters(profile, _sessions(95), time_of_day="night")
        assert params.intensity == "low"

    def test_bad_time_of_day_raises(self, sleep_profile: SleepProfile) -> None:
        with pytest.raises(ValueError, match="time_of_day must be"):
            generate_audio_parameters(sleep_profile, time_of_day="noon")  # type: ignore[arg-type]


class TestDuration:
    @pytest.mark.parametrize(
        "preferred,expected",
        [(480, 180), (150, 120), (90, 60), (20, 30)],
    )
    def test_whole_hours_clamped(self, preferred: int, expected: int) -> None:
        params = generate_audio_parameters(SleepProfile(preferred_duration=preferred))
        assert params.duration == expected


class TestTags:
    def test_city_environment(self) -> None:
        params = generate_audio_parameters(SleepProfile(sleep_environment="city"))
        assert params.environmental_factors == ("noise_masking", "consistent_volume")

    def test_unknown_environment_has_no_factors(self) -> None:
        params = generate_audio_parameters(SleepProfile(sleep_environment="boat"))
        assert params.environmental_factors == ()

    def test_issue_elements_in_fixed_order(self) -> None:
        profile = SleepProfile(sleep_issues=("restless_sleep", "trouble_falling_asleep"))
        params = generate_audio_parameters(profile)
        assert params.personalized_elements == (
            "progressive_relaxation",
            "slowing_tempo",
            "deep_bass_tones",
            "grounding_sounds",
        )

    def test_early_sleeper(self) -> None:
        params = generate_audio_parameters(SleepProfile(bedtime="21:30"))
        assert "early_sleeper_optimized" in params.personalized_elements

    def test_night_owl(self) -> None:
        params = generate_audio_parameters(SleepProfile(bedtime="24:30"))
        assert "night_owl_optimized" in params.personalized_elements

    def test_regular_bedtime_has_no_timing_tag(self, sleep_profile: SleepProfile) -> None:
        assert generate_audio_parameters(sleep_profile).personalized_elements == ()


class TestBuildSleepPrompt:
    def test_plain_prompt(self) -> None:
        params = AudioGenerationParams(category="white_noise", intensity="low", duration=60)
        assert build_sleep_prompt(params) == (
            "Soft, consistent white noise with minimal variation. "
            "Duration: 60 minutes. Optimized for deep, restorative sleep."
        )

    def test_modifiers_appended_in_order(self) -> None:
        params = AudioGenerationParams(
            category="nature",
            intensity="medium",
            duration=120,
            environmental_factors=("noise_masking", "consistent_volume"),
            personalized_elements=("continuous_loop", "progressive_relaxation"),
        )
        prompt = build_sleep_prompt(params)
        assert prompt.startswith("Flowing stream with distant bird calls and rustling foliage")
        assert prompt.index("urban noise") < prompt.index("gradually slowing")
        assert prompt.index("gradually slowing") < prompt.index("seamlessly looping")
        assert prompt.endswith("Duration: 120 minutes. Optimized for deep, restorative sleep.")

    def test_unknown_category_rejected_at_construction(self) -> None:
        with pytest.raises(ValueError, match="category must be one of"):
            AudioGenerationParams(category="jazz", intensity="low", duration=60)  # type: ignore[arg-type]

    def test_unknown_preferred_category_raises(self) -> None:
        profile = SleepProfile(sound_preferences=("ocean",))
        with pytest.raises(ValueError, match="category must be one of .* got 'ocean'"):
            generate_audio_parameters(profile)


class TestValueObjects:
    def test_bad_bedtime_raises(self) -> None:
        with pytest.raises(ValueError, match="bedtime must be HH:MM"):
            SleepProfile(bedtime="10pm")

    def test_stress_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="stress_level must be in"):
            SleepProfile(stress_level=11)

    def test_duration_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="duration must be in"):
            AudioGenerationParams(category="nature", intensity="low", duration=200)

    def test_end_before_start_raises(self) -> None:
        with pytest.raises(ValueError, match="end_time must not be before start_time"):
            SleepSession(
                start_time=datetime(2024, 3, 2, 6, 0),
                end_time=datetime(2024, 3, 1, 22, 0),
            )

    def test_mixed_timezone_session_raises(self) -> None:
        with pytest.raises(ValueError, match="both be timezone-aware or both naive"):
            SleepSession(
                start_time=datetime(2024, 3, 1, 22, 0, tzinfo=timezone.utc),
                end_time=datetime(2024, 3, 2, 6, 0),
            )

    def test_aware_session_accepted(self) -> None:
        session = SleepSession(
            start_time=datetime(2024, 3, 1, 22, 0, tzinfo=timezone.utc),
            end_time=datetime(2024, 3, 2, 6, 0, tzinfo=timezone.utc),
        )
        assert session.end_time > session.start_time
