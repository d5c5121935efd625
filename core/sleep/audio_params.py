"""Audio generation parameters and prompt text for a single soundscape.

Derives a category, intensity and duration from a sleep profile and recent
sessions, then renders the text prompt an external sound generator receives.

This module is core/ pure: no I/O, no clock. ``time_of_day`` is an input.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from core.sleep.types import (
    AudioGenerationParams,
    Intensity,
    SleepProfile,
    SleepSession,
    SoundCategory,
    TimeOfDay,
)

# Assumed average quality when there are no recent sessions.
DEFAULT_AVERAGE_QUALITY = 75.0

MIN_DURATION_MINUTES = 30
MAX_DURATION_MINUTES = 180

BASE_PROMPTS: dict[SoundCategory, dict[Intensity, str]] = {
    "nature": {
        "low": "Gentle rainfall on leaves with soft wind through trees",
        "medium": "Flowing stream with distant bird calls and rustling foliage",
        "high": "Ocean waves with seagulls and coastal wind patterns",
    },
    "white_noise": {
        "low": "Soft, consistent white noise with minimal variation",
        "medium": "Balanced pink noise with gentle frequency modulation",
        "high": "Rich brown noise with harmonic overtones",
    },
    "asmr": {
        "low": "Whispered affirmations with gentle breathing sounds",
        "medium": "Soft tapping and brushing with caring whispers",
        "high": "Detailed tactile sounds with immersive 3D audio",
    },
    "ambient": {
        "low": "Ethereal drones with slowly evolving harmonics",
        "medium": "Spacious soundscapes with celestial tones",
        "high": "Complex atmospheric textures with deep resonance",
    },
}

_ENVIRONMENT_FACTORS: dict[str, tuple[str, ...]] = {
    "city": ("noise_masking", "consistent_volume"),
    "quiet": ("very_gentle", "low_volume"),
    "rural": ("natural_variance", "organic_sounds"),
}

_ISSUE_ELEMENTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("trouble_falling_asleep", ("progressive_relaxation", "slowing_tempo")),
    ("frequent_waking", ("continuous_loop", "stable_frequencies")),
    ("restless_sleep", ("deep_bass_tones", "grounding_sounds")),
    ("stress_anxiety", ("breathing_rhythm", "heart_rate_sync")),
)

# Tag → prompt suffix, applied in this order.
_ENVIRONMENT_MODIFIERS: tuple[tuple[str, str], ...] = (
    ("noise_masking", ", designed to mask urban noise and distractions"),
    ("very_gentle", ", extremely gentle and unobtrusive"),
    ("natural_variance", ", with natural organic variations and subtle changes"),
)

_ELEMENT_MODIFIERS: tuple[tuple[str, str], ...] = (
    ("progressive_relaxation", ", gradually slowing and becoming more peaceful over time"),
    ("continuous_loop", ", seamlessly looping without jarring transitions"),
    ("breathing_rhythm", ", synchronized with natural breathing patterns for relaxation"),
    ("deep_bass_tones", ", featuring grounding low-frequency elements"),
)


def average_quality(sessions: Sequence[SleepSession]) -> float:
    """Mean session quality; unrated sessions count as 0."""
    if not sessions:
        return DEFAULT_AVERAGE_QUALITY
    return statistics.mean(s.quality or 0 for s in sessions)


def _select_category(profile: SleepProfile, avg_quality: float) -> str:
    category = profile.sound_preferences[0] if profile.sound_preferences else "nature"
    # Poor recent sleep: prefer the most consistent categories the user accepts.
    if avg_quality < 60:
        if "white_noise" in profile.sound_preferences:
            category = "white_noise"
        elif "nature" in profile.sound_preferences:
            category = "nature"
    return category


def _select_intensity(profile: SleepProfile, avg_quality: float) -> Intensity:
    stress = profile.stress_level
    if (stress is not None and stress >= 8) or "stress_anxiety" in profile.sleep_issues:
        return "low"
    if stress is not None and stress <= 3 and avg_quality >= 80:
        return "high"
    return "medium"


def generate_audio_parameters(
    profile: SleepProfile,
    recent_sessions: Sequence[SleepSession] = (),
    time_of_day: TimeOfDay = "evening",
) -> AudioGenerationParams:
    """Derive soundscape parameters from a profile and recent sleep.

    Rules:
    - Average quality below 60 switches to white_noise, then nature, when the
      user lists them.
    - Stress >= 8 or a stress_anxiety issue → low intensity; stress <= 3 with
      quality >= 80 → high.
    - Morning forces high intensity nature sounds; night forces low intensity.
    - Duration is the preferred sleep length in whole hours, clamped to
      30-180 minutes.

    Args:
        profile:         The user's sleep profile.
        recent_sessions: Recent sleep sessions, any order.
        time_of_day:     "evening" | "night" | "morning".

    Returns:
        AudioGenerationParams for the soundscape.

    Raises:
        ValueError: If ``time_of_day`` is not a recognised value, or the
            selected category is not a known sound category.
    """
    if time_of_day not in ("evening", "night", "morning"):
        raise ValueError(f"time_of_day must be evening|night|morning, got {time_of_day!r}")

    avg_quality = average_quality(recent_sessions)
    category = _select_category(profile, avg_quality)
    intensity = _select_intensity(profile, avg_quality)

    if time_of_day == "morning":
        intensity = "high"
        category = "nature"
    elif time_of_day == "night":
        intensity = "low"

    base_hours = profile.preferred_duration // 60
    duration = max(MIN_DURATION_MINUTES, min(MAX_DURATION_MINUTES, base_hours * 60))

    environmental_factors = _ENVIRONMENT_FACTORS.get(profile.sleep_environment or "", ())

    personalized: list[str] = []
    for issue, elements in _ISSUE_ELEMENTS:
        if issue in profile.sleep_issues:
            personalized.extend(elements)

    bedtime_hour = profile.bedtime_hour
    if bedtime_hour <= 21:
        personalized.append("early_sleeper_optimized")
    elif bedtime_hour >= 24:
        personalized.append("night_owl_optimized")

    return AudioGenerationParams(
        category=category,
        intensity=intensity,
        duration=duration,
        environmental_factors=environmental_factors,
        personalized_elements=tuple(personalized),
    )


def build_sleep_prompt(params: AudioGenerationParams) -> str:
    """Render the text prompt for a soundscape."""
    prompt = BASE_PROMPTS[params.category][params.intensity]

    for tag, suffix in _ENVIRONMENT_MODIFIERS:
        if tag in params.environmental_factors:
            prompt += suffix
    for tag, suffix in _ELEMENT_MODIFIERS:
        if tag in params.personalized_elements:
            prompt += suffix

    prompt += f". Duration: {params.duration} minutes. Optimized for deep, restorative sleep."
    return prompt
