"""Recipe generator — weighted sleep-audio mixture per persona and chronotype.

Algorithm:
  1. Base recipe keyed by persona (each sums to 1.0).
  2. Append the single chronotype bonus track, if the chronotype is known.
  3. Re-weight preference-sensitive tracks (like x1.3, dislike x0.5).
  4. Normalize so the weights sum to 1.0. Always runs: the bonus track
     alone moves the raw sum to 1.1.

This module is core/ pure. No I/O, no side effects.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from core.config import DEFAULT_WEIGHTING, WeightingConfig
from core.personalization.errors import UnknownPersonaError
from core.personalization.tracks import (
    ASMR_TRIGGERS,
    BINAURAL_BEATS,
    CRICKETS,
    DISTANT_THUNDER,
    FOREST_SOUNDS,
    GENTLE_PIANO,
    GUIDED_MEDITATION,
    MORNING_BIRDS,
    PINK_NOISE,
    RAIN_ON_TENT,
    SLEEP_STORY,
    UNDERWATER,
    WHALE_SONGS,
)
from core.personalization.types import (
    AudioTrack,
    PersonaType,
    PreferenceKey,
    Recipe,
    parse_sound_preferences,
)

# ---------------------------------------------------------------------------
# Recipe tables
# ---------------------------------------------------------------------------

BASE_RECIPES: dict[PersonaType, Recipe] = {
    "Stress Melter": (
        AudioTrack(GUIDED_MEDITATION, 0.5, 600),
        AudioTrack(GENTLE_PIANO, 0.3, 1800),
        AudioTrack(RAIN_ON_TENT, 0.2, 3600),
    ),
    "Mind Quieter": (
        AudioTrack(SLEEP_STORY, 0.6, 900),
        AudioTrack(FOREST_SOUNDS, 0.4, 3600),
    ),
    "Deep Sleeper": (
        AudioTrack(PINK_NOISE, 0.5, 7200),
        AudioTrack(BINAURAL_BEATS, 0.3, 3600),
        AudioTrack(WHALE_SONGS, 0.2, 1800),
    ),
}

CHRONOTYPE_BONUS_TRACKS: dict[str, AudioTrack] = {
    "Lion": AudioTrack(MORNING_BIRDS, 0.1, 900),
    "Bear": AudioTrack(CRICKETS, 0.1, 1800),
    "Wolf": AudioTrack(DISTANT_THUNDER, 0.1, 1200),
    "Dolphin": AudioTrack(UNDERWATER, 0.1, 1800),
}

# Track type → the sound preference that biases it.
PREFERENCE_SENSITIVITY: dict[str, PreferenceKey] = {
    GENTLE_PIANO: "gentle_music",
    FOREST_SOUNDS: "nature_sounds",
    ASMR_TRIGGERS: "whispering_voice",
    PINK_NOISE: "white_noise",
}


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def base_recipe(persona: str) -> Recipe:
    """Return the persona's base recipe.

    Raises:
        UnknownPersonaError: If the persona has no base recipe.
    """
    try:
        return BASE_RECIPES[persona]  # type: ignore[index]
    except (KeyError, TypeError) as exc:
        raise UnknownPersonaError(persona) from exc


def _preference_factor(
    track_type: str,
    preferences: Mapping[PreferenceKey, str],
    config: WeightingConfig,
) -> float:
    key = PREFERENCE_SENSITIVITY.get(track_type)
    if key is None:
        return 1.0
    level = preferences.get(key)
    if level == "like":
        return config.like_multiplier
    if level == "dislike":
        return config.dislike_multiplier
    return 1.0


def normalize_weights(
    tracks: Sequence[AudioTrack],
    raw_weights: Sequence[float] | None = None,
) -> Recipe:
    """Scale weights so they sum to 1.0, preserving track order.

    Args:
        tracks:      Tracks to normalize.
        raw_weights: Optional pre-normalization weights, one per track, used
                     instead of each track's own weight. Adjusted weights
                     may exceed 1.0, which ``AudioTrack`` would reject.

    Returns:
        New tuple of tracks whose weights sum to 1.0.

    Raises:
        ValueError: On an empty track list, a length mismatch, or a
            non-positive total weight.
    """
    if not tracks:
        raise ValueError("cannot normalize an empty recipe")
    weights = list(raw_weights) if raw_weights is not None else [t.weight for t in tracks]
    if len(weights) != len(tracks):
        raise ValueError(
            f"raw_weights length {len(weights)} does not match tracks length {len(tracks)}"
        )
    total = math.fsum(weights)
    if total <= 0:
        raise ValueError(f"total weight must be positive, got {total}")
    return tuple(track.with_weight(w / total) for track, w in zip(tracks, weights, strict=True))


def recipe_total_weight(recipe: Sequence[AudioTrack]) -> float:
    """Return the exact-as-possible sum of a recipe's weights."""
    return math.fsum(track.weight for track in recipe)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_recipe(
    chronotype: str,
    persona: str,
    preferences: Mapping[str, str] | None = None,
    config: WeightingConfig = DEFAULT_WEIGHTING,
) -> Recipe:
    """Generate tonight's normalized audio recipe.

    Args:
        chronotype:  Stored chronotype. Unknown values add no bonus track.
        persona:     Tonight's persona.
        preferences: Optional sound preferences, snake_case or camelCase keys.
        config:      Preference multipliers and tolerance.

    Returns:
        Ordered tuple of tracks (base tracks first, bonus track last) whose
        weights sum to 1.0 within ``config.tolerance``.

    Raises:
        UnknownPersonaError: If ``persona`` has no base recipe.
        InvalidInputError:   If ``preferences`` holds an unknown key or level.
    """
    tracks = list(base_recipe(persona))

    bonus = CHRONOTYPE_BONUS_TRACKS.get(chronotype)
    if bonus is not None:
        tracks.append(bonus)

    prefs = parse_sound_preferences(preferences)
    raw_weights = [t.weight * _preference_factor(t.type, prefs, config) for t in tracks]

    recipe = normalize_weights(tracks, raw_weights)

    total = recipe_total_weight(recipe)
    if abs(total - 1.0) > config.tolerance:
        raise ValueError(f"normalized weights sum to {total}, outside tolerance")
    return recipe
