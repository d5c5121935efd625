"""Core types for sleep personalization.

All types are frozen dataclasses or ``Literal`` aliases — immutable value
objects. No I/O, no imports from api/ or infrastructure/.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, get_args

from core.personalization.errors import InvalidInputError

# Questionnaire answer identifiers, one per multiple-choice option.
AnswerCode = Literal["A", "B", "C", "D"]

# Natural sleep-wake rhythm categories.
# Lion:    early riser, most alert in the morning.
# Bear:    follows the sun, steady energy through the day.
# Wolf:    night owl, hits their stride in the evening.
# Dolphin: light sleeper, irregular schedule.
ChronotypeType = Literal["Lion", "Bear", "Wolf", "Dolphin"]

# Nightly therapeutic-sound profiles derived from the mood check-in.
PersonaType = Literal["Stress Melter", "Mind Quieter", "Deep Sleeper"]

# Permanent "biggest sleep challenge" captured at onboarding.
# A: trouble falling asleep | B: frequent waking | C: early waking
# D: non-restorative sleep
ChallengeCode = Literal["A", "B", "C", "D"]

StressLevel = Literal["low", "medium", "high"]
ThoughtsState = Literal["calm", "busy", "racing"]

PreferenceLevel = Literal["like", "neutral", "dislike"]
PreferenceKey = Literal["gentle_music", "nature_sounds", "whispering_voice", "white_noise"]

CHRONOTYPES: tuple[ChronotypeType, ...] = get_args(ChronotypeType)
"""Fixed evaluation order, also the chronotype tie-break priority."""

PERSONAS: tuple[PersonaType, ...] = get_args(PersonaType)
ANSWER_CODES: tuple[AnswerCode, ...] = get_args(AnswerCode)
STRESS_LEVELS: tuple[StressLevel, ...] = get_args(StressLevel)
THOUGHTS_STATES: tuple[ThoughtsState, ...] = get_args(ThoughtsState)
PREFERENCE_LEVELS: tuple[PreferenceLevel, ...] = get_args(PreferenceLevel)
PREFERENCE_KEYS: tuple[PreferenceKey, ...] = get_args(PreferenceKey)

# The check-in UI sends camelCase preference keys.
_PREFERENCE_KEY_ALIASES: dict[str, PreferenceKey] = {
    "gentleMusic": "gentle_music",
    "natureSounds": "nature_sounds",
    "whisperingVoice": "whispering_voice",
    "whiteNoise": "white_noise",
}

SoundPreferences = Mapping[PreferenceKey, PreferenceLevel]


@dataclass(frozen=True)
class ChronotypeResult:
    """Outcome of the chronotype questionnaire.

    Attributes:
        type:   Winning chronotype.
        scores: Read-only per-chronotype accumulator. All four chronotypes
                are always present, each a non-negative integer.
    """

    type: ChronotypeType
    scores: Mapping[ChronotypeType, int]

    def __post_init__(self) -> None:
        if self.type not in CHRONOTYPES:
            raise ValueError(f"type must be one of {list(CHRONOTYPES)}, got {self.type!r}")
        if set(self.scores) != set(CHRONOTYPES):
            raise ValueError(
                f"scores must contain exactly {list(CHRONOTYPES)}, got {sorted(self.scores)}"
            )
        for name, score in self.scores.items():
            if score < 0:
                raise ValueError(f"score for {name} must be non-negative, got {score}")
        ordered = {name: self.scores[name] for name in CHRONOTYPES}
        object.__setattr__(self, "scores", MappingProxyType(ordered))

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable ``{"type", "scores"}`` dict."""
        return {"type": self.type, "scores": dict(self.scores)}


@dataclass(frozen=True)
class DailyCheckIn:
    """Evening mood check-in, created fresh each night."""

    stress_level: StressLevel
    thoughts_state: ThoughtsState

    def __post_init__(self) -> None:
        if self.stress_level not in STRESS_LEVELS:
            raise InvalidInputError(
                f"stress_level must be one of {list(STRESS_LEVELS)}, got {self.stress_level!r}"
            )
        if self.thoughts_state not in THOUGHTS_STATES:
            raise InvalidInputError(
                f"thoughts_state must be one of {list(THOUGHTS_STATES)}, "
                f"got {self.thoughts_state!r}"
            )


@dataclass(frozen=True)
class AudioTrack:
    """One weighted entry of a sleep audio recipe.

    Attributes:
        type:     Track-type name (e.g. "Gentle Piano").
        weight:   Relative mix weight in [0.0, 1.0].
        duration: Nominal length in seconds, or None when unspecified.
    """

    type: str
    weight: float
    duration: int | None = None

    def __post_init__(self) -> None:
        if not self.type.strip():
            raise ValueError("type must be a non-empty string")
        if not 0.0 <= self.weight <= 1.0:
            raise ValueError(f"weight must be in [0.0, 1.0], got {self.weight}")
        if self.duration is not None and self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")

    def with_weight(self, weight: float) -> AudioTrack:
        """Return a copy of this track carrying a new weight."""
        return AudioTrack(type=self.type, weight=weight, duration=self.duration)


Recipe = tuple[AudioTrack, ...]


def parse_sound_preferences(raw: Mapping[str, str] | None) -> dict[PreferenceKey, PreferenceLevel]:
    """Validate a sound-preference mapping from the UI or an API payload.

    Accepts snake_case keys and their camelCase aliases. Keys outside the
    recognised set and levels outside like/neutral/dislike are rejected.

    Args:
        raw: Mapping of preference key to level, or None.

    Returns:
        New dict keyed by snake_case ``PreferenceKey``. Empty when ``raw`` is None.

    Raises:
        InvalidInputError: On an unknown key or level.
    """
    if raw is None:
        return {}
    parsed: dict[PreferenceKey, PreferenceLevel] = {}
    for key, level in raw.items():
        canonical = _PREFERENCE_KEY_ALIASES.get(key, key)
        if canonical not in PREFERENCE_KEYS:
            raise InvalidInputError(
                f"unknown sound preference {key!r}, expected one of {list(PREFERENCE_KEYS)}"
            )
        if level not in PREFERENCE_LEVELS:
            raise InvalidInputError(
                f"preference level for {key!r} must be one of {list(PREFERENCE_LEVELS)}, "
                f"got {level!r}"
            )
        parsed[canonical] = level  # type: ignore[index]
    return parsed
