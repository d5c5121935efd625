"""Nightly persona classifier — pure rule-based scoring.

Combines the permanent biggest-sleep-challenge answer with the evening
mood check-in to pick tonight's persona:
  - Stress Melter: tension from the day dominates
  - Mind Quieter:  racing thoughts or trouble settling
  - Deep Sleeper:  fragmented sleep needs continuity

This module is core/ pure. No I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.personalization.errors import InvalidInputError
from core.personalization.types import (
    STRESS_LEVELS,
    THOUGHTS_STATES,
    ChallengeCode,
    DailyCheckIn,
    PersonaType,
)

# The serverless payload names challenges instead of using letter codes.
CHALLENGE_ALIASES: dict[str, ChallengeCode] = {
    "falling_asleep": "A",
    "waking_frequently": "B",
    "waking_early": "C",
    "feeling_tired": "D",
}

_CHALLENGE_CODES: frozenset[str] = frozenset(CHALLENGE_ALIASES.values())


@dataclass(frozen=True)
class PersonaScores:
    """Internal persona accumulators, exposed for diagnostics only."""

    mind_quieter: int = 0
    stress_melter: int = 0
    deep_sleeper: int = 0

    def winner(self) -> PersonaType:
        """Apply the ordered decision rule.

        Not a plain argmax: Stress Melter wins every tie it is part of,
        and Mind Quieter wins a tie against Deep Sleeper.
        """
        if self.stress_melter >= self.mind_quieter and self.stress_melter >= self.deep_sleeper:
            return "Stress Melter"
        if self.mind_quieter >= self.deep_sleeper:
            return "Mind Quieter"
        return "Deep Sleeper"


def normalize_challenge(challenge: str) -> ChallengeCode:
    """Resolve a challenge letter or descriptive alias to its letter code.

    Raises:
        InvalidInputError: If the value is neither A..D nor a known alias.
    """
    if challenge in CHALLENGE_ALIASES:
        return CHALLENGE_ALIASES[challenge]
    code = challenge.strip().upper() if isinstance(challenge, str) else challenge
    if code not in _CHALLENGE_CODES:
        raise InvalidInputError(
            f"challenge must be one of {sorted(_CHALLENGE_CODES)} "
            f"or {sorted(CHALLENGE_ALIASES)}, got {challenge!r}"
        )
    return code


def score_persona(challenge: str, stress_level: str, thoughts_state: str) -> PersonaScores:
    """Accumulate persona points from the challenge and the check-in.

    Args:
        challenge:      Permanent challenge code (A..D) or its alias.
        stress_level:   "low" | "medium" | "high".
        thoughts_state: "calm" | "busy" | "racing".

    Returns:
        PersonaScores with the three accumulators.

    Raises:
        InvalidInputError: If any input is outside its enumeration.
    """
    code = normalize_challenge(challenge)
    if stress_level not in STRESS_LEVELS:
        raise InvalidInputError(
            f"stress_level must be one of {list(STRESS_LEVELS)}, got {stress_level!r}"
        )
    if thoughts_state not in THOUGHTS_STATES:
        raise InvalidInputError(
            f"thoughts_state must be one of {list(THOUGHTS_STATES)}, got {thoughts_state!r}"
        )

    mind_quieter = 0
    stress_melter = 0
    deep_sleeper = 0

    # Permanent challenge
    if code in ("A", "C"):
        mind_quieter += 3
    elif code == "B":
        deep_sleeper += 3

    # Daily stress
    if stress_level == "medium":
        stress_melter += 1
    elif stress_level == "high":
        stress_melter += 3

    # Current thoughts
    if thoughts_state == "racing":
        mind_quieter += 3

    return PersonaScores(
        mind_quieter=mind_quieter,
        stress_melter=stress_melter,
        deep_sleeper=deep_sleeper,
    )


def classify_persona(challenge: str, stress_level: str, thoughts_state: str) -> PersonaType:
    """Classify tonight's persona.

    With every accumulator at zero (challenge D, low stress, calm thoughts)
    the result is Stress Melter, the quiescent default.

    Raises:
        InvalidInputError: If any input is outside its enumeration.
    """
    return score_persona(challenge, stress_level, thoughts_state).winner()


def classify_check_in(challenge: str, check_in: DailyCheckIn) -> PersonaType:
    """Classify tonight's persona from a validated ``DailyCheckIn``."""
    return classify_persona(challenge, check_in.stress_level, check_in.thoughts_state)
