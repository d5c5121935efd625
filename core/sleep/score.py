"""Nightly sleep score — weighted 0-100 rating of one session.

Components and weights:
  duration    0.3  closeness to the preferred sleep length
  quality     0.4  the session's own quality rating
  timing      0.2  closeness of the start hour to the preferred bedtime
  consistency 0.1  fixed 75 until multi-session consistency exists

This module is core/ pure. No I/O, no side effects.
"""

from __future__ import annotations

import math

from core.sleep.types import SleepProfile, SleepSession

SCORE_WEIGHTS: dict[str, float] = {
    "duration": 0.3,
    "quality": 0.4,
    "timing": 0.2,
    "consistency": 0.1,
}

# TODO: derive from the spread of recent bedtimes once sessions are passed in.
DEFAULT_CONSISTENCY = 75.0


def _duration_component(session: SleepSession, profile: SleepProfile) -> float:
    if not session.duration:
        return 0.0
    ratio = session.duration / profile.preferred_duration
    return max(0.0, 100.0 - abs(ratio - 1.0) * 100.0)


def _timing_component(session: SleepSession, profile: SleepProfile) -> float:
    # Bedtimes past midnight are written as 24:xx and later.
    diff = abs(session.start_time.hour - profile.bedtime_hour)
    return max(0.0, 100.0 - diff * 10.0)


def calculate_sleep_score(session: SleepSession, profile: SleepProfile) -> int:
    """Score one sleep session against the user's profile.

    Missing duration or quality contributes nothing for that component.

    Args:
        session: The session to score.
        profile: The user's sleep profile.

    Returns:
        Integer score in [0, 100], half-up rounded.
    """
    score = 0.0
    score += _duration_component(session, profile) * SCORE_WEIGHTS["duration"]
    if session.quality:
        score += session.quality * SCORE_WEIGHTS["quality"]
    score += _timing_component(session, profile) * SCORE_WEIGHTS["timing"]
    score += DEFAULT_CONSISTENCY * SCORE_WEIGHTS["consistency"]

    clamped = max(0.0, min(100.0, score))
    return math.floor(clamped + 0.5)
