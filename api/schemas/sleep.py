"""
api/schemas/sleep.py — Pydantic models for the /sleep endpoints.

Field ranges mirror the SleepProfile and SleepSession checks in
core/sleep/types.py so most bad input is rejected with 422 up front.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class SleepProfileIn(BaseModel):
    """A user's sleep profile."""

    bedtime: str = Field("22:00", pattern=r"^\d{1,2}:\d{2}$", description="HH:MM")
    wake_time: str = Field("06:00", pattern=r"^\d{1,2}:\d{2}$", description="HH:MM")
    preferred_duration: int = Field(480, gt=0, description="Preferred sleep length in minutes")
    sound_preferences: list[str] = Field(
        default_factory=list,
        description="Sound categories in order of preference: nature | white_noise | asmr | ambient",
    )
    sleep_environment: str | None = Field(None, description="city | quiet | rural")
    stress_level: int | None = Field(None, ge=0, le=10)
    sleep_issues: list[str] = Field(default_factory=list)


class SleepSessionIn(BaseModel):
    """One recorded night of sleep."""

    start_time: datetime
    end_time: datetime | None = None
    duration: int | None = Field(None, ge=0, description="Minutes")
    quality: int | None = Field(None, ge=0, le=100)


class AudioParametersRequest(BaseModel):
    """POST /sleep/audio-parameters."""

    profile: SleepProfileIn
    recent_sessions: list[SleepSessionIn] = Field(default_factory=list)
    time_of_day: Literal["evening", "night", "morning"] = "evening"


class AudioParametersResponse(BaseModel):
    """Soundscape parameters and the rendered prompt."""

    category: str
    intensity: Literal["low", "medium", "high"]
    duration: int
    environmental_factors: list[str]
    personalized_elements: list[str]
    prompt: str


class SleepScoreRequest(BaseModel):
    """POST /sleep/score."""

    profile: SleepProfileIn
    session: SleepSessionIn


class SleepScoreResponse(BaseModel):
    """Sleep score in [0, 100]."""

    score: int
