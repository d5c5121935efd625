"""Sleep profile and session value objects.

All types are frozen dataclasses. No I/O, no datetime.now().
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, get_args

TimeOfDay = Literal["evening", "night", "morning"]
Intensity = Literal["low", "medium", "high"]

# Sound categories with a base prompt per intensity.
SoundCategory = Literal["nature", "white_noise", "asmr", "ambient"]
SOUND_CATEGORIES: tuple[SoundCategory, ...] = get_args(SoundCategory)

_CLOCK_TIME = re.compile(r"^\d{1,2}:\d{2}$")


@dataclass(frozen=True)
class SleepProfile:
    """A user's stored sleep profile.

    Attributes:
        bedtime:            Preferred bedtime, "HH:MM". Hours may exceed 23
                            for after-midnight bedtimes ("24:30").
        wake_time:          Preferred wake time, "HH:MM".
        preferred_duration: Preferred sleep length in minutes.
        sound_preferences:  Sound categories in order of preference.
        sleep_environment:  "city" | "quiet" | "rural" | other/None.
        stress_level:       Self-reported stress 0-10, or None.
        sleep_issues:       Issue tags (e.g. "trouble_falling_asleep").
    """

    bedtime: str = "22:00"
    wake_time: str = "06:00"
    preferred_duration: int = 480
    sound_preferences: tuple[str, ...] = ()
    sleep_environment: str | None = None
    stress_level: int | None = None
    sleep_issues: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("bedtime", "wake_time"):
            value = getattr(self, name)
            if not _CLOCK_TIME.match(value):
                raise ValueError(f"{name} must be HH:MM, got {value!r}")
        if self.preferred_duration <= 0:
            raise ValueError(
                f"preferred_duration must be positive, got {self.preferred_duration}"
            )
        if self.stress_level is not None and not 0 <= self.stress_level <= 10:
            raise ValueError(f"stress_level must be in [0, 10], got {self.stress_level}")

    @property
    def bedtime_hour(self) -> int:
        """Hour component of ``bedtime``."""
        return int(self.bedtime.split(":")[0])


@dataclass(frozen=True)
class SleepSession:
    """One recorded night of sleep.

    Attributes:
        start_time: When the session started, in the user's local time.
        end_time:   When it ended, or None while in progress.
        duration:   Length in minutes, or None when unknown.
        quality:    Quality score 0-100, or None when unrated.
    """

    start_time: datetime
    end_time: datetime | None = None
    duration: int | None = None
    quality: int | None = None

    def __post_init__(self) -> None:
        if self.end_time is not None and (self.start_time.tzinfo is None) != (
            self.end_time.tzinfo is None
        ):
            raise ValueError("start_time and end_time must both be timezone-aware or both naive")
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        if self.duration is not None and self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if self.quality is not None and not 0 <= self.quality <= 100:
            raise ValueError(f"quality must be in [0, 100], got {self.quality}")


@dataclass(frozen=True)
class AudioGenerationParams:
    """Parameters that shape a single generated sleep soundscape.

    Attributes:
        category:              Sound category driving the base prompt.
        intensity:             "low" | "medium" | "high".
        duration:              Length in minutes, 30-180.
        environmental_factors: Tags derived from the sleep environment.
        personalized_elements: Tags derived from issues and bedtime.
    """

    category: SoundCategory
    intensity: Intensity
    duration: int
    environmental_factors: tuple[str, ...] = ()
    personalized_elements: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.intensity not in ("low", "medium", "high"):
            raise ValueError(f"intensity must be low|medium|high, got {self.intensity!r}")
        if self.category not in SOUND_CATEGORIES:
            raise ValueError(
                f"category must be one of {list(SOUND_CATEGORIES)}, got {self.category!r}"
            )
        if not 30 <= self.duration <= 180:
            raise ValueError(f"duration must be in [30, 180] minutes, got {self.duration}")
