"""Chronotype display profiles for the sleep domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChronotypeProfile:
    """Human-readable description of a chronotype.

    Attributes
    ----------
    type:
        Chronotype name, or "Unknown" for the fallback profile.
    title:
        Display title (e.g. "The Lion").
    description:
        One-paragraph summary shown after the questionnaire.
    emoji:
        Single emoji used as the profile badge.
    """

    type: str
    title: str
    description: str
    emoji: str

    def __post_init__(self) -> None:
        """Validate title and description are non-empty."""
        if not self.title.strip():
            raise ValueError("title must be a non-empty string")
        if not self.description.strip():
            raise ValueError("description must be a non-empty string")


CHRONOTYPE_PROFILES: dict[str, ChronotypeProfile] = {
    "Lion": ChronotypeProfile(
        type="Lion",
        title="The Lion",
        description=(
            "Early risers who are most productive in the morning. "
            "Lions are natural leaders who prefer structure and routine."
        ),
        emoji="🦁",
    ),
    "Bear": ChronotypeProfile(
        type="Bear",
        title="The Bear",
        description=(
            "Most people fall into this category. "
            "Bears follow the sun and have steady energy throughout the day."
        ),
        emoji="🐻",
    ),
    "Wolf": ChronotypeProfile(
        type="Wolf",
        title="The Wolf",
        description=(
            "Night owls who come alive in the evening. "
            "Wolves are creative and prefer working later in the day."
        ),
        emoji="🐺",
    ),
    "Dolphin": ChronotypeProfile(
        type="Dolphin",
        title="The Dolphin",
        description=(
            "Light sleepers who are often perfectionists. "
            "Dolphins are intelligent but may struggle with sleep quality."
        ),
        emoji="🐬",
    ),
}

UNKNOWN_PROFILE = ChronotypeProfile(
    type="Unknown",
    title="Unknown Type",
    description="Unable to determine chronotype.",
    emoji="❓",
)


def describe_chronotype(chronotype: str) -> ChronotypeProfile:
    """Return the display profile for a chronotype.

    Unknown values get the "Unknown Type" profile rather than an error, so a
    stale stored value still renders.
    """
    return CHRONOTYPE_PROFILES.get(chronotype, UNKNOWN_PROFILE)
