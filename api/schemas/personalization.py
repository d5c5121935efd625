"""
api/schemas/personalization.py — Pydantic models for the /personalization endpoints.

All fields use snake_case. Enumerated inputs are typed as ``Literal`` so
FastAPI rejects unknown codes with 422 before the core runs; the answer
list and challenge stay plain strings because the core accepts lowercase
codes and descriptive challenge aliases.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

PersonaName = Literal["Stress Melter", "Mind Quieter", "Deep Sleeper"]
PreferenceLevelName = Literal["like", "neutral", "dislike"]


class QuestionOptionOut(BaseModel):
    """A single questionnaire option."""

    code: str
    text: str
    description: str


class QuestionOut(BaseModel):
    """A questionnaire question with its four options."""

    number: int
    title: str
    prompt: str
    options: list[QuestionOptionOut]


class QuestionnaireResponse(BaseModel):
    """GET /personalization/questions."""

    questions: list[QuestionOut]
    challenge_question_index: int = Field(
        ..., description="Index of the question reused as the permanent sleep challenge"
    )


class ChronotypeRequest(BaseModel):
    """POST /personalization/chronotype — classify questionnaire answers."""

    answers: list[str] = Field(
        ...,
        description="Exactly five answer codes (A-D), in question order",
    )


class ChronotypeProfileOut(BaseModel):
    """Display profile of a chronotype."""

    type: str
    title: str
    description: str
    emoji: str


class ChronotypeResponse(BaseModel):
    """Chronotype classification result with its display profile."""

    type: str
    scores: dict[str, int]
    profile: ChronotypeProfileOut


class PersonaRequest(BaseModel):
    """POST /personalization/persona — nightly persona from the check-in."""

    challenge: str = Field(
        ...,
        description=(
            "Permanent biggest challenge: A-D or falling_asleep | waking_frequently | "
            "waking_early | feeling_tired"
        ),
    )
    stress_level: Literal["low", "medium", "high"]
    thoughts_state: Literal["calm", "busy", "racing"]


class PersonaResponse(BaseModel):
    """Nightly persona with the accumulators that produced it."""

    persona: PersonaName
    mind_quieter: int
    stress_melter: int
    deep_sleeper: int


class SoundPreferencesIn(BaseModel):
    """Optional sound preferences; omitted keys count as neutral."""

    gentle_music: PreferenceLevelName | None = None
    nature_sounds: PreferenceLevelName | None = None
    whispering_voice: PreferenceLevelName | None = None
    white_noise: PreferenceLevelName | None = None

    def as_mapping(self) -> dict[str, str]:
        """Return only the preferences that were set."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


class RecipeRequest(BaseModel):
    """POST /personalization/recipe — tonight's weighted track recipe."""

    chronotype: str = Field(..., description="Stored chronotype: Lion | Bear | Wolf | Dolphin")
    persona: str = Field(..., description="Tonight's persona")
    preferences: SoundPreferencesIn | None = None


class AudioTrackOut(BaseModel):
    """A weighted recipe entry."""

    type: str
    weight: float
    duration: int | None = None


class RecipeResponse(BaseModel):
    """Normalized recipe; weights sum to 1.0."""

    chronotype: str
    persona: str
    tracks: list[AudioTrackOut]


class PlanRequest(RecipeRequest):
    """POST /personalization/plan — recipe plus per-track generation requests."""

    user_id: str = Field(..., min_length=1, max_length=128)
    timestamp_ms: int = Field(..., ge=0, description="Epoch milliseconds for file names")


class TrackGenerationOut(BaseModel):
    """One audio asset the generator must produce."""

    track_index: int
    track_type: str
    kind: Literal["speech", "sound_effect"]
    text: str
    duration_seconds: int
    weight: float
    file_name: str


class PlanResponse(RecipeResponse):
    """Recipe with its generation plan."""

    requests: list[TrackGenerationOut]
