"""Sleep personalization — pure classification and recipe generation.

Exports:
    ChronotypeResult, DailyCheckIn, AudioTrack, Recipe     (types)
    InvalidInputError, UnknownPersonaError                  (errors)
    classify_chronotype                                     (chronotype classifier)
    classify_persona, classify_check_in                     (persona classifier)
    generate_recipe, normalize_weights                      (recipe generator)
    build_generation_plan, TrackGenerationRequest           (generation plan)
"""

from core.personalization.chronotype import classify_chronotype, score_answers
from core.personalization.errors import (
    InvalidInputError,
    PersonalizationError,
    UnknownPersonaError,
)
from core.personalization.persona import (
    PersonaScores,
    classify_check_in,
    classify_persona,
    score_persona,
)
from core.personalization.recipe import generate_recipe, normalize_weights
from core.personalization.tracks import TrackGenerationRequest, build_generation_plan
from core.personalization.types import (
    AudioTrack,
    ChronotypeResult,
    ChronotypeType,
    DailyCheckIn,
    PersonaType,
    Recipe,
    parse_sound_preferences,
)

__all__ = [
    "AudioTrack",
    "ChronotypeResult",
    "ChronotypeType",
    "DailyCheckIn",
    "PersonaType",
    "Recipe",
    "parse_sound_preferences",
    "PersonalizationError",
    "InvalidInputError",
    "UnknownPersonaError",
    "classify_chronotype",
    "score_answers",
    "PersonaScores",
    "score_persona",
    "classify_persona",
    "classify_check_in",
    "generate_recipe",
    "normalize_weights",
    "TrackGenerationRequest",
    "build_generation_plan",
]
