"""Track catalog and generation plan for sleep audio recipes.

A recipe says *which* track types to mix and how heavily. The external audio
collaborator still needs to know *how* to produce each track: voice-based
tracks are synthesised from a script, everything else from a sound-effect
prompt. ``build_generation_plan`` turns a recipe into that request list.

This module is core/ pure: the timestamp used in file names is passed in,
never read from the clock.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from core.personalization.types import AudioTrack, Recipe

# ---------------------------------------------------------------------------
# Track type names
# ---------------------------------------------------------------------------

PINK_NOISE = "Pink Noise"
FOREST_SOUNDS = "Forest Sounds"
WHALE_SONGS = "Whale Songs"
GENTLE_PIANO = "Gentle Piano"
GUIDED_MEDITATION = "Guided Meditation"
SLEEP_STORY = "Sleep Story"
ASMR_TRIGGERS = "ASMR Triggers"
DEEP_BREATHING = "Deep Breathing Pacer"
BINAURAL_BEATS = "Binaural Beats"
RAIN_ON_TENT = "Rain on a Tent"

# Chronotype bonus sounds
MORNING_BIRDS = "Morning Birds"
CRICKETS = "Crickets"
DISTANT_THUNDER = "Distant Thunder"
UNDERWATER = "Underwater"

TRACK_CATALOG: tuple[str, ...] = (
    PINK_NOISE,
    FOREST_SOUNDS,
    WHALE_SONGS,
    GENTLE_PIANO,
    GUIDED_MEDITATION,
    SLEEP_STORY,
    ASMR_TRIGGERS,
    DEEP_BREATHING,
    BINAURAL_BEATS,
    RAIN_ON_TENT,
    MORNING_BIRDS,
    CRICKETS,
    DISTANT_THUNDER,
    UNDERWATER,
)

VOICE_TRACKS: frozenset[str] = frozenset({GUIDED_MEDITATION, SLEEP_STORY, DEEP_BREATHING})

DEFAULT_TRACK_DURATION = 300
"""Seconds requested for a sound effect when the track has no duration."""

# ---------------------------------------------------------------------------
# Scripts and prompts
# ---------------------------------------------------------------------------

MEDITATION_SCRIPTS: dict[str, str] = {
    "Stress Melter": (
        "Take a deep breath in and slowly let it out. You are safe, you are calm, "
        "you are at peace. Feel the tension leaving your shoulders with each exhale. "
        "Let go of the day's worries. They have no place here in this moment of "
        "tranquility. Your body is becoming heavy and relaxed, sinking into comfort. "
        "With each breath, you drift deeper into peaceful rest."
    ),
    "Mind Quieter": (
        "Imagine your thoughts as leaves floating down a gentle stream. Watch them "
        "drift by without judgment, without attachment. Some thoughts may try to pull "
        "you along, but you remain on the peaceful shore, simply observing. The stream "
        "flows endlessly, carrying away all the mental chatter of the day. You are the "
        "calm observer, peaceful and still, ready for restful sleep."
    ),
    "Deep Sleeper": (
        "Feel your body becoming wonderfully heavy, like you're sinking into the most "
        "comfortable bed. Every muscle is releasing, every nerve is calming. You're "
        "entering the deepest, most restorative sleep. Your breathing slows, your "
        "heartbeat steadies, and your mind becomes beautifully quiet. This is your time "
        "for complete restoration and healing rest."
    ),
}

SLEEP_STORY_SCRIPT = (
    "Once upon a time, in a peaceful meadow surrounded by gentle hills, there stood an "
    "old oak tree. Its branches swayed softly in the evening breeze, and beneath its "
    "canopy, the grass was soft and warm. As twilight painted the sky in shades of "
    "purple and gold, a sense of deep tranquility settled over the land. The flowers "
    "closed their petals for the night, and the world prepared for restful sleep. You "
    "too can feel this peaceful energy, letting it carry you gently into dreams..."
)

BREATHING_SCRIPT = (
    "Breathe in slowly for four counts... two... three... four... Now hold for four "
    "counts... two... three... four... And breathe out slowly for six counts... two... "
    "three... four... five... six... Continue this rhythm, letting each breath bring "
    "you deeper into relaxation..."
)

FALLBACK_SCRIPT = "Relax and let yourself drift into peaceful sleep..."

SOUND_PROMPTS: dict[str, str] = {
    PINK_NOISE: (
        "Gentle pink noise, soft continuous sound for deep sleep, "
        "muffled white noise with lower frequencies"
    ),
    FOREST_SOUNDS: (
        "Peaceful forest ambience with gentle rustling leaves, "
        "distant bird calls, soft wind through trees"
    ),
    WHALE_SONGS: "Calming whale songs, deep ocean sounds, distant whale calls echoing underwater",
    GENTLE_PIANO: "Soft, slow piano melody for relaxation, gentle keys, peaceful classical style",
    ASMR_TRIGGERS: "Gentle tapping sounds, soft brushing, light scratching for ASMR relaxation",
    BINAURAL_BEATS: "Delta wave binaural beats for deep sleep, low frequency healing tones",
    RAIN_ON_TENT: "Gentle rain falling on canvas tent, soft pattering, cozy camping sounds",
    MORNING_BIRDS: "Gentle dawn chorus, soft bird songs, peaceful morning nature sounds",
    CRICKETS: "Soft cricket chirping, evening nature sounds, gentle insect ambience",
    DISTANT_THUNDER: "Soft distant thunder, gentle rumbling, peaceful storm ambience",
    UNDERWATER: "Gentle underwater sounds, soft bubbles, peaceful ocean depths",
}

FALLBACK_SOUND_PROMPT = "Peaceful ambient sounds for relaxation and sleep"

# Runs of these characters become "-" in asset file names.
_UNSAFE_FILE_CHARS = re.compile(r"[^A-Za-z0-9_]+")

GenerationKind = Literal["speech", "sound_effect"]


@dataclass(frozen=True)
class TrackGenerationRequest:
    """One audio asset the external generator must produce.

    Attributes:
        track_index:      Position of the track in the recipe.
        track_type:       Track-type name.
        kind:             "speech" for voice tracks, "sound_effect" otherwise.
        text:             Narration script (speech) or sound prompt.
        duration_seconds: Requested length in seconds.
        weight:           Normalized recipe weight, carried for the mixer.
        file_name:        Target asset file name, ``.mp3``.
    """

    track_index: int
    track_type: str
    kind: GenerationKind
    text: str
    duration_seconds: int
    weight: float
    file_name: str

    def __post_init__(self) -> None:
        if self.track_index < 0:
            raise ValueError(f"track_index must be non-negative, got {self.track_index}")
        if self.kind not in ("speech", "sound_effect"):
            raise ValueError(f"kind must be speech|sound_effect, got {self.kind!r}")
        if not self.text.strip():
            raise ValueError("text must be non-empty")
        if self.duration_seconds <= 0:
            raise ValueError(f"duration_seconds must be positive, got {self.duration_seconds}")


def is_voice_track(track_type: str) -> bool:
    """Return True when the track is narrated rather than a sound effect."""
    return track_type in VOICE_TRACKS


def script_for_track(track_type: str, persona: str) -> str:
    """Return the narration script for a voice track.

    Guided Meditation is persona-specific; an unrecognised persona falls back
    to the Deep Sleeper script.
    """
    if track_type == GUIDED_MEDITATION:
        return MEDITATION_SCRIPTS.get(persona, MEDITATION_SCRIPTS["Deep Sleeper"])
    if track_type == SLEEP_STORY:
        return SLEEP_STORY_SCRIPT
    if track_type == DEEP_BREATHING:
        return BREATHING_SCRIPT
    return FALLBACK_SCRIPT


def sound_prompt_for_track(track_type: str) -> str:
    """Return the sound-effect prompt for a track type."""
    return SOUND_PROMPTS.get(track_type, FALLBACK_SOUND_PROMPT)


def file_name_part(value: str) -> str:
    """Collapse path separators, dots and whitespace so ``value`` is safe in a file name."""
    return _UNSAFE_FILE_CHARS.sub("-", value).strip("-")


def track_file_name(track_type: str, user_id: str, timestamp_ms: int, index: int) -> str:
    """Build the asset file name, e.g. ``gentle-piano-u1-1700000000000-1.mp3``."""
    slug = file_name_part(track_type.lower())
    return f"{slug}-{file_name_part(user_id)}-{timestamp_ms}-{index}.mp3"


def _request_for(
    index: int, track: AudioTrack, persona: str, user_id: str, timestamp_ms: int
) -> TrackGenerationRequest:
    if is_voice_track(track.type):
        kind: GenerationKind = "speech"
        text = script_for_track(track.type, persona)
    else:
        kind = "sound_effect"
        text = sound_prompt_for_track(track.type)
    return TrackGenerationRequest(
        track_index=index,
        track_type=track.type,
        kind=kind,
        text=text,
        duration_seconds=track.duration or DEFAULT_TRACK_DURATION,
        weight=track.weight,
        file_name=track_file_name(track.type, user_id, timestamp_ms, index),
    )


def build_generation_plan(
    recipe: Recipe,
    persona: str,
    user_id: str,
    timestamp_ms: int,
) -> tuple[TrackGenerationRequest, ...]:
    """Turn a recipe into ordered audio-generation requests.

    Args:
        recipe:       Normalized recipe from ``generate_recipe``.
        persona:      Tonight's persona, selects the meditation script.
        user_id:      Owner of the generated assets, embedded in file names.
        timestamp_ms: Epoch milliseconds shared by every file name in the plan.

    Returns:
        One request per track, same order as the recipe.

    Raises:
        ValueError: If ``user_id`` has no file-name-safe characters or
            ``timestamp_ms`` is negative.
    """
    if not file_name_part(user_id):
        raise ValueError(f"user_id must contain letters or digits, got {user_id!r}")
    if timestamp_ms < 0:
        raise ValueError(f"timestamp_ms must be non-negative, got {timestamp_ms}")
    return tuple(
        _request_for(index, track, persona, user_id, timestamp_ms)
        for index, track in enumerate(recipe)
    )
