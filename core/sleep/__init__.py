"""Sleep profile utilities — soundscape parameters and session scoring.

Exports:
    SleepProfile, SleepSession, AudioGenerationParams   (types)
    generate_audio_parameters, build_sleep_prompt       (soundscape parameters)
    calculate_sleep_score                               (session score)
"""

from core.sleep.audio_params import build_sleep_prompt, generate_audio_parameters
from core.sleep.score import calculate_sleep_score
from core.sleep.types import AudioGenerationParams, SleepProfile, SleepSession

__all__ = [
    "SleepProfile",
    "SleepSession",
    "AudioGenerationParams",
    "generate_audio_parameters",
    "build_sleep_prompt",
    "calculate_sleep_score",
]
