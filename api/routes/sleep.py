"""
api/routes/sleep.py — Soundscape parameter and sleep score endpoints.

Endpoints:
    POST /sleep/audio-parameters — Soundscape parameters and prompt for a profile
    POST /sleep/score            — Score one session against a profile

Pure computation over core/sleep. The caller supplies the stored profile
and sessions on every request.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.sleep import (
    AudioParametersRequest,
    AudioParametersResponse,
    SleepProfileIn,
    SleepScoreRequest,
    SleepScoreResponse,
    SleepSessionIn,
)
from core.sleep import (
    SleepProfile,
    SleepSession,
    build_sleep_prompt,
    calculate_sleep_score,
    generate_audio_parameters,
)
from infrastructure.metrics import record_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sleep", tags=["sleep"])


def _to_profile(body: SleepProfileIn) -> SleepProfile:
    return SleepProfile(
        bedtime=body.bedtime,
        wake_time=body.wake_time,
        preferred_duration=body.preferred_duration,
        sound_preferences=tuple(body.sound_preferences),
        sleep_environment=body.sleep_environment,
        stress_level=body.stress_level,
        sleep_issues=tuple(body.sleep_issues),
    )


def _to_session(body: SleepSessionIn) -> SleepSession:
    return SleepSession(
        start_time=body.start_time,
        end_time=body.end_time,
        duration=body.duration,
        quality=body.quality,
    )


@router.post("/audio-parameters", response_model=AudioParametersResponse)
def post_audio_parameters(request: AudioParametersRequest) -> AudioParametersResponse:
    """Derive soundscape parameters and render the generation prompt.

    Raises:
        422: Invalid profile or session values, including an unknown sound category.
    """
    try:
        profile = _to_profile(request.profile)
        sessions = [_to_session(s) for s in request.recent_sessions]
        params = generate_audio_parameters(profile, sessions, request.time_of_day)
        prompt = build_sleep_prompt(params)
    except ValueError as exc:
        logger.warning("Rejected audio_parameters request: %s", exc)
        record_request(operation="audio_parameters", status="rejected")
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    record_request(operation="audio_parameters", status="ok")
    return AudioParametersResponse(
        category=params.category,
        intensity=params.intensity,
        duration=params.duration,
        environmental_factors=list(params.environmental_factors),
        personalized_elements=list(params.personalized_elements),
        prompt=prompt,
    )


@router.post("/score", response_model=SleepScoreResponse)
def post_sleep_score(request: SleepScoreRequest) -> SleepScoreResponse:
    """Score a single session.

    Raises:
        422: Invalid profile or session values.
    """
    try:
        score = calculate_sleep_score(_to_session(request.session), _to_profile(request.profile))
    except ValueError as exc:
        logger.warning("Rejected sleep_score request: %s", exc)
        record_request(operation="sleep_score", status="rejected")
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    record_request(operation="sleep_score", status="ok")
    return SleepScoreResponse(score=score)
