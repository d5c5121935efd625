"""
api/routes/personalization.py — Chronotype, persona and recipe endpoints.

Endpoints:
    GET  /personalization/questions               — Onboarding questionnaire
    POST /personalization/chronotype              — Classify questionnaire answers
    GET  /personalization/chronotypes/{chronotype} — Chronotype display profile
    POST /personalization/persona                 — Tonight's persona from the check-in
    POST /personalization/recipe                  — Tonight's normalized track recipe
    POST /personalization/plan                    — Recipe plus audio-generation requests

All endpoints delegate to core/personalization. No database — the caller
stores the chronotype and passes it back in for every recipe.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from api.schemas.personalization import (
    AudioTrackOut,
    ChronotypeProfileOut,
    ChronotypeRequest,
    ChronotypeResponse,
    PersonaRequest,
    PersonaResponse,
    PlanRequest,
    PlanResponse,
    QuestionnaireResponse,
    QuestionOptionOut,
    QuestionOut,
    RecipeRequest,
    RecipeResponse,
    TrackGenerationOut,
)
from core.personalization import (
    PersonalizationError,
    Recipe,
    build_generation_plan,
    classify_chronotype,
    generate_recipe,
    score_persona,
)
from domains.sleep.chronotypes import ChronotypeProfile, describe_chronotype
from domains.sleep.questionnaire import CHALLENGE_QUESTION_INDEX, CHRONOTYPE_QUESTIONS
from infrastructure.metrics import (
    LatencyTimer,
    record_chronotype,
    record_persona,
    record_recipe_latency,
    record_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/personalization", tags=["personalization"])


def _reject(operation: str, exc: Exception) -> HTTPException:
    """Log and count a rejected request, returning the 422 to raise."""
    logger.warning("Rejected %s request: %s", operation, exc)
    record_request(operation=operation, status="rejected")
    return HTTPException(status_code=422, detail=str(exc))


def _profile_out(profile: ChronotypeProfile) -> ChronotypeProfileOut:
    return ChronotypeProfileOut(
        type=profile.type,
        title=profile.title,
        description=profile.description,
        emoji=profile.emoji,
    )


def _tracks_out(recipe: Recipe) -> list[AudioTrackOut]:
    return [AudioTrackOut(type=t.type, weight=t.weight, duration=t.duration) for t in recipe]


def _generate(request: RecipeRequest, operation: str) -> Recipe:
    preferences = request.preferences.as_mapping() if request.preferences else None
    try:
        with LatencyTimer() as timer:
            recipe = generate_recipe(request.chronotype, request.persona, preferences)
    except PersonalizationError as exc:
        raise _reject(operation, exc) from exc
    record_recipe_latency(persona=request.persona, latency_seconds=timer.elapsed)
    return recipe


# ---------------------------------------------------------------------------
# GET /personalization/questions
# ---------------------------------------------------------------------------


@router.get("/questions", response_model=QuestionnaireResponse)
def get_questions() -> QuestionnaireResponse:
    """Return the five onboarding questions in scoring order."""
    questions = [
        QuestionOut(
            number=q.number,
            title=q.title,
            prompt=q.prompt,
            options=[
                QuestionOptionOut(code=o.code, text=o.text, description=o.description)
                for o in q.options
            ],
        )
        for q in CHRONOTYPE_QUESTIONS
    ]
    return QuestionnaireResponse(
        questions=questions,
        challenge_question_index=CHALLENGE_QUESTION_INDEX,
    )


# ---------------------------------------------------------------------------
# POST /personalization/chronotype
# ---------------------------------------------------------------------------


@router.post("/chronotype", response_model=ChronotypeResponse)
def post_chronotype(request: ChronotypeRequest) -> ChronotypeResponse:
    """Classify the questionnaire answers into a chronotype.

    Raises:
        422: Not exactly five answers, or an answer outside A-D.
    """
    try:
        result = classify_chronotype(request.answers)
    except PersonalizationError as exc:
        raise _reject("chronotype", exc) from exc

    logger.info("Chronotype classified: %s %s", result.type, dict(result.scores))
    record_chronotype(result.type)
    record_request(operation="chronotype", status="ok")
    return ChronotypeResponse(
        type=result.type,
        scores=dict(result.scores),
        profile=_profile_out(describe_chronotype(result.type)),
    )


@router.get("/chronotypes/{chronotype}", response_model=ChronotypeProfileOut)
def get_chronotype_profile(chronotype: str) -> ChronotypeProfileOut:
    """Return the display profile; unknown chronotypes get the fallback profile."""
    return _profile_out(describe_chronotype(chronotype))


# ---------------------------------------------------------------------------
# POST /personalization/persona
# ---------------------------------------------------------------------------


@router.post("/persona", response_model=PersonaResponse)
def post_persona(request: PersonaRequest) -> PersonaResponse:
    """Classify tonight's persona from the challenge and the mood check-in.

    Raises:
        422: Unknown challenge code.
    """
    try:
        scores = score_persona(request.challenge, request.stress_level, request.thoughts_state)
    except PersonalizationError as exc:
        raise _reject("persona", exc) from exc

    persona = scores.winner()
    logger.info("Persona classified: %s", persona)
    record_persona(persona)
    record_request(operation="persona", status="ok")
    return PersonaResponse(
        persona=persona,
        mind_quieter=scores.mind_quieter,
        stress_melter=scores.stress_melter,
        deep_sleeper=scores.deep_sleeper,
    )


# ---------------------------------------------------------------------------
# POST /personalization/recipe
# ---------------------------------------------------------------------------


@router.post("/recipe", response_model=RecipeResponse)
def post_recipe(request: RecipeRequest) -> RecipeResponse:
    """Generate tonight's normalized recipe.

    Raises:
        422: Unknown persona.
    """
    recipe = _generate(request, "recipe")
    record_request(operation="recipe", status="ok")
    return RecipeResponse(
        chronotype=request.chronotype,
        persona=request.persona,
        tracks=_tracks_out(recipe),
    )


# ---------------------------------------------------------------------------
# POST /personalization/plan
# ---------------------------------------------------------------------------


@router.post("/plan", response_model=PlanResponse)
def post_plan(request: PlanRequest) -> PlanResponse:
    """Generate the recipe and the per-track audio-generation requests.

    Raises:
        422: Unknown persona or a user_id with no file-name-safe characters.
    """
    recipe = _generate(request, "plan")
    try:
        plan = build_generation_plan(recipe, request.persona, request.user_id, request.timestamp_ms)
    except ValueError as exc:
        raise _reject("plan", exc) from exc

    record_request(operation="plan", status="ok")
    return PlanResponse(
        chronotype=request.chronotype,
        persona=request.persona,
        tracks=_tracks_out(recipe),
        requests=[
            TrackGenerationOut(
                track_index=r.track_index,
                track_type=r.track_type,
                kind=r.kind,
                text=r.text,
                duration_seconds=r.duration_seconds,
                weight=r.weight,
                file_name=r.file_name,
            )
            for r in plan
        ],
    )
