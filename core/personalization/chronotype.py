"""Chronotype classifier — pure rule-based scoring.

Maps the five onboarding questionnaire answers to one of four chronotypes:
  - Lion:    early riser
  - Bear:    follows the sun
  - Wolf:    night owl
  - Dolphin: light, irregular sleeper

This module is core/ pure:
  - No I/O, no filesystem, no network, no datetime.now()
  - Deterministic: same answers → same result, score map included
"""

from __future__ import annotations

from collections.abc import Sequence

from core.personalization.errors import InvalidInputError
from core.personalization.types import (
    ANSWER_CODES,
    CHRONOTYPES,
    AnswerCode,
    ChronotypeResult,
    ChronotypeType,
)

QUESTION_COUNT = 5

# ---------------------------------------------------------------------------
# Scoring table
# ---------------------------------------------------------------------------

# One rule per question position. Each maps an answer code to the points it
# awards. Codes missing from a rule are valid answers that award nothing.
# Weights reflect how strongly each question signals a chronotype:
#   Q0 natural rhythm (highest), Q1 sleep quality and Q2 biggest challenge
#   (high), Q3 response style (medium), Q4 sound preference (low).
_SCORING_RULES: tuple[dict[AnswerCode, dict[ChronotypeType, int]], ...] = (
    # Q0: natural rhythm
    {
        "A": {"Lion": 10},
        "B": {"Bear": 10},
        "C": {"Wolf": 10},
        "D": {"Dolphin": 10},
    },
    # Q1: sleep quality
    {
        "A": {"Bear": 5},
        "B": {"Bear": 3, "Lion": 2},
        "C": {"Wolf": 3, "Dolphin": 3},
        "D": {"Dolphin": 5},
    },
    # Q2: biggest challenge
    {
        "A": {"Wolf": 5},
        "B": {"Dolphin": 5},
        "C": {"Lion": 5},
        "D": {"Wolf": 1, "Dolphin": 1},
    },
    # Q3: challenge response style
    {
        "A": {"Lion": 2, "Bear": 2},
        "B": {"Dolphin": 3, "Wolf": 1},
        "C": {"Wolf": 2},
    },
    # Q4: sound preference
    {
        "D": {"Dolphin": 2},
    },
)

# Winner when no chronotype scores above zero.
_DEFAULT_CHRONOTYPE: ChronotypeType = "Bear"


def _normalize_answers(answers: Sequence[str]) -> tuple[AnswerCode, ...]:
    """Validate answer count and codes, returning upper-cased codes."""
    if isinstance(answers, str) or len(answers) != QUESTION_COUNT:
        count = 1 if isinstance(answers, str) else len(answers)
        raise InvalidInputError(f"exactly {QUESTION_COUNT} answers are required, got {count}")

    normalized: list[AnswerCode] = []
    for index, raw in enumerate(answers):
        code = raw.strip().upper() if isinstance(raw, str) else raw
        if code not in ANSWER_CODES:
            raise InvalidInputError(
                f"answer {index} must be one of {list(ANSWER_CODES)}, got {raw!r}"
            )
        normalized.append(code)
    return tuple(normalized)


def score_answers(answers: Sequence[str]) -> dict[ChronotypeType, int]:
    """Accumulate chronotype points for a full set of answers.

    Args:
        answers: Exactly five answer codes, question order.

    Returns:
        Dict with every chronotype as a key, in fixed evaluation order.

    Raises:
        InvalidInputError: Wrong answer count or an unknown answer code.
    """
    codes = _normalize_answers(answers)
    scores: dict[ChronotypeType, int] = {name: 0 for name in CHRONOTYPES}
    for rule, code in zip(_SCORING_RULES, codes, strict=True):
        for name, points in rule.get(code, {}).items():
            scores[name] += points
    return scores


def classify_chronotype(answers: Sequence[str]) -> ChronotypeResult:
    """Classify questionnaire answers into a chronotype.

    Algorithm:
    1. Score each answer against its question's rule.
    2. Walk chronotypes in the fixed order Lion, Bear, Wolf, Dolphin.
    3. A type replaces the running winner only with a strictly higher score,
       so ties go to the type evaluated first.
    4. No positive score at all → Bear.

    Args:
        answers: Exactly five answer codes ("A".."D"), question order.
            Codes are case-insensitive and may carry surrounding whitespace.

    Returns:
        ChronotypeResult with the winning type and the full score map.

    Raises:
        InvalidInputError: If the answer count is not five or any code is
            outside A..D.
    """
    scores = score_answers(answers)

    winner: ChronotypeType = _DEFAULT_CHRONOTYPE
    best = 0
    for name in CHRONOTYPES:
        if scores[name] > best:
            best = scores[name]
            winner = name

    return ChronotypeResult(type=winner, scores=scores)
