"""Onboarding chronotype questionnaire definitions.

Question order matters: the chronotype classifier scores answers by
position, so ``CHRONOTYPE_QUESTIONS[i]`` is the question whose answer sits
at index ``i``.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.personalization.chronotype import QUESTION_COUNT
from core.personalization.types import ANSWER_CODES


@dataclass(frozen=True)
class QuestionOption:
    """A single answer option.

    Attributes
    ----------
    code:
        Answer identifier, "A".."D".
    text:
        Option text shown to the user.
    description:
        Short subtitle for the option.
    """

    code: str
    text: str
    description: str

    def __post_init__(self) -> None:
        """Validate code is a known answer identifier."""
        if self.code not in ANSWER_CODES:
            raise ValueError(f"code must be one of {ANSWER_CODES}, got {self.code!r}")


@dataclass(frozen=True)
class Question:
    """A multiple-choice questionnaire question.

    Attributes
    ----------
    number:
        1-based display number.
    title:
        Short heading.
    prompt:
        The question itself.
    options:
        Exactly four options, in A..D order.
    """

    number: int
    title: str
    prompt: str
    options: tuple[QuestionOption, ...]

    def __post_init__(self) -> None:
        """Validate options cover A..D in order."""
        codes = tuple(option.code for option in self.options)
        if codes != ANSWER_CODES:
            raise ValueError(f"options must be ordered {ANSWER_CODES}, got {codes}")


CHRONOTYPE_QUESTIONS: tuple[Question, ...] = (
    Question(
        number=1,
        title="What's Your Natural Rhythm?",
        prompt="Which of these sounds most like your natural rhythm, especially on days off?",
        options=(
            QuestionOption("A", "I'm an early bird, most alert in the morning.", "Morning person"),
            QuestionOption(
                "B",
                "My energy follows the sun; up in the morning, tired after sunset.",
                "Balanced rhythm",
            ),
            QuestionOption(
                "C", "I'm a night owl, hitting my stride in the evening.", "Evening person"
            ),
            QuestionOption(
                "D",
                "I'm a very light sleeper; my schedule is often unpredictable.",
                "Irregular schedule",
            ),
        ),
    ),
    Question(
        number=2,
        title="Sleep Quality Assessment",
        prompt="Over the past month, how would you rate your sleep quality overall?",
        options=(
            QuestionOption("A", "Very Good", "Consistently restful sleep"),
            QuestionOption("B", "Fairly Good", "Generally satisfactory"),
            QuestionOption("C", "Fairly Bad", "Often disrupted"),
            QuestionOption("D", "Very Bad", "Consistently poor"),
        ),
    ),
    Question(
        number=3,
        title="Primary Sleep Challenge",
        prompt="What is your single biggest challenge with sleep?",
        options=(
            QuestionOption("A", "Difficulty falling asleep", "Takes a long time to drift off"),
            QuestionOption("B", "Waking up frequently during the night", "Interrupted sleep"),
            QuestionOption(
                "C",
                "Waking up too early and being unable to get back to sleep",
                "Early morning awakening",
            ),
            QuestionOption(
                "D", "Feeling tired even after a full night's sleep", "Non-restorative sleep"
            ),
        ),
    ),
    Question(
        number=4,
        title="Challenge Response Style",
        prompt="When facing a new challenge, you are more likely to...",
        options=(
            QuestionOption("A", "Plan carefully and stick to the plan", "Structured approach"),
            QuestionOption("B", "Worry about what might go wrong", "Cautious mindset"),
            QuestionOption("C", "Jump in and figure it out as I go", "Adaptive approach"),
            QuestionOption("D", "Research thoroughly before acting", "Analytical approach"),
        ),
    ),
    Question(
        number=5,
        title="Relaxation Preferences",
        prompt="Which type of sound do you generally find most relaxing?",
        options=(
            QuestionOption("A", "A person speaking calmly", "Guided meditation or stories"),
            QuestionOption("B", "Musical sounds", "Like gentle piano"),
            QuestionOption("C", "Nature sounds", "Forest or ocean waves"),
            QuestionOption("D", "Simple background noise", "Rain or fan sounds"),
        ),
    ),
)

if len(CHRONOTYPE_QUESTIONS) != QUESTION_COUNT:
    raise ValueError(
        f"questionnaire defines {len(CHRONOTYPE_QUESTIONS)} questions, "
        f"classifier expects {QUESTION_COUNT}"
    )

# The third question doubles as the permanent challenge used every night.
CHALLENGE_QUESTION_INDEX = 2
