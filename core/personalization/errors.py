"""Error taxonomy for the personalization engine.

Every error is a ``ValueError`` subclass so callers that already guard
pure-core calls with ``except ValueError`` keep working.
"""

from __future__ import annotations


class PersonalizationError(ValueError):
    """Base class for personalization input and lookup failures."""


class InvalidInputError(PersonalizationError):
    """Raised when questionnaire or check-in input is malformed.

    Covers a wrong number of chronotype answers and any code outside its
    closed enumeration (answers, challenge, stress, thoughts, preferences).
    """


class UnknownPersonaError(PersonalizationError):
    """Raised when a persona has no base recipe.

    Attributes:
        persona: The persona value that failed the lookup.
    """

    def __init__(self, persona: object) -> None:
        self.persona = persona
        super().__init__(f"unknown persona {persona!r}, no base recipe defined")
