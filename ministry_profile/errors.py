"""Validation errors raised by the scoring engine.

All of them are caller-correctable and subclass ``ValueError``.
"""

from __future__ import annotations


class ScoringError(ValueError):
    """Base class for engine input-validation failures."""


class InvalidPositionError(ScoringError):
    """Answer position is not an integer in the slider range."""

    def __init__(self, question_id: int, position: object, low: int = 0, high: int = 6) -> None:
        self.question_id = question_id
        self.position = position
        super().__init__(
            f"Answer for question {question_id} has position {position!r}; expected an integer in [{low}, {high}]"
        )


class UnknownQuestionError(ScoringError):
    """Answer references a question id that is not in the question bank."""

    def __init__(self, question_id: int) -> None:
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found in question bank")


class MismatchedQuestionError(ScoringError):
    """Answer was paired with a question carrying a different id."""

    def __init__(self, answer_question_id: int, question_id: int) -> None:
        self.answer_question_id = answer_question_id
        self.question_id = question_id
        super().__init__(
            f"Answer for question {answer_question_id} cannot be scored against question {question_id}"
        )
