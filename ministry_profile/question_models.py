"""Pydantic models for the questionnaire: statements, questions and answers."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt, model_validator

from ministry_profile.errors import UnknownQuestionError
from ministry_profile.roles import ROLE_ORDER, Role


class Statement(BaseModel):
    """One side of a paired question, tagged with the role it measures."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    role: Role


class Question(BaseModel):
    """A pair of statements the respondent weighs against each other."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    statement_a: Statement
    statement_b: Statement


class Answer(BaseModel):
    """A slider position for one question.

    Position 3 is neutral, 0-2 lean towards statement A and 4-6 towards
    statement B. The range itself is enforced by the scoring engine; the
    type is strict, so strings, floats and booleans are rejected.
    """

    model_config = ConfigDict(frozen=True)

    question_id: StrictInt
    position: StrictInt


class QuestionBank(BaseModel):
    """Ordered, read-only catalog of questions indexed by id."""

    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    questions: list[Question] = Field(..., min_length=1)

    _index: dict[int, Question] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> QuestionBank:
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate question ids found")
        return self

    def model_post_init(self, __context: object) -> None:
        self._index = {q.id: q for q in self.questions}

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:  # type: ignore[override]
        return iter(self.questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._index

    def get(self, question_id: int) -> Question:
        """Return the question with *question_id* or raise ``UnknownQuestionError``."""
        try:
            return self._index[question_id]
        except KeyError:
            raise UnknownQuestionError(question_id) from None

    def role_ceilings(self, max_weight: int = 5) -> dict[Role, int]:
        """Highest score each role can reach with this bank.

        Each question contributes *max_weight* to every role appearing on
        either side of it.
        """
        ceilings = {role: 0 for role in ROLE_ORDER}
        for q in self:
            for role in {q.statement_a.role, q.statement_b.role}:
                ceilings[role] += max_weight
        return ceilings
