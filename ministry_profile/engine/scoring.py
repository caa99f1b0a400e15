"""Answer normalization and per-respondent score accumulation.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ministry_profile.errors import InvalidPositionError, MismatchedQuestionError
from ministry_profile.question_models import Answer, Question, QuestionBank
from ministry_profile.roles import ROLE_ORDER, Role


# ---------------------------------------------------------------------------
# Slider constants
# ---------------------------------------------------------------------------
MIN_POSITION = 0
MAX_POSITION = 6
NEUTRAL_POSITION = 3

# distance from neutral → weight; non-linear on purpose, keep as a table
DISTANCE_WEIGHTS: dict[int, int] = {
    0: 0,
    1: 1,
    2: 3,
    3: 5,
}

MAX_WEIGHT = max(DISTANCE_WEIGHTS.values())


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class RoleContribution(BaseModel):
    """Weight credited to one role by a single answer."""

    model_config = ConfigDict(frozen=True)

    role: Role
    weight: float = Field(gt=0)


class RoleTotals(BaseModel):
    """Non-negative score per role."""

    model_config = ConfigDict(frozen=True)

    apostle: float = Field(default=0.0, ge=0)
    prophet: float = Field(default=0.0, ge=0)
    evangelist: float = Field(default=0.0, ge=0)
    herder: float = Field(default=0.0, ge=0)
    teacher: float = Field(default=0.0, ge=0)

    @classmethod
    def from_mapping(cls, scores: Mapping[Role | str, float]):
        """Build from a role → score mapping; missing roles count as 0."""
        return cls(**{Role(role).value: value for role, value in scores.items()})

    def get(self, role: Role | str) -> float:
        return getattr(self, Role(role).value)

    def as_dict(self) -> dict[Role, float]:
        """Role → score in fixed role order."""
        return {role: self.get(role) for role in ROLE_ORDER}

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())


class RoleScoreVector(RoleTotals):
    """Accumulated role scores for one respondent."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def check_position(answer: Answer) -> int:
    """Return the answer's position or raise ``InvalidPositionError``."""
    position = answer.position
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidPositionError(answer.question_id, position, MIN_POSITION, MAX_POSITION)
    if not MIN_POSITION <= position <= MAX_POSITION:
        raise InvalidPositionError(answer.question_id, position, MIN_POSITION, MAX_POSITION)
    return position


def normalize(answer: Answer, question: Question) -> RoleContribution | None:
    """Translate one slider answer into the role it credits and by how much.

    Returns ``None`` for the neutral position.

    Raises:
        MismatchedQuestionError: If *answer* belongs to another question.
        InvalidPositionError: If the position is outside the slider range.
    """
    if answer.question_id != question.id:
        raise MismatchedQuestionError(answer.question_id, question.id)
    position = check_position(answer)

    weight = DISTANCE_WEIGHTS[abs(position - NEUTRAL_POSITION)]
    if weight == 0:
        return None
    role = question.statement_a.role if position < NEUTRAL_POSITION else question.statement_b.role
    return RoleContribution(role=role, weight=weight)


def accumulate(answers: Iterable[Answer], questions: QuestionBank) -> RoleScoreVector:
    """Sum the normalized contributions of *answers* into a role-score vector.

    Partial answer sets are fine. When a question is answered more than
    once the last answer wins.

    Raises:
        UnknownQuestionError: If an answer references a question not in *questions*.
        InvalidPositionError: If an answer position is outside the slider range.
    """
    latest: dict[int, Answer] = {}
    for answer in answers:
        questions.get(answer.question_id)
        check_position(answer)
        latest[answer.question_id] = answer

    totals: dict[Role, float] = {role: 0 for role in ROLE_ORDER}
    for question_id, answer in latest.items():
        contribution = normalize(answer, questions.get(question_id))
        if contribution is not None:
            totals[contribution.role] += contribution.weight

    return RoleScoreVector.from_mapping(totals)
