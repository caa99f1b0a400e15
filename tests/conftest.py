"""Shared fixtures for the engine tests."""

import os

import pytest

from ministry_profile.engine.scoring import RoleScoreVector
from ministry_profile.question_models import Question, QuestionBank, Statement
from ministry_profile.question_repository import load_default_bank
from ministry_profile.roles import Role


def make_question(qid: int, role_a: Role, role_b: Role) -> Question:
    return Question(
        id=qid,
        statement_a=Statement(text=f"Stelling A{qid}", role=role_a),
        statement_b=Statement(text=f"Stelling B{qid}", role=role_b),
    )


@pytest.fixture(autouse=True)
def engine_environment(monkeypatch):
    """Keep MINISTRY_PROFILE_* settings from the developer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("MINISTRY_PROFILE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def small_bank():
    """Four questions covering every role at least once."""
    return QuestionBank(questions=[
        make_question(1, Role.APOSTLE, Role.TEACHER),
        make_question(2, Role.PROPHET, Role.EVANGELIST),
        make_question(3, Role.HERDER, Role.PROPHET),
        make_question(4, Role.EVANGELIST, Role.APOSTLE),
    ])


@pytest.fixture(scope="session")
def default_bank():
    return load_default_bank()


@pytest.fixture
def vec():
    """Factory: ``vec(apostle=5)`` → RoleScoreVector."""
    def _make(**scores: float) -> RoleScoreVector:
        return RoleScoreVector(**scores)
    return _make
