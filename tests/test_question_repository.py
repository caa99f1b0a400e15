"""Tests for ministry_profile/question_repository.py."""

import json
import os
from unittest.mock import patch

import pytest

from ministry_profile.question_repository import QuestionBankRepository, load_default_bank
from ministry_profile.roles import ROLE_ORDER


@pytest.fixture
def bank_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps({
        "version": "2.0",
        "questions": [
            {
                "id": 7,
                "statement_a": {"text": "Ik zie het grote plaatje", "role": "apostle"},
                "statement_b": {"text": "Ik leg graag dingen uit", "role": "teacher"},
            }
        ],
    }), encoding="utf-8")
    return path


class TestDefaultBank:
    def test_forty_questions(self):
        bank = load_default_bank()
        assert len(bank) == 40
        assert [q.id for q in bank.questions] == list(range(1, 41))

    def test_every_role_measured(self):
        bank = load_default_bank()
        roles = {q.statement_a.role for q in bank.questions} | {q.statement_b.role for q in bank.questions}
        assert roles == set(ROLE_ORDER)

    def test_no_question_pairs_a_role_with_itself(self):
        bank = load_default_bank()
        assert all(q.statement_a.role != q.statement_b.role for q in bank.questions)

    def test_bank_path_from_environment(self, bank_file):
        with patch.dict(os.environ, {"MINISTRY_PROFILE_QUESTION_BANK": str(bank_file)}, clear=True):
            bank = load_default_bank()
        assert bank.version == "2.0"
        assert [q.id for q in bank] == [7]

    def test_missing_configured_bank(self, tmp_path):
        env = {"MINISTRY_PROFILE_QUESTION_BANK": str(tmp_path / "elders.json")}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError, match="Failed to load question bank"):
                load_default_bank()


class TestQuestionBankRepository:
    def test_load_custom_file(self, bank_file):
        bank = QuestionBankRepository(bank_file).load()
        assert bank.version == "2.0"
        assert len(bank) == 1
        assert bank.get(7).statement_a.text == "Ik zie het grote plaatje"

    def test_load_is_cached(self, bank_file):
        repo = QuestionBankRepository(bank_file)
        assert repo.load() is repo.load()

    def test_reload_reads_again(self, bank_file):
        repo = QuestionBankRepository(bank_file)
        first = repo.load()
        assert repo.reload() is not first

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="Failed to load question bank"):
            QuestionBankRepository(tmp_path / "nope.json").load()

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to load question bank"):
            QuestionBankRepository(path).load()

    def test_invalid_role_in_file(self, tmp_path):
        path = tmp_path / "bad_role.json"
        path.write_text(json.dumps({
            "questions": [
                {
                    "id": 1,
                    "statement_a": {"text": "x", "role": "bishop"},
                    "statement_b": {"text": "y", "role": "teacher"},
                }
            ],
        }), encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to load question bank"):
            QuestionBankRepository(path).load()
