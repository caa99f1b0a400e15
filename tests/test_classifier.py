"""Tests for ministry_profile/engine/classifier.py."""

import pytest

from ministry_profile.engine.classifier import classify, rank_roles
from ministry_profile.roles import Role


class TestRankRoles:
    def test_descending_by_score(self, vec):
        ranked = rank_roles(vec(apostle=1, prophet=9, evangelist=4, herder=0, teacher=6))
        assert [r for r, _ in ranked] == [Role.PROPHET, Role.TEACHER, Role.EVANGELIST, Role.APOSTLE, Role.HERDER]

    def test_ties_follow_role_priority(self, vec):
        ranked = rank_roles(vec(teacher=10, herder=10, apostle=10))
        assert [r for r, _ in ranked][:3] == [Role.APOSTLE, Role.HERDER, Role.TEACHER]


class TestClassify:
    def test_zero_vector(self, vec):
        profile = classify(vec())
        assert profile.primary_role is None
        assert profile.secondary_role is None
        assert profile.dominance_ratio == 0.0
        assert profile.profile_type == "balanced"
        assert not profile.is_tied

    def test_primary_and_secondary(self, vec):
        profile = classify(vec(apostle=40, teacher=20, herder=10))
        assert profile.primary_role == Role.APOSTLE
        assert profile.secondary_role == Role.TEACHER
        assert profile.dominance_ratio == pytest.approx(0.5)

    def test_single_role_is_specialized(self, vec):
        profile = classify(vec(evangelist=5))
        assert profile.primary_role == Role.EVANGELIST
        # second entry is the highest-priority zero role
        assert profile.secondary_role == Role.APOSTLE
        assert profile.dominance_ratio == 1.0
        assert profile.profile_type == "specialized"

    def test_tie_breaks_by_priority(self, vec):
        profile = classify(vec(teacher=30, prophet=30))
        assert profile.primary_role == Role.PROPHET
        assert profile.secondary_role == Role.TEACHER
        assert profile.dominance_ratio == 0.0
        assert profile.is_tied

    def test_tie_threshold(self, vec):
        assert classify(vec(apostle=100, prophet=91)).is_tied
        assert not classify(vec(apostle=100, prophet=90)).is_tied

    def test_custom_tie_threshold(self, vec):
        assert classify(vec(apostle=100, prophet=80), tie_threshold=0.25).is_tied

    def test_balanced_profile(self, vec):
        # primary share 32/112 < 0.35
        profile = classify(vec(apostle=32, prophet=24, evangelist=20, herder=20, teacher=16))
        assert profile.profile_type == "balanced"

    def test_moderate_profile(self, vec):
        # primary share 40/100
        profile = classify(vec(apostle=40, prophet=20, evangelist=20, herder=10, teacher=10))
        assert profile.profile_type == "moderate"
        assert profile.primary_share == pytest.approx(0.4)

    def test_specialized_profile(self, vec):
        profile = classify(vec(herder=60, teacher=20, apostle=10, prophet=5, evangelist=5))
        assert profile.profile_type == "specialized"

    def test_high_share_but_tied_is_moderate(self, vec):
        profile = classify(vec(apostle=51, prophet=49))
        assert profile.is_tied
        assert profile.profile_type == "moderate"

    def test_deterministic(self, vec):
        v = vec(apostle=12, prophet=12, evangelist=3, herder=7, teacher=1)
        assert classify(v) == classify(v)
