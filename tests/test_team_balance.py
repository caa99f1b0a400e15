"""Tests for ministry_profile/engine/team_balance.py."""

import pytest

from ministry_profile.engine.aggregation import TeamRoleDistribution, aggregate
from ministry_profile.engine.team_balance import (
    analyze_gaps,
    balance_score,
    gap_status,
    role_percentages,
)
from ministry_profile.roles import ROLE_ORDER, Role


def dist(**scores):
    return TeamRoleDistribution(**scores)


class TestBalanceScore:
    def test_empty_distribution_scores_zero(self):
        assert balance_score(dist()) == 0

    def test_perfectly_even(self):
        assert balance_score(dist(apostle=7, prophet=7, evangelist=7, herder=7, teacher=7)) == 100

    def test_single_role(self):
        assert balance_score(dist(teacher=42)) == 0

    def test_two_roles_at_half(self, vec):
        # shares 50/50/0/0/0 → variance (2*30² + 3*20²)/5 = 600 → 1 - 0.6
        distribution = aggregate([vec(apostle=70), vec(prophet=70)])
        assert balance_score(distribution) == 40

    def test_mild_imbalance_averages_over_roles(self):
        # shares 30/20/20/20/10: squared deviations sum to 200, variance 40 → 96 (a summed variance gives 80)
        distribution = dist(apostle=30, prophet=20, evangelist=20, herder=20, teacher=10)
        assert balance_score(distribution) == 96

    @pytest.mark.parametrize(
        "scores",
        [
            {"apostle": 1},
            {"apostle": 1, "prophet": 1},
            {"apostle": 5, "prophet": 3, "evangelist": 1},
            {"apostle": 100, "prophet": 1, "evangelist": 1, "herder": 1, "teacher": 1},
            {"herder": 0.5, "teacher": 0.25},
        ],
    )
    def test_bounds(self, scores):
        assert 0 <= balance_score(dist(**scores)) <= 100


class TestRolePercentages:
    def test_zero_total(self):
        assert set(role_percentages(dist()).values()) == {0.0}

    def test_shares_sum_to_hundred(self):
        shares = role_percentages(dist(apostle=3, prophet=1, teacher=4))
        assert sum(shares.values()) == pytest.approx(100.0)
        assert shares[Role.TEACHER] == pytest.approx(50.0)


class TestGapStatus:
    @pytest.mark.parametrize(
        "gap, status",
        [
            (20.0, "severe"),
            (10.01, "severe"),
            (10.0, "moderate"),
            (5.01, "moderate"),
            (5.0, "balanced"),
            (0.0, "balanced"),
            (-30.0, "balanced"),
        ],
    )
    def test_thresholds(self, gap, status):
        assert gap_status(gap) == status


class TestAnalyzeGaps:
    def test_fixed_role_order(self):
        gaps = analyze_gaps(dist(teacher=5, apostle=1))
        assert [g.role for g in gaps] == list(ROLE_ORDER)

    def test_absent_roles_are_severe(self, vec):
        gaps = {g.role: g for g in analyze_gaps(aggregate([vec(apostle=70), vec(prophet=70)]))}
        for role in (Role.EVANGELIST, Role.HERDER, Role.TEACHER):
            assert gaps[role].percentage_gap == 20
            assert gaps[role].status == "severe"

    def test_over_represented_role_is_negative_and_balanced(self, vec):
        gaps = {g.role: g for g in analyze_gaps(aggregate([vec(apostle=70), vec(prophet=70)]))}
        assert gaps[Role.APOSTLE].percentage_gap == pytest.approx(-30.0)
        assert gaps[Role.APOSTLE].status == "balanced"
        assert gaps[Role.APOSTLE].is_surplus

    def test_zero_total_is_maximal_gap(self):
        gaps = analyze_gaps(dist())
        assert all(g.percentage_gap == 20 for g in gaps)
        assert all(g.status == "severe" for g in gaps)

    def test_moderate_gap(self):
        # teacher share 12.5% → gap 7.5
        gaps = {g.role: g for g in analyze_gaps(dist(apostle=20, prophet=20, evangelist=20, herder=10, teacher=10))}
        assert gaps[Role.TEACHER].status == "moderate"

    def test_independent_of_team_size(self):
        small = analyze_gaps(dist(apostle=2, prophet=1, teacher=1))
        large = analyze_gaps(dist(apostle=200, prophet=100, teacher=100))
        assert [(g.percentage_gap, g.status) for g in small] == [(g.percentage_gap, g.status) for g in large]
