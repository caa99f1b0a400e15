"""Team and organization composition reports.

Bundles aggregation, balance, gap analysis, recommendations and pairing
suggestions for a named group of respondents. All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging

from pydantic import BaseModel, Field

from ministry_profile.engine.aggregation import (
    TeamRoleDistribution,
    aggregate,
    average,
    primary_role_counts,
    profile_type_counts,
)
from ministry_profile.engine.classifier import ProfileType
from ministry_profile.engine.compatibility import ComplementaryPair, complementary_pairs
from ministry_profile.engine.recommendations import Recommendation, team_recommendations
from ministry_profile.engine.scoring import RoleScoreVector
from ministry_profile.engine.team_balance import GapEntry, analyze_gaps, balance_score
from ministry_profile.roles import Role
from ministry_profile.settings import EngineSettings, load_settings


logger = logging.getLogger(__name__)

DEFAULT_TOP_PAIRS = 5


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class TeamReport(BaseModel):
    """Composition report for one team."""

    name: str
    member_count: int = Field(ge=0)
    distribution: TeamRoleDistribution
    average_scores: dict[Role, float]
    balance_score: int = Field(ge=0, le=100)
    gaps: list[GapEntry]
    primary_role_counts: dict[Role, int]
    profile_type_counts: dict[ProfileType, int]
    dominant_role: Role | None = None
    weakest_role: Role | None = None
    recommendations: list[Recommendation] = Field(default_factory=list)
    complementary_pairs: list[ComplementaryPair] = Field(default_factory=list)


class TeamSummary(BaseModel):
    """Condensed team line inside an organization report."""

    name: str
    member_count: int = Field(ge=0)
    balance_score: int = Field(ge=0, le=100)
    distribution: TeamRoleDistribution


class OrganizationReport(BaseModel):
    """Composition report across all teams of an organization."""

    name: str
    overall: TeamReport
    teams: list[TeamSummary]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _dominant_role(gaps: list[GapEntry]) -> Role | None:
    surplus = [g for g in gaps if g.is_surplus]
    if not surplus:
        return None
    return min(surplus, key=lambda g: g.percentage_gap).role


def _weakest_role(gaps: list[GapEntry]) -> Role | None:
    short = [g for g in gaps if g.status != "balanced"]
    if not short:
        return None
    return max(short, key=lambda g: g.percentage_gap).role


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_team_report(
    name: str,
    members: Mapping[str, RoleScoreVector],
    ceilings: Mapping[Role, float],
    top_pairs: int = DEFAULT_TOP_PAIRS,
    settings: EngineSettings | None = None,
) -> TeamReport:
    """Analyse the snapshot *members* (member id → vector) of team *name*.

    *ceilings* scales scores for pairing, see ``QuestionBank.role_ceilings``.
    Tie and complementary thresholds come from *settings*, or from
    ``load_settings()`` when none are given.
    """
    settings = settings or load_settings()
    vectors = list(members.values())
    distribution = aggregate(vectors)
    gaps = analyze_gaps(distribution)
    pairs = complementary_pairs(members, ceilings, settings.complementary_threshold)

    report = TeamReport(
        name=name,
        member_count=len(vectors),
        distribution=distribution,
        average_scores=average(vectors),
        balance_score=balance_score(distribution),
        gaps=gaps,
        primary_role_counts=primary_role_counts(vectors, settings.tie_threshold),
        profile_type_counts=profile_type_counts(vectors, settings.tie_threshold),
        dominant_role=_dominant_role(gaps),
        weakest_role=_weakest_role(gaps),
        recommendations=team_recommendations(gaps),
        complementary_pairs=pairs[:top_pairs],
    )
    logger.debug(
        "Team report %s: members=%d balance=%d weakest=%s",
        name,
        report.member_count,
        report.balance_score,
        report.weakest_role.value if report.weakest_role else "-",
    )
    return report


def build_organization_report(
    name: str,
    teams: Mapping[str, Mapping[str, RoleScoreVector]],
    ceilings: Mapping[Role, float],
    top_pairs: int = DEFAULT_TOP_PAIRS,
    settings: EngineSettings | None = None,
) -> OrganizationReport:
    """Report over every team (team name → members) of organization *name*.

    A member listed in several teams is counted once in the overall report.
    Team summaries are ordered by balance score, weakest first.
    """
    settings = settings or load_settings()
    everyone: dict[str, RoleScoreVector] = {}
    summaries: list[TeamSummary] = []
    for team_name, members in teams.items():
        everyone.update(members)
        distribution = aggregate(members.values())
        summaries.append(TeamSummary(
            name=team_name,
            member_count=len(members),
            balance_score=balance_score(distribution),
            distribution=distribution,
        ))

    overall = build_team_report(name, everyone, ceilings, top_pairs, settings)
    return OrganizationReport(
        name=name,
        overall=overall,
        teams=sorted(summaries, key=lambda s: s.balance_score),
    )
