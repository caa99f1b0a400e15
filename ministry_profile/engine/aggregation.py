"""Team / organization aggregation of role-score vectors.

All functions are *pure* and independent of member order.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
import logging

import numpy as np

from ministry_profile.engine.classifier import ProfileType, classify
from ministry_profile.engine.scoring import RoleScoreVector, RoleTotals
from ministry_profile.roles import ROLE_ORDER, Role
from ministry_profile.settings import DEFAULT_TIE_THRESHOLD


logger = logging.getLogger(__name__)

PROFILE_TYPES: tuple[ProfileType, ...] = ("balanced", "moderate", "specialized")


class TeamRoleDistribution(RoleTotals):
    """Summed role scores of a group of respondents."""


def _as_matrix(vectors: Iterable[RoleScoreVector]) -> np.ndarray:
    rows = [[v.get(role) for role in ROLE_ORDER] for v in vectors]
    return np.array(rows, dtype=float).reshape(-1, len(ROLE_ORDER))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def aggregate(vectors: Iterable[RoleScoreVector]) -> TeamRoleDistribution:
    """Elementwise sum of *vectors*; an empty group gives all zeros."""
    matrix = _as_matrix(vectors)
    if matrix.shape[0] == 0:
        logger.warning("Aggregating an empty group")
    sums = matrix.sum(axis=0)
    return TeamRoleDistribution.from_mapping(
        {role: float(value) for role, value in zip(ROLE_ORDER, sums)}
    )


def average(vectors: Iterable[RoleScoreVector]) -> dict[Role, float]:
    """Per-role mean score rounded to 2 decimals (zeros for an empty group)."""
    matrix = _as_matrix(vectors)
    if matrix.shape[0] == 0:
        return {role: 0.0 for role in ROLE_ORDER}
    means = matrix.mean(axis=0)
    return {role: round(float(value), 2) for role, value in zip(ROLE_ORDER, means)}


def primary_role_counts(
    vectors: Iterable[RoleScoreVector],
    tie_threshold: float = DEFAULT_TIE_THRESHOLD,
) -> dict[Role, int]:
    """Number of members per primary role; all-zero vectors are skipped."""
    counts: Counter[Role] = Counter()
    for v in vectors:
        profile = classify(v, tie_threshold)
        if profile.primary_role is not None:
            counts[profile.primary_role] += 1
    return {role: counts.get(role, 0) for role in ROLE_ORDER}


def profile_type_counts(
    vectors: Iterable[RoleScoreVector],
    tie_threshold: float = DEFAULT_TIE_THRESHOLD,
) -> dict[ProfileType, int]:
    """Number of members per profile type; all-zero vectors are skipped."""
    counts: Counter[str] = Counter()
    for v in vectors:
        if v.total == 0:
            continue
        counts[classify(v, tie_threshold).profile_type] += 1
    return {ptype: counts.get(ptype, 0) for ptype in PROFILE_TYPES}
