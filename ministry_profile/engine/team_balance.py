"""Team balance analysis — evenness scoring and role gap detection.

All functions are *pure*.
"""

from __future__ import annotations

import math
from typing import Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ministry_profile.engine.scoring import RoleTotals
from ministry_profile.roles import IDEAL_PERCENTAGE, ROLE_ORDER, Role


GapStatus = Literal["balanced", "moderate", "severe"]

# Scale cap for the variance of the role percentages. Must not change:
# balance scores are compared across teams and over time.
# The variance is the mean of the squared deviations from the ideal share,
# not their sum as in the legacy dashboard, so scores are not comparable
# with figures that dashboard produced.
VARIANCE_SCALE = 1000.0

SEVERE_GAP_ABOVE = 10.0
MODERATE_GAP_ABOVE = 5.0

# share above ideal × factor counts as a surplus role
SURPLUS_FACTOR = 1.3


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class GapEntry(BaseModel):
    """Shortfall of a single role against the ideal even share."""

    model_config = ConfigDict(frozen=True)

    role: Role
    actual_percentage: float = Field(ge=0.0, le=100.0)
    percentage_gap: float
    status: GapStatus

    @property
    def is_surplus(self) -> bool:
        return self.actual_percentage > IDEAL_PERCENTAGE * SURPLUS_FACTOR


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def role_percentages(distribution: RoleTotals) -> dict[Role, float]:
    """Each role's share of the total in percent; all zeros when the total is 0."""
    total = distribution.total
    if total == 0:
        return {role: 0.0 for role in ROLE_ORDER}
    return {role: distribution.get(role) / total * 100.0 for role in ROLE_ORDER}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def gap_status(percentage_gap: float) -> GapStatus:
    """Severity of an under-representation; over-representation is never a gap."""
    if percentage_gap > SEVERE_GAP_ABOVE:
        return "severe"
    if percentage_gap > MODERATE_GAP_ABOVE:
        return "moderate"
    return "balanced"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def balance_score(distribution: RoleTotals) -> int:
    """Evenness of *distribution* as an integer in [0, 100].

    100 means every role holds exactly the ideal share; a group whose
    score sits in a single role, or an empty group, scores 0.
    """
    if distribution.total == 0:
        return 0
    shares = np.array(list(role_percentages(distribution).values()), dtype=float)
    variance = float(np.mean((shares - IDEAL_PERCENTAGE) ** 2))
    normalized = min(variance / VARIANCE_SCALE, 1.0)
    return max(0, min(100, _round_half_up((1.0 - normalized) * 100.0)))


def analyze_gaps(distribution: RoleTotals) -> list[GapEntry]:
    """One gap entry per role, in fixed role order.

    ``percentage_gap`` is ideal minus actual and may be negative.
    """
    entries: list[GapEntry] = []
    for role, actual in role_percentages(distribution).items():
        gap = IDEAL_PERCENTAGE - actual
        entries.append(GapEntry(
            role=role,
            actual_percentage=actual,
            percentage_gap=gap,
            status=gap_status(gap),
        ))
    return entries
