"""Profile classification: primary / secondary role and profile type.

All functions are *pure*.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ministry_profile.engine.scoring import RoleScoreVector
from ministry_profile.roles import ROLE_PRIORITY, Role
from ministry_profile.settings import DEFAULT_TIE_THRESHOLD


logger = logging.getLogger(__name__)

ProfileType = Literal["specialized", "moderate", "balanced"]

# primary role's share of the total score
BALANCED_SHARE_BELOW = 0.35
SPECIALIZED_SHARE_ABOVE = 0.50


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class Profile(BaseModel):
    """Classification of one respondent's role-score vector."""

    model_config = ConfigDict(frozen=True)

    primary_role: Role | None
    secondary_role: Role | None
    dominance_ratio: float = Field(ge=0.0, le=1.0)
    profile_type: ProfileType
    primary_share: float = Field(default=0.0, ge=0.0, le=1.0)
    tie_threshold: float = Field(default=DEFAULT_TIE_THRESHOLD, ge=0.0, le=1.0)

    @property
    def is_tied(self) -> bool:
        """Primary and secondary are too close to call."""
        return self.primary_role is not None and self.dominance_ratio < self.tie_threshold


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def rank_roles(vector: RoleScoreVector) -> list[tuple[Role, float]]:
    """(role, score) pairs, highest score first, ties by role priority."""
    return sorted(vector.as_dict().items(), key=lambda item: (-item[1], ROLE_PRIORITY[item[0]]))


def classify(vector: RoleScoreVector, tie_threshold: float = DEFAULT_TIE_THRESHOLD) -> Profile:
    """Derive the profile of *vector*."""
    total = vector.total
    if total == 0:
        logger.warning("Classifying an all-zero role-score vector")
        return Profile(
            primary_role=None,
            secondary_role=None,
            dominance_ratio=0.0,
            profile_type="balanced",
            tie_threshold=tie_threshold,
        )

    ranked = rank_roles(vector)
    (primary, primary_score), (secondary, secondary_score) = ranked[0], ranked[1]

    dominance = (primary_score - secondary_score) / primary_score if primary_score > 0 else 0.0
    share = primary_score / total

    profile = Profile(
        primary_role=primary,
        secondary_role=secondary,
        dominance_ratio=dominance,
        profile_type=_profile_type(share, dominance, tie_threshold),
        primary_share=share,
        tie_threshold=tie_threshold,
    )
    logger.debug(
        "Profile: primary=%s secondary=%s dominance=%.2f share=%.2f type=%s",
        primary.value,
        secondary.value,
        dominance,
        share,
        profile.profile_type,
    )
    return profile


def _profile_type(share: float, dominance: float, tie_threshold: float) -> ProfileType:
    if share < BALANCED_SHARE_BELOW:
        return "balanced"
    # a primary role tied with its runner-up is not a specialization
    if share > SPECIALIZED_SHARE_ABOVE and dominance >= tie_threshold:
        return "specialized"
    return "moderate"
