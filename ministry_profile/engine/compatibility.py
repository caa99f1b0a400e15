"""Complementary-profile matching between respondents.

All functions are *pure* — no side-effects, no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ministry_profile.engine.scoring import RoleScoreVector
from ministry_profile.roles import ROLE_ORDER, Role
from ministry_profile.settings import DEFAULT_COMPLEMENTARY_THRESHOLD


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class ComplementaryPair(BaseModel):
    """Normalized distance for a member ↔ member pair."""

    model_config = ConfigDict(frozen=True)

    member_a_id: str
    member_b_id: str
    distance: float = Field(ge=0.0, le=1.0)
    highly_complementary: bool = False


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------
def _as_array(vector: RoleScoreVector) -> np.ndarray:
    return np.array([vector.get(role) for role in ROLE_ORDER], dtype=float)


def _scale_array(ceilings: Mapping[Role, float]) -> np.ndarray:
    scale = np.array([float(ceilings.get(role, 0)) for role in ROLE_ORDER], dtype=float)
    if np.any(scale < 0):
        raise ValueError("Role ceilings must not be negative")
    return scale


def _scaled(vector: RoleScoreVector, scale: np.ndarray) -> np.ndarray:
    # A role no question can reach contributes 0 for everyone.
    values = np.divide(_as_array(vector), scale, out=np.zeros_like(scale), where=scale > 0)
    return np.minimum(values, 1.0)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def distance(a: RoleScoreVector, b: RoleScoreVector) -> float:
    """Mean absolute per-role difference of two raw vectors."""
    return float(np.mean(np.abs(_as_array(a) - _as_array(b))))


def normalized_distance(
    a: RoleScoreVector,
    b: RoleScoreVector,
    ceilings: Mapping[Role, float],
) -> float:
    """Mean absolute per-role difference after scaling each role to 0..1.

    *ceilings* is the highest reachable score per role, usually
    ``QuestionBank.role_ceilings()``. Scores above a ceiling are capped and
    roles with a zero ceiling count as no difference.
    """
    scale = _scale_array(ceilings)
    return float(np.mean(np.abs(_scaled(a, scale) - _scaled(b, scale))))


def is_highly_complementary(
    a: RoleScoreVector,
    b: RoleScoreVector,
    ceilings: Mapping[Role, float],
    threshold: float = DEFAULT_COMPLEMENTARY_THRESHOLD,
) -> bool:
    return normalized_distance(a, b, ceilings) > threshold


# ---------------------------------------------------------------------------
# Batch helpers
# ---------------------------------------------------------------------------
def complementary_pairs(
    members: Mapping[str, RoleScoreVector],
    ceilings: Mapping[Role, float],
    threshold: float = DEFAULT_COMPLEMENTARY_THRESHOLD,
) -> list[ComplementaryPair]:
    """Upper-triangle pair list, most complementary first.

    Ties keep member order so the result is deterministic.
    """
    results: list[ComplementaryPair] = []
    items = list(members.items())
    for i, (id_a, va) in enumerate(items):
        for id_b, vb in items[i + 1:]:
            d = normalized_distance(va, vb, ceilings)
            results.append(ComplementaryPair(
                member_a_id=id_a,
                member_b_id=id_b,
                distance=d,
                highly_complementary=d > threshold,
            ))
    return sorted(results, key=lambda p: -p.distance)


def best_partners(
    reference_id: str,
    members: Mapping[str, RoleScoreVector],
    ceilings: Mapping[Role, float],
    threshold: float = DEFAULT_COMPLEMENTARY_THRESHOLD,
) -> list[ComplementaryPair]:
    """Pairs of *reference_id* with every other member, most complementary first.

    Raises:
        KeyError: If *reference_id* is not among *members*.
    """
    reference = members[reference_id]
    results: list[ComplementaryPair] = []
    for other_id, other in members.items():
        if other_id == reference_id:
            continue
        d = normalized_distance(reference, other, ceilings)
        results.append(ComplementaryPair(
            member_a_id=reference_id,
            member_b_id=other_id,
            distance=d,
            highly_complementary=d > threshold,
        ))
    return sorted(results, key=lambda p: -p.distance)
