"""Recommendation generator.

Produces personal advice from a respondent's profile and composition
advice from a team's gap analysis. All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ministry_profile.engine.classifier import Profile, ProfileType, classify
from ministry_profile.engine.scoring import RoleScoreVector
from ministry_profile.engine.team_balance import GapEntry
from ministry_profile.roles import Role, get_role_info, role_label


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PersonalRecommendation(BaseModel):
    """Coaching advice for one respondent."""

    primary_role: Role | None = None
    secondary_role: Role | None = None
    profile_type: ProfileType | None = None
    dominance_ratio: float = 0.0
    strengths: list[str] = Field(default_factory=list)
    growth_areas: list[str] = Field(default_factory=list)
    team_contributions: list[str] = Field(default_factory=list)
    personal_growth_suggestions: list[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """A single team composition recommendation."""

    category: str  # "tekort", "overschot", "balans"
    title: str
    description: str
    target_roles: list[Role] = Field(default_factory=list)
    priority: int = Field(default=2, ge=1, le=3)  # 1=high 3=low


# ---------------------------------------------------------------------------
# Combination hints for primary → secondary pairs
# ---------------------------------------------------------------------------
_COMBINATION_HINTS: dict[tuple[Role, Role], str] = {
    (Role.APOSTLE, Role.PROPHET): (
        "Je combinatie van visie en onderscheidingsvermogen maakt je sterk in het initiëren van "
        "betekenisvolle verandering."
    ),
    (Role.APOSTLE, Role.TEACHER): (
        "Je combinatie van strategisch denken en analytisch vermogen maakt je sterk in het ontwikkelen "
        "van goed onderbouwde plannen."
    ),
    (Role.PROPHET, Role.TEACHER): (
        "Je combinatie van onderscheidingsvermogen en analytisch denken maakt je sterk in het doorgronden "
        "van complexe situaties."
    ),
    (Role.HERDER, Role.EVANGELIST): (
        "Je combinatie van zorgzaamheid en enthousiasme maakt je sterk in het inspireren en motiveren van "
        "mensen in persoonlijke groei."
    ),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def personal_recommendations(vector: RoleScoreVector, profile: Profile | None = None) -> PersonalRecommendation:
    """Advice for the respondent owning *vector*.

    An all-zero vector yields an empty recommendation.
    """
    profile = profile or classify(vector)
    if profile.primary_role is None:
        return PersonalRecommendation()

    info = get_role_info(profile.primary_role)
    rec = PersonalRecommendation(
        primary_role=profile.primary_role,
        secondary_role=profile.secondary_role,
        profile_type=profile.profile_type,
        dominance_ratio=profile.dominance_ratio,
        strengths=list(info.strengths),
        growth_areas=list(info.growth_areas),
        team_contributions=list(info.team_contributions),
    )

    primary_label = info.label
    secondary = profile.secondary_role
    if secondary is not None and profile.profile_type != "balanced" and not profile.is_tied:
        rec.personal_growth_suggestions.append(
            f"Je {role_label(secondary)} aspecten kunnen je helpen om een betere {primary_label} te zijn."
        )
        hint = _COMBINATION_HINTS.get((profile.primary_role, secondary))
        if hint:
            rec.personal_growth_suggestions.append(hint)

    if profile.profile_type == "balanced":
        rec.personal_growth_suggestions.append(
            "Je hebt een evenwichtig profiel wat je veelzijdig maakt, maar probeer te voorkomen dat je te "
            "veel verschillende rollen tegelijk probeert te vervullen."
        )
    elif profile.profile_type == "specialized":
        rec.personal_growth_suggestions.append(
            f"Je hebt een uitgesproken {primary_label} profiel. Zoek teamleden die complementaire rollen "
            "hebben om een volledig team te vormen."
        )
    return rec


def team_recommendations(gaps: list[GapEntry]) -> list[Recommendation]:
    """Return a sorted list of recommendations (priority asc)."""
    recs: list[Recommendation] = []
    for entry in gaps:
        label = role_label(entry.role)
        if entry.status == "severe":
            recs.append(Recommendation(
                category="tekort",
                title=f"{label} ontbreekt grotendeels",
                description=(
                    f"Het team heeft dringend behoefte aan meer {label} energie "
                    f"({entry.actual_percentage:.0f}% van de scores)."
                ),
                target_roles=[entry.role],
                priority=1,
            ))
        elif entry.status == "moderate":
            recs.append(Recommendation(
                category="tekort",
                title=f"Versterk de {label} rol",
                description=f"Het team heeft behoefte aan meer {label} energie.",
                target_roles=[entry.role],
                priority=2,
            ))
        elif entry.is_surplus:
            recs.append(Recommendation(
                category="overschot",
                title=f"{label} is dominant aanwezig",
                description=(
                    f"Deze bediening is dominant aanwezig. Overweeg om de {label} energie strategisch in te zetten."
                ),
                target_roles=[entry.role],
                priority=3,
            ))

    if gaps and not recs:
        recs.append(Recommendation(
            category="balans",
            title="Evenwichtig team",
            description="Er is een goede balans van alle bedieningen in het team.",
            target_roles=[entry.role for entry in gaps],
            priority=3,
        ))

    return sorted(recs, key=lambda r: r.priority)
