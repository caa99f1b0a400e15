"""Role definitions for the five-fold ministry profile.

Defines the closed set of five roles, their tie-break priority and the
display catalog (label, colour, description, strengths, growth areas).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Role enum
# ---------------------------------------------------------------------------
class Role(str, Enum):
    """One of the five ministry roles, declared in priority order."""

    APOSTLE = "apostle"
    PROPHET = "prophet"
    EVANGELIST = "evangelist"
    HERDER = "herder"
    TEACHER = "teacher"


# Tie-break and output order for every per-role listing.
ROLE_ORDER: tuple[Role, ...] = tuple(Role)

ROLE_PRIORITY: dict[Role, int] = {role: idx for idx, role in enumerate(ROLE_ORDER)}

IDEAL_PERCENTAGE: float = 100.0 / len(ROLE_ORDER)


# ---------------------------------------------------------------------------
# Catalog model
# ---------------------------------------------------------------------------
class RoleInfo(BaseModel):
    """Display and coaching information for a single role."""

    role: Role
    label: str = Field(..., min_length=1, max_length=30)
    color: str = Field(default="#6B7280")
    description: str = Field(..., min_length=5)
    strengths: list[str] = Field(default_factory=list, min_length=1)
    growth_areas: list[str] = Field(default_factory=list, min_length=1)
    team_contributions: list[str] = Field(default_factory=list, min_length=1)


# ---------------------------------------------------------------------------
# Pre-defined catalog
# ---------------------------------------------------------------------------
ROLE_CATALOG: dict[Role, RoleInfo] = {
    Role.APOSTLE: RoleInfo(
        role=Role.APOSTLE,
        label="Apostel",
        color="#4097db",
        description=(
            "Je bent een pionier en visionair. Je ziet het grote plaatje en bent gericht op het bouwen "
            "en uitbreiden van Gods Koninkrijk. Je legt graag nieuwe fundamenten en houdt van uitdaging "
            "en verandering."
        ),
        strengths=[
            "Visie ontwikkelen en uitdragen",
            "Strategisch denken en plannen",
            "Nieuwe initiatieven starten",
            "Leiderschap in veranderingsprocessen",
        ],
        growth_areas=[
            "Meer geduld hebben met mensen die langzamer veranderen",
            "Aandacht voor details en implementatie",
            "Verbinden met de emotionele behoeften van anderen",
        ],
        team_contributions=[
            "Richting geven aan het team",
            "Vernieuwing stimuleren",
            "Vastgelopen situaties doorbreken",
        ],
    ),
    Role.PROPHET: RoleInfo(
        role=Role.PROPHET,
        label="Profeet",
        color="#a8e3c9",
        description=(
            "Je hebt een sterk vermogen om Gods stem te horen en zijn waarheid te spreken. Je bent vaak "
            "gericht op het zien van wat verkeerd gaat en hoe het verbeterd kan worden."
        ),
        strengths=[
            "Diepe spirituele inzichten delen",
            "Waarheid spreken in complexe situaties",
            "Onrecht en problemen identificeren",
            "Mensen uitdagen om te groeien",
        ],
        growth_areas=[
            "Meer geduld en mededogen tonen",
            "Communicatie verzachten zonder de boodschap te verliezen",
            "Praktische implementatie van visie",
        ],
        team_contributions=[
            "Het team wakker houden en uitdagen",
            "Scherp houden op de kernwaarden",
            "Waarschuwen voor verkeerde richtingen",
        ],
    ),
    Role.EVANGELIST: RoleInfo(
        role=Role.EVANGELIST,
        label="Evangelist",
        color="#ffbdcb",
        description=(
            "Je hebt een passie om het goede nieuws te delen met anderen. Je bent enthousiast over het "
            "bereiken van mensen met de boodschap van redding en genade."
        ),
        strengths=[
            "Enthousiasmeren en inspireren",
            "Netwerken en verbindingen leggen",
            "Communiceren met verschillende doelgroepen",
            "Mensen mobiliseren voor een doel",
        ],
        growth_areas=[
            "Diepgang in relaties ontwikkelen",
            "Analytisch denken versterken",
            "Langetermijnprocessen volhouden",
        ],
        team_contributions=[
            "Positieve energie brengen",
            "Nieuwe mensen betrekken",
            "De boodschap helder communiceren",
        ],
    ),
    Role.HERDER: RoleInfo(
        role=Role.HERDER,
        label="Herder",
        color="#ffd9a8",
        description=(
            "Je hebt een groot hart voor mensen en zorgt graag voor anderen. Je bent gericht op relaties, "
            "emotionele gezondheid en het creëren van een veilige omgeving."
        ),
        strengths=[
            "Zorg dragen voor het welzijn van anderen",
            "Luisteren en begrijpen",
            "Veilige omgeving creëren",
            "Relaties opbouwen en onderhouden",
        ],
        growth_areas=[
            "Grenzen stellen en moeilijke gesprekken voeren",
            "Strategisch denken ontwikkelen",
            "Balans vinden tussen zorg voor anderen en zelfzorg",
        ],
        team_contributions=[
            "Zorgen voor teamcohesie",
            "Ondersteuning bieden in moeilijke tijden",
            "Conflicten helpen oplossen",
        ],
    ),
    Role.TEACHER: RoleInfo(
        role=Role.TEACHER,
        label="Leraar",
        color="#b79cef",
        description=(
            "Je hebt een natuurlijke aanleg voor het begrijpen en uitleggen van complexe concepten. Je "
            "geniet ervan om waarheid te ontdekken en te delen met anderen."
        ),
        strengths=[
            "Kennis systematisch ordenen en delen",
            "Complexe concepten helder uitleggen",
            "Grondig onderzoek doen",
            "Waarheid en nauwkeurigheid bewaken",
        ],
        growth_areas=[
            "Emotionele intelligentie ontwikkelen",
            "Praktische toepassing van kennis",
            "Flexibiliteit in denken en handelen",
        ],
        team_contributions=[
            "Grondige analyse van situaties",
            "Training en toerusting van teamleden",
            "Bewaken van kwaliteit en standaarden",
        ],
    ),
}


def get_role_info(role: Role | str) -> RoleInfo:
    """Look up catalog information for *role* (enum member or value)."""
    return ROLE_CATALOG[Role(role)]


def role_label(role: Role | str) -> str:
    """Return the display label for *role*."""
    return get_role_info(role).label
