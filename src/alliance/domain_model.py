"""Deterministic domain model — lookup tables and helpers shared by both engines.

No I/O, no state. The tables here are the defaults; `config.Settings`
exposes each of them as an overridable value.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Alignment dimensions
# ---------------------------------------------------------------------------

DIMENSIONS: tuple[str, ...] = ("values", "audience", "goals", "industry")

DIMENSION_LABELS: dict[str, str] = {
    "values": "value alignment",
    "audience": "audience complementarity",
    "goals": "goal compatibility",
    "industry": "industry relevance",
}

DEFAULT_DIMENSION_WEIGHTS: dict[str, int] = {
    "values": 30,
    "audience": 25,
    "goals": 25,
    "industry": 20,
}

# (brand industry, organization type)
STRATEGIC_PAIRS: tuple[tuple[str, str], ...] = (
    ("technology", "sports_team"),
    ("retail", "event"),
    ("finance", "nonprofit"),
    ("healthcare", "education"),
)

WILDCARD_INDUSTRY = "all"
GLOBAL_REGION = "global"


# ---------------------------------------------------------------------------
# Valuation tiers (fraction of investment)
# ---------------------------------------------------------------------------

INDIRECT_TIERS: dict[str, float] = {
    "none": 0.0,
    "low": 0.10,
    "medium": 0.25,
    "high": 0.50,
    "very_high": 0.75,
}

# No very_high tier: relationship value is annual and prorated by duration.
RELATIONSHIP_TIERS: dict[str, float] = {
    "none": 0.0,
    "low": 0.05,
    "medium": 0.15,
    "high": 0.30,
}

INNOVATION_TIERS: dict[str, float] = {
    "none": 0.0,
    "low": 0.05,
    "medium": 0.15,
    "high": 0.30,
    "very_high": 0.50,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def round_half_up(x: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def is_strategic_pair(
    industry: str | None,
    org_type: str | None,
    pairs: tuple[tuple[str, str], ...] = STRATEGIC_PAIRS,
) -> bool:
    for brand_industry, partner_type in pairs:
        if industry == brand_industry and org_type == partner_type:
            return True
    return False


def dimension_label(dimension: str) -> str:
    return DIMENSION_LABELS.get(dimension, dimension.replace("_", " "))
