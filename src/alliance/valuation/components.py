"""Value decomposition — direct, indirect and long-term partnership value.

Direct value comes from measurable outputs.  Indirect and long-term value
are modelled as tiered fractions of the investment; every tier must be
present in its table, there is no silent fallback to zero.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from src.alliance.config import ValuationTables, settings
from src.alliance.errors import InvalidLevel

logger = logging.getLogger(__name__)


def tier_multiplier(table: Mapping[str, float], level: str, table_name: str) -> float:
    try:
        return table[level]
    except (KeyError, TypeError):
        raise InvalidLevel(table_name, level) from None


def compute_direct_value(
    exposure: float | None = 0.0,
    lead_count: float | None = 0,
    lead_value: float | None = 0.0,
    conversion_count: float | None = 0,
    conversion_value: float | None = 0.0,
) -> float:
    """Exposure plus lead and conversion value.  Missing inputs count as 0."""
    exposure = exposure or 0.0
    leads = (lead_count or 0) * (lead_value or 0.0)
    conversions = (conversion_count or 0) * (conversion_value or 0.0)
    return exposure + leads + conversions


def compute_indirect_value(
    investment: float,
    perception_level: str,
    engagement_level: str,
    tables: ValuationTables | None = None,
) -> float:
    tiers = (tables or settings.valuation_tables).indirect
    perception = investment * tier_multiplier(tiers, perception_level, "brand perception")
    engagement = investment * tier_multiplier(
        tiers, engagement_level, "audience engagement",
    )
    return perception + engagement


def compute_long_term_value(
    investment: float,
    duration_months: int,
    relationship_level: str,
    innovation_level: str,
    tables: ValuationTables | None = None,
) -> float:
    """Relationship value (annual, prorated by duration) plus innovation value."""
    t = tables or settings.valuation_tables
    relationship = investment * tier_multiplier(
        t.relationship, relationship_level, "relationship value",
    )
    innovation = investment * tier_multiplier(
        t.innovation, innovation_level, "innovation potential",
    )
    return relationship * (duration_months / 12) + innovation


def roi_percent(total_value: float, investment: float) -> float:
    """Return on investment in percent.  `investment` must be positive."""
    return (total_value - investment) / investment * 100
