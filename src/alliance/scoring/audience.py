"""Dimension 2: Audience Complementarity (25% weight)."""

from __future__ import annotations

import logging

from src.alliance.config import AudienceRules, settings
from src.alliance.domain_model import round_half_up
from src.alliance.models import BrandAudience, OrganizationAudience

logger = logging.getLogger(__name__)

Audience = BrandAudience | OrganizationAudience


def region_score(
    region_a: str | None, region_b: str | None, rules: AudienceRules,
) -> int:
    if region_a == region_b:
        return rules.same_region_score
    if rules.global_region in (region_a, region_b):
        return rules.global_region_score
    return rules.other_region_score


def score(
    audience_a: Audience | None,
    audience_b: Audience | None,
    rules: AudienceRules | None = None,
    neutral: int | None = None,
) -> int:
    """Average of the region sub-score and the demographic sub-score.  [0, 100]."""
    if audience_a is None or audience_b is None:
        return settings.neutral_score if neutral is None else neutral

    rules = rules or settings.audience_rules
    region = region_score(audience_a.region, audience_b.region, rules)
    result = round_half_up((region + rules.demographic_score) / 2)

    logger.debug(
        "Audience alignment %s/%s: region=%d demographic=%d -> %d",
        audience_a.region, audience_b.region, region,
        rules.demographic_score, result,
    )
    return result
