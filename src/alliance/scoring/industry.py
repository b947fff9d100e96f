"""Dimension 4: Industry Relevance (20% weight).

Rule table, not a similarity measure:
  - brand <-> organization: strategic (industry, org type) pair     90
                            any other pairing                       70
  - same kind:              same category (likely competitors)      50
                            different category                      75
"""

from __future__ import annotations

import logging

from src.alliance.config import IndustryRules, settings
from src.alliance.domain_model import is_strategic_pair
from src.alliance.models import BrandProfile, OrganizationProfile

logger = logging.getLogger(__name__)

AnyProfile = BrandProfile | OrganizationProfile


def score(
    a: AnyProfile, b: AnyProfile, rules: IndustryRules | None = None,
) -> int:
    """Compute industry relevance between two profiles.  [0, 100]."""
    rules = rules or settings.industry_rules

    if a.kind != b.kind:
        brand = a if isinstance(a, BrandProfile) else b
        org = a if isinstance(a, OrganizationProfile) else b
        strategic = is_strategic_pair(
            brand.industry, org.org_type, rules.strategic_pairs,
        )
        result = rules.strategic_pair_score if strategic else rules.cross_kind_score
    elif a.category == b.category:
        result = rules.same_category_score
    else:
        result = rules.different_category_score

    logger.debug(
        "Industry relevance %s(%s)<->%s(%s) -> %d",
        a.kind, a.category, b.kind, b.category, result,
    )
    return result
