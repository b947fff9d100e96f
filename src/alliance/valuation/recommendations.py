"""Rule-based recommendations derived from an ROI result.

Order is fixed: ROI headline, value-mix flags, pricing flag, tracking advice.
"""

from __future__ import annotations

import logging

from src.alliance.config import RecommendationThresholds, settings
from src.alliance.domain_model import round_half_up
from src.alliance.models import ROIResult

logger = logging.getLogger(__name__)

TRACKING_ADVICE = (
    "Implement robust tracking metrics to validate these projections and "
    "adjust strategy as needed."
)


def roi_headline(
    roi: float, thresholds: RecommendationThresholds | None = None,
) -> str:
    t = thresholds or settings.recommendation_thresholds
    shown = round_half_up(roi)
    if roi >= t.exceptional_roi:
        return (
            "This partnership shows exceptional potential with a very high "
            f"ROI ({shown}%)."
        )
    if roi >= t.strong_roi:
        return f"This partnership shows strong potential with a positive ROI ({shown}%)."
    if roi >= 0:
        return f"This partnership has a positive but moderate ROI ({shown}%)."
    return (
        f"This partnership currently shows a negative ROI ({shown}%). "
        "Consider adjusting the strategy."
    )


def recommendations(
    result: ROIResult, thresholds: RecommendationThresholds | None = None,
) -> list[str]:
    t = thresholds or settings.recommendation_thresholds
    items = [roi_headline(result.roi_percent, t)]

    total = result.direct_value + result.indirect_value + result.long_term_value
    if total:
        direct_share = result.direct_value / total * 100
        indirect_share = result.indirect_value / total * 100
        long_term_share = result.long_term_value / total * 100

        if direct_share > t.max_direct_share:
            items.append(
                "Consider strategies to enhance long-term value creation, as the "
                "current model is heavily weighted toward direct outcomes."
            )
        if indirect_share < t.min_indirect_share:
            items.append(
                "Explore ways to increase brand perception lift and audience "
                "engagement to improve indirect value."
            )
        if long_term_share < t.min_long_term_share:
            items.append(
                "Develop a more robust long-term strategy for this partnership to "
                "enhance relationship and innovation value."
            )
    else:
        logger.warning(
            "Partnership %r has zero projected value; skipping value-mix checks",
            result.partnership_name,
        )

    if result.investment > result.total_value * t.max_investment_to_value:
        items.append(
            "The current investment may be too high relative to projected "
            "returns. Consider renegotiating or restructuring the deal."
        )

    items.append(TRACKING_ADVICE)
    return items
