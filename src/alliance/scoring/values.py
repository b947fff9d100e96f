"""Dimension 1: Value Alignment (30% weight).

Fuzzy tag overlap: a value on side A matches when it contains, or is
contained in, any value on side B (case-insensitive).  The match count is
normalized against both list lengths and the two rates are averaged, so the
score is not symmetric in general.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.alliance.config import settings
from src.alliance.domain_model import round_half_up

logger = logging.getLogger(__name__)


def _fuzzy_match(value: str, others: Sequence[str]) -> bool:
    return any(other in value or value in other for other in others)


def score(
    values_a: Sequence[str] | None,
    values_b: Sequence[str] | None,
    neutral: int | None = None,
) -> int:
    """Compute value alignment of A against B.  [0, 100]."""
    if not values_a or not values_b:
        return settings.neutral_score if neutral is None else neutral

    lower_a = [v.lower() for v in values_a]
    lower_b = [v.lower() for v in values_b]
    matches = sum(1 for v in lower_a if _fuzzy_match(v, lower_b))

    rate_a = matches / len(values_a)
    rate_b = matches / len(values_b)
    # Several tags can match one counterpart, pushing the rate past 1.0.
    result = min(round_half_up((rate_a + rate_b) / 2 * 100), 100)

    logger.debug(
        "Value alignment: %d/%d vs %d matched -> %d",
        matches, len(values_a), len(values_b), result,
    )
    return result
