"""Dimension 3: Goal Compatibility (25% weight).

Same averaging scheme as value alignment, with exact membership instead of
substring containment.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.alliance.config import settings
from src.alliance.domain_model import round_half_up

logger = logging.getLogger(__name__)


def score(
    goals_a: Sequence[str] | None,
    goals_b: Sequence[str] | None,
    neutral: int | None = None,
) -> int:
    """Compute goal compatibility of A against B.  [0, 100]."""
    if not goals_a or not goals_b:
        return settings.neutral_score if neutral is None else neutral

    matches = sum(1 for g in goals_a if g in goals_b)
    rate_a = matches / len(goals_a)
    rate_b = matches / len(goals_b)
    # Duplicate tags can push the averaged rate past 1.0.
    result = min(round_half_up((rate_a + rate_b) / 2 * 100), 100)

    logger.debug(
        "Goal alignment: %d/%d vs %d shared -> %d",
        matches, len(goals_a), len(goals_b), result,
    )
    return result
