"""Match explanations — top alignment areas and a partnership-potential line.

Template-based; the wording is picked by total-score tier.
"""

from __future__ import annotations

import logging

from src.alliance.domain_model import DIMENSIONS, dimension_label
from src.alliance.models import AlignmentResult, DimensionScores

logger = logging.getLogger(__name__)


def _by_score(scores: DimensionScores, descending: bool = True) -> list[str]:
    # sorted() is stable, so ties keep the DIMENSIONS order.
    if descending:
        return sorted(DIMENSIONS, key=lambda d: -scores.get(d))
    return sorted(DIMENSIONS, key=scores.get)


def top_areas(scores: DimensionScores, limit: int = 3) -> list[str]:
    return _by_score(scores)[:limit]


def weakest_area(scores: DimensionScores) -> str:
    return _by_score(scores, descending=False)[0]


def partnership_potential(total_score: int, scores: DimensionScores) -> str:
    ranked = _by_score(scores)
    top = dimension_label(ranked[0])
    second = dimension_label(ranked[1])
    weakest = dimension_label(weakest_area(scores))

    if total_score >= 90:
        return (
            "This partnership has exceptional potential for strategic alignment, "
            f"particularly in {top} and {second}."
        )
    if total_score >= 80:
        return (
            "This partnership shows strong potential for co-created initiatives, "
            f"especially in {top}."
        )
    if total_score >= 70:
        return (
            "Good potential for collaboration, though additional work may be "
            f"needed to strengthen {weakest}."
        )
    return (
        "This partnership has moderate potential, but would require careful "
        f"management of misalignments in {weakest}."
    )


def generate_explanation(result: AlignmentResult) -> tuple[str, list[str]]:
    """Return (potential_text, top_area_labels) for a scored candidate."""
    areas = [
        f"{dimension_label(d).title()} ({result.scores.get(d)}%)"
        for d in top_areas(result.scores)
    ]
    potential = partnership_potential(result.total_score, result.scores)
    logger.debug(
        "Explanation for %s (total=%d): %s",
        result.candidate_id, result.total_score, ", ".join(areas),
    )
    return potential, areas
