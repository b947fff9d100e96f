"""Composite ranker — weighted sum of all dimension scores."""

from __future__ import annotations

from src.alliance.config import DimensionWeights, settings
from src.alliance.domain_model import round_half_up
from src.alliance.models import DimensionScores


def composite_score(
    scores: DimensionScores, weights: DimensionWeights | None = None,
) -> int:
    w = weights or settings.dimension_weights
    total = 0.0
    for dimension, weight in w.as_dict().items():
        total += scores.get(dimension) * weight / 100
    return round_half_up(total)
