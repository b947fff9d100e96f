"""Alignment orchestrator — scores, filters and ranks candidate partners.

Pipeline:
  1. Receive the reference profile and candidate profiles
  2. Drop the reference itself and apply the industry filter
  3. Score every candidate across four dimensions      (deterministic)
  4. Compute the weighted total, drop totals below the minimum
  5. Sort by the priority dimension, then by total
  6. Optionally attach top alignment areas and a potential statement
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from src.alliance.config import Settings, settings
from src.alliance.domain_model import DIMENSIONS
from src.alliance.errors import InvalidDimension
from src.alliance.explanation.generator import generate_explanation
from src.alliance.models import (
    AlignmentResult,
    BrandProfile,
    DimensionScores,
    MatchFilters,
    MatchResult,
    OrganizationProfile,
    parse_profile,
)
from src.alliance.scoring import audience, goals, industry, values
from src.alliance.scoring.composite import composite_score

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"

AnyProfile = BrandProfile | OrganizationProfile


def load_sample_profiles() -> list[AnyProfile]:
    path = DATA_DIR / "sample_profiles.json"
    with open(path) as f:
        raw = json.load(f)
    return load_profiles_from_json(raw)


def load_profiles_from_json(data: list[dict[str, Any]]) -> list[AnyProfile]:
    return [parse_profile(p) for p in data]


def dimension_scores(
    reference: AnyProfile, candidate: AnyProfile, config: Settings | None = None,
) -> DimensionScores:
    cfg = config or settings
    return DimensionScores(
        values=values.score(reference.values, candidate.values, cfg.neutral_score),
        audience=audience.score(
            reference.audience, candidate.audience,
            cfg.audience_rules, cfg.neutral_score,
        ),
        goals=goals.score(reference.goals, candidate.goals, cfg.neutral_score),
        industry=industry.score(reference, candidate, cfg.industry_rules),
    )


def score_pair(
    reference: AnyProfile, candidate: AnyProfile, config: Settings | None = None,
) -> AlignmentResult:
    cfg = config or settings
    scores = dimension_scores(reference, candidate, cfg)
    return AlignmentResult(
        candidate_id=candidate.id,
        candidate_name=candidate.name,
        scores=scores,
        total_score=composite_score(scores, cfg.dimension_weights),
    )


def _matches_industry(
    candidate: AnyProfile, industries: Sequence[str],
) -> bool:
    category = candidate.category or ""
    return any(tag in category for tag in industries)


def filter_by_industry(
    candidates: Iterable[AnyProfile],
    industries: Sequence[str] | None,
    wildcard: str | None = None,
) -> list[AnyProfile]:
    wildcard = wildcard or settings.wildcard_industry
    if industries is None or wildcard in industries:
        return list(candidates)
    return [c for c in candidates if _matches_industry(c, industries)]


def rank(
    reference: AnyProfile,
    candidates: Sequence[AnyProfile],
    filters: MatchFilters | None = None,
    config: Settings | None = None,
) -> list[AlignmentResult]:
    """Score and rank candidates against the reference profile.

    Ordering is descending by the priority dimension, then by total score;
    exact ties on both keys keep the input order.
    """
    cfg = config or settings
    filters = filters or MatchFilters()
    priority = filters.priority_dimension
    if priority not in DIMENSIONS:
        raise InvalidDimension(priority)

    pool = [c for c in candidates if c.id != reference.id]
    pool = filter_by_industry(pool, filters.industries, cfg.wildcard_industry)

    scored = [score_pair(reference, c, cfg) for c in pool]
    qualifying = [r for r in scored if r.total_score >= filters.min_total_score]
    qualifying.sort(key=lambda r: (-r.scores.get(priority), -r.total_score))

    logger.info(
        "Ranked %d/%d candidates for %s (priority=%s, min_total=%d)",
        len(qualifying), len(candidates), reference.id,
        priority, filters.min_total_score,
    )
    return qualifying


def find_matches(
    reference: AnyProfile,
    candidates: Sequence[AnyProfile],
    filters: MatchFilters | None = None,
    config: Settings | None = None,
) -> list[MatchResult]:
    matches: list[MatchResult] = []
    for result in rank(reference, candidates, filters, config):
        potential, areas = generate_explanation(result)
        matches.append(MatchResult(result=result, top_areas=areas, potential=potential))
    return matches


def matches_to_frame(results: Sequence[AlignmentResult]) -> pd.DataFrame:
    """Tabulate ranked results, one row per candidate in rank order."""
    rows = [
        {
            "candidate_id": r.candidate_id,
            "candidate_name": r.candidate_name,
            **r.scores.as_dict(),
            "total_score": r.total_score,
        }
        for r in results
    ]
    columns = ["candidate_id", "candidate_name", *DIMENSIONS, "total_score"]
    return pd.DataFrame(rows, columns=columns)
