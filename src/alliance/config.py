"""Configuration — weights, lookup tables, thresholds."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from src.alliance.domain_model import (
    DEFAULT_DIMENSION_WEIGHTS,
    GLOBAL_REGION,
    INDIRECT_TIERS,
    INNOVATION_TIERS,
    RELATIONSHIP_TIERS,
    STRATEGIC_PAIRS,
    WILDCARD_INDUSTRY,
)


class DimensionWeights(BaseModel):
    """Percent weights per alignment dimension; must sum to exactly 100."""

    model_config = ConfigDict(frozen=True)

    values: int = Field(default=DEFAULT_DIMENSION_WEIGHTS["values"], ge=0, le=100)
    audience: int = Field(default=DEFAULT_DIMENSION_WEIGHTS["audience"], ge=0, le=100)
    goals: int = Field(default=DEFAULT_DIMENSION_WEIGHTS["goals"], ge=0, le=100)
    industry: int = Field(default=DEFAULT_DIMENSION_WEIGHTS["industry"], ge=0, le=100)

    @model_validator(mode="after")
    def _check_total(self) -> DimensionWeights:
        total = self.values + self.audience + self.goals + self.industry
        if total != 100:
            raise ValueError(f"dimension weights must sum to 100, got {total}")
        return self

    def as_dict(self) -> dict[str, int]:
        return {
            "values": self.values,
            "audience": self.audience,
            "goals": self.goals,
            "industry": self.industry,
        }


class AudienceRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    same_region_score: int = Field(default=100, ge=0, le=100)
    global_region_score: int = Field(default=80, ge=0, le=100)
    other_region_score: int = Field(default=50, ge=0, le=100)
    # No demographic model exists; every pair gets the same sub-score.
    demographic_score: int = Field(default=70, ge=0, le=100)
    global_region: str = GLOBAL_REGION


class IndustryRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    strategic_pairs: tuple[tuple[str, str], ...] = STRATEGIC_PAIRS
    strategic_pair_score: int = Field(default=90, ge=0, le=100)
    cross_kind_score: int = Field(default=70, ge=0, le=100)
    same_category_score: int = Field(default=50, ge=0, le=100)
    different_category_score: int = Field(default=75, ge=0, le=100)


class ValuationTables(BaseModel):
    """Tier -> fraction-of-investment tables, stored as read-only mappings."""

    model_config = ConfigDict(frozen=True)

    indirect: Mapping[str, float] = Field(
        default_factory=lambda: dict(INDIRECT_TIERS), validate_default=True,
    )
    relationship: Mapping[str, float] = Field(
        default_factory=lambda: dict(RELATIONSHIP_TIERS), validate_default=True,
    )
    innovation: Mapping[str, float] = Field(
        default_factory=lambda: dict(INNOVATION_TIERS), validate_default=True,
    )

    @field_validator("indirect", "relationship", "innovation", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(v))


class RecommendationThresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    exceptional_roi: float = 200.0
    strong_roi: float = 100.0
    max_direct_share: float = 70.0
    min_indirect_share: float = 20.0
    min_long_term_share: float = 15.0
    max_investment_to_value: float = 0.8


class Settings(BaseSettings):
    dimension_weights: DimensionWeights = DimensionWeights()
    audience_rules: AudienceRules = AudienceRules()
    industry_rules: IndustryRules = IndustryRules()
    valuation_tables: ValuationTables = Field(default_factory=ValuationTables)
    recommendation_thresholds: RecommendationThresholds = RecommendationThresholds()

    neutral_score: int = Field(default=50, ge=0, le=100)
    wildcard_industry: str = WILDCARD_INDUSTRY

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
