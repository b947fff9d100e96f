"""Pydantic v2 data models — the data contracts flowing through the system."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Literal, Union

import pandas as pd
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from src.alliance.domain_model import DIMENSIONS
from src.alliance.errors import InvalidDimension


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

ProfileKind = Literal["brand", "organization"]

Dimension = Literal["values", "audience", "goals", "industry"]

Level = Literal["none", "low", "medium", "high", "very_high"]

RelationshipLevel = Literal["none", "low", "medium", "high"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _slugify(name: str) -> str:
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[\s]+", "-", slug)
    return slug


def _empty_if_none(value: Any) -> Any:
    return [] if value is None else value


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

class BrandAudience(BaseModel):
    age_range: str | None = Field(
        default=None, validation_alias=AliasChoices("age_range", "age"),
    )
    region: str | None = None


class OrganizationAudience(BaseModel):
    size_range: str | None = Field(
        default=None, validation_alias=AliasChoices("size_range", "size"),
    )
    region: str | None = None


class _ProfileBase(BaseModel):
    id: str | None = None
    name: str
    description: str = ""
    values: list[str] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _values_default(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @model_validator(mode="after")
    def _derive_id(self) -> _ProfileBase:
        if not self.id:
            self.id = _slugify(self.name)
        return self


class BrandProfile(_ProfileBase):
    kind: Literal["brand"] = "brand"
    industry: str | None = None
    audience: BrandAudience | None = None
    goals: list[str] = Field(default_factory=list)

    @field_validator("goals", mode="before")
    @classmethod
    def _goals_default(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @property
    def category(self) -> str | None:
        return self.industry


class OrganizationProfile(_ProfileBase):
    kind: Literal["organization"] = "organization"
    org_type: str | None = Field(
        default=None, validation_alias=AliasChoices("org_type", "orgType"),
    )
    audience: OrganizationAudience | None = None
    partnership_types: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("partnership_types", "partnershipTypes"),
    )

    @field_validator("partnership_types", mode="before")
    @classmethod
    def _types_default(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @property
    def category(self) -> str | None:
        return self.org_type

    @property
    def goals(self) -> list[str]:
        # Partnership types are not goals and never take part in goal scoring.
        return []


Profile = Annotated[
    Union[BrandProfile, OrganizationProfile], Field(discriminator="kind"),
]

_PROFILE_ADAPTER: TypeAdapter[Profile] = TypeAdapter(Profile)


def parse_profile(raw: dict[str, Any]) -> BrandProfile | OrganizationProfile:
    """Build a profile from a raw mapping; accepts `type` as the kind key."""
    data = dict(raw)
    if "kind" not in data and "type" in data:
        data["kind"] = data.pop("type")
    return _PROFILE_ADAPTER.validate_python(data)


# ---------------------------------------------------------------------------
# Alignment output types
# ---------------------------------------------------------------------------

class DimensionScores(BaseModel):
    values: int = Field(default=0, ge=0, le=100)
    audience: int = Field(default=0, ge=0, le=100)
    goals: int = Field(default=0, ge=0, le=100)
    industry: int = Field(default=0, ge=0, le=100)

    def get(self, dimension: str) -> int:
        if dimension not in DIMENSIONS:
            raise InvalidDimension(dimension)
        return getattr(self, dimension)

    def as_dict(self) -> dict[str, int]:
        return {d: getattr(self, d) for d in DIMENSIONS}


class AlignmentResult(BaseModel):
    candidate_id: str
    candidate_name: str = ""
    scores: DimensionScores
    total_score: int = Field(ge=0, le=100)


class MatchFilters(BaseModel):
    industries: list[str] | None = None
    min_total_score: int = 0
    priority_dimension: str = "values"


class MatchResult(BaseModel):
    result: AlignmentResult
    top_areas: list[str] = Field(default_factory=list)
    potential: str = ""


# ---------------------------------------------------------------------------
# ROI input / output types
# ---------------------------------------------------------------------------

class DirectMetrics(BaseModel):
    brand_exposure_value: float = 0.0
    lead_count: int = 0
    lead_value: float = 0.0
    conversion_count: int = 0
    conversion_value: float = 0.0


class ROIInput(BaseModel):
    partnership_name: str = Field(min_length=1)
    investment: float = Field(gt=0)
    duration_months: int = Field(ge=1)
    direct: DirectMetrics = Field(default_factory=DirectMetrics)
    brand_perception_level: Level = "none"
    audience_engagement_level: Level = "none"
    relationship_value_level: RelationshipLevel = "none"
    innovation_potential_level: Level = "none"


class ValueTimeline(BaseModel):
    model_config = ConfigDict(frozen=True)

    month_labels: list[str]
    investment_by_month: list[float]
    value_by_month: list[float]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "investment": self.investment_by_month,
                "value": self.value_by_month,
            },
            index=pd.Index(self.month_labels, name="month"),
        )


class ROIResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    partnership_name: str
    investment: float
    duration_months: int
    direct_value: float
    indirect_value: float
    long_term_value: float
    total_value: float
    roi_percent: float
    value_timeline: ValueTimeline


class ArchivedROIResult(ROIResult):
    id: str
    computed_at: datetime
