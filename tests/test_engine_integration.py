"""Integration-level tests — sample data loading, ranking and filtering."""

import json

import pytest

from src.alliance import engine
from src.alliance.engine import (
    DATA_DIR,
    dimension_scores,
    find_matches,
    load_profiles_from_json,
    load_sample_profiles,
    matches_to_frame,
    rank,
)
from src.alliance.errors import InvalidDimension
from src.alliance.models import (
    AlignmentResult,
    BrandProfile,
    DimensionScores,
    MatchFilters,
    OrganizationProfile,
)


@pytest.fixture()
def profiles():
    return {p.id: p for p in load_sample_profiles()}


def _candidates(profiles):
    return list(profiles.values())


class TestSampleProfiles:
    def test_sample_profiles_load(self):
        path = DATA_DIR / "sample_profiles.json"
        assert path.exists(), f"Missing {path}"
        with open(path) as f:
            raw = json.load(f)
        assert len(raw) == 4
        loaded = load_profiles_from_json(raw)
        assert all(p.id for p in loaded)

    def test_kinds_resolved(self, profiles):
        assert isinstance(profiles["brand_1"], BrandProfile)
        assert isinstance(profiles["org_1"], OrganizationProfile)
        assert profiles["org_1"].category == "sports_team"
        assert profiles["org_1"].audience.size_range == "500k-1m"
        assert profiles["brand_1"].audience.age_range == "25-34"

    def test_organization_has_no_goals(self, profiles):
        org = profiles["org_1"]
        assert org.partnership_types
        assert org.goals == []


class TestDimensionScores:
    def test_brand_to_sports_league(self, profiles):
        s = dimension_scores(profiles["brand_1"], profiles["org_1"])
        assert s.as_dict() == {"values": 0, "audience": 75, "goals": 50, "industry": 90}

    def test_brand_to_brand(self, profiles):
        s = dimension_scores(profiles["brand_1"], profiles["brand_2"])
        assert s.as_dict() == {"values": 33, "audience": 85, "goals": 42, "industry": 75}

    def test_brand_to_education_nonprofit(self, profiles):
        s = dimension_scores(profiles["brand_1"], profiles["org_2"])
        assert s.as_dict() == {"values": 33, "audience": 85, "goals": 50, "industry": 70}

    def test_healthcare_education_is_strategic(self, profiles):
        s = dimension_scores(profiles["brand_2"], profiles["org_2"])
        assert s.industry == 90


class TestRank:
    def test_default_order(self, profiles):
        results = rank(profiles["brand_1"], _candidates(profiles))
        assert [r.candidate_id for r in results] == ["org_2", "brand_2", "org_1"]
        assert [r.total_score for r in results] == [58, 57, 49]

    def test_reference_excluded(self, profiles):
        for ref in profiles.values():
            results = rank(ref, _candidates(profiles))
            assert ref.id not in {r.candidate_id for r in results}
            assert len(results) == 3

    def test_priority_dimension(self, profiles):
        filters = MatchFilters(priority_dimension="industry")
        results = rank(profiles["brand_1"], _candidates(profiles), filters)
        assert [r.candidate_id for r in results] == ["org_1", "brand_2", "org_2"]

    def test_min_total_score(self, profiles):
        filters = MatchFilters(min_total_score=50)
        results = rank(profiles["brand_1"], _candidates(profiles), filters)
        assert [r.candidate_id for r in results] == ["org_2", "brand_2"]

    def test_industry_filter_substring(self, profiles):
        filters = MatchFilters(industries=["health", "education"])
        results = rank(profiles["brand_1"], _candidates(profiles), filters)
        assert {r.candidate_id for r in results} == {"brand_2", "org_2"}

    def test_industry_wildcard(self, profiles):
        filters = MatchFilters(industries=["all", "education"])
        results = rank(profiles["brand_1"], _candidates(profiles), filters)
        assert len(results) == 3

    def test_empty_industry_list_keeps_nothing(self, profiles):
        filters = MatchFilters(industries=[])
        assert rank(profiles["brand_1"], _candidates(profiles), filters) == []

    def test_unknown_priority_dimension(self, profiles):
        filters = MatchFilters(priority_dimension="budget")
        with pytest.raises(InvalidDimension):
            rank(profiles["brand_1"], _candidates(profiles), filters)

    def test_missing_fields_do_not_fail(self):
        ref = BrandProfile(name="Bare Brand")
        other = OrganizationProfile(name="Bare Org")
        [result] = rank(ref, [ref, other])
        assert result.scores.as_dict() == {
            "values": 50, "audience": 50, "goals": 50, "industry": 70,
        }
        assert result.total_score == 54


class TestRankTieBreaking:
    @pytest.fixture()
    def fake_scores(self, monkeypatch):
        table = {}

        def _fake_score_pair(reference, candidate, config=None):
            values_score, total = table[candidate.id]
            return AlignmentResult(
                candidate_id=candidate.id,
                scores=DimensionScores(values=values_score),
                total_score=total,
            )

        monkeypatch.setattr(engine, "score_pair", _fake_score_pair)
        return table

    def _orgs(self, *ids):
        return [OrganizationProfile(id=i, name=i) for i in ids]

    def test_priority_then_total(self, fake_scores):
        fake_scores.update({"a": (80, 90), "b": (85, 90), "c": (60, 70)})
        ref = BrandProfile(id="ref", name="Ref")
        results = rank(ref, self._orgs("a", "b", "c"))
        assert [r.candidate_id for r in results] == ["b", "a", "c"]

    def test_priority_beats_total(self, fake_scores):
        fake_scores.update({"a": (80, 90), "b": (95, 70)})
        ref = BrandProfile(id="ref", name="Ref")
        results = rank(ref, self._orgs("a", "b"))
        assert [r.candidate_id for r in results] == ["b", "a"]

    def test_total_breaks_priority_tie(self, fake_scores):
        fake_scores.update({"a": (80, 60), "b": (80, 75)})
        ref = BrandProfile(id="ref", name="Ref")
        results = rank(ref, self._orgs("a", "b"))
        assert [r.candidate_id for r in results] == ["b", "a"]

    def test_exact_ties_keep_input_order(self, fake_scores):
        fake_scores.update({"x": (70, 70), "y": (70, 70), "z": (70, 70)})
        ref = BrandProfile(id="ref", name="Ref")
        results = rank(ref, self._orgs("y", "z", "x"))
        assert [r.candidate_id for r in results] == ["y", "z", "x"]


class TestFindMatches:
    def test_explanations_attached(self, profiles):
        matches = find_matches(profiles["brand_1"], _candidates(profiles))
        assert [m.result.candidate_id for m in matches] == ["org_2", "brand_2", "org_1"]
        top = matches[0]
        assert top.top_areas == [
            "Audience Complementarity (85%)",
            "Industry Relevance (70%)",
            "Goal Compatibility (50%)",
        ]
        assert "value alignment" in top.potential
        assert top.potential.startswith("This partnership has moderate potential")

    def test_matches_to_frame(self, profiles):
        results = rank(profiles["brand_1"], _candidates(profiles))
        df = matches_to_frame(results)
        assert list(df["candidate_id"]) == ["org_2", "brand_2", "org_1"]
        assert list(df.columns) == [
            "candidate_id", "candidate_name",
            "values", "audience", "goals", "industry", "total_score",
        ]
        assert df.loc[0, "total_score"] == 58

    def test_empty_frame(self):
        df = matches_to_frame([])
        assert df.empty
        assert "total_score" in df.columns
