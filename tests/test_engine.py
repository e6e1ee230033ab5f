"""
Tests for batch ranking and new-property brief matching.
"""

import pytest

from propmatch.config import Settings
from propmatch.matching import MatchingEngine, MatchInputError


@pytest.fixture
def engine():
    return MatchingEngine(settings=Settings(rank_min_score=0, rank_limit=2))


@pytest.fixture
def properties(property_doc):
    """Three listings: a perfect match, a partial one and a poor one."""
    partial = dict(property_doc, id="prop-2", address="3 Bay Rd, Redcliffe QLD")
    poor = dict(
        property_doc,
        id="prop-3",
        address="9 Hill St, Toowoomba QLD",
        askingPrice="$900,000",
        bedrooms=1,
        bathrooms=1,
    )
    return [poor, property_doc, partial]


class TestRankProperties:

    def test_sorted_by_score_and_limited(self, engine, brief_doc, properties, captured_logs):
        ranked = engine.rank_properties(brief_doc, properties)

        assert [m.property_id for m in ranked] == ["prop-1", "prop-2"]
        assert ranked[0].result.score == 100
        assert ranked[0].result.score > ranked[1].result.score

    def test_min_score_filters(self, engine, brief_doc, properties, captured_logs):
        ranked = engine.rank_properties(brief_doc, properties, min_score=95, limit=10)

        assert [m.property_id for m in ranked] == ["prop-1"]

    def test_explicit_zero_limit_returns_nothing(
        self, engine, brief_doc, properties, captured_logs
    ):
        assert engine.rank_properties(brief_doc, properties, limit=0) == []

    def test_ties_keep_input_order(self, engine, brief_doc, property_doc, captured_logs):
        twins = [dict(property_doc, id="a"), dict(property_doc, id="b")]

        ranked = engine.rank_properties(brief_doc, twins)

        assert [m.property_id for m in ranked] == ["a", "b"]

    def test_invalid_documents_are_skipped(
        self, engine, brief_doc, property_doc, captured_logs
    ):
        ranked = engine.rank_properties(brief_doc, [None, "junk", property_doc])

        assert [m.property_id for m in ranked] == ["prop-1"]
        warnings = [e for e in captured_logs if e["log_level"] == "warning"]
        assert len(warnings) == 2
        summary = next(e for e in captured_logs if e["event"] == "Ranking calculado")
        assert summary["skipped"] == 2
        assert summary["total"] == 1

    def test_invalid_brief_raises(self, engine, properties):
        with pytest.raises(MatchInputError):
            engine.rank_properties(None, properties)

    def test_serializes_listing_under_property_key(
        self, engine, brief_doc, property_doc, captured_logs
    ):
        ranked = engine.rank_properties(brief_doc, [property_doc])

        payload = ranked[0].to_json_dict()
        assert payload["propertyId"] == "prop-1"
        assert payload["property"]["askingPrice"] == "$500,000"
        assert payload["result"]["matchTier"] == "Perfect Match"


class TestBriefsMatchingProperty:

    @pytest.fixture
    def listing(self):
        return {
            "id": "new-1",
            "address": "7 River Rd, Ipswich QLD",
            "askingPrice": 450000,
            "propertyType": "House",
            "bedrooms": 3,
            "bathrooms": 2,
        }

    def test_returns_only_matching_briefs(self, engine, listing, captured_logs):
        briefs = [
            {"id": "b1", "clientName": "Sam", "budget": {"max": 500000}, "bedrooms": 3},
            {"id": "b2", "clientName": "Alex", "budget": {"max": 300000}, "bedrooms": 5},
            {"id": "b3", "clientName": "Robin", "preferredLocations": ["Ipswich"]},
        ]

        matched = engine.briefs_matching_property(listing, briefs)

        assert [m.brief.id for m in matched] == ["b1", "b3"]
        assert matched[0].result.match_score == 100

    def test_logs_each_match(self, engine, listing, captured_logs):
        engine.briefs_matching_property(listing, [{"clientName": "Sam", "bedrooms": 3}])

        events = [e["event"] for e in captured_logs]
        assert "La propiedad coincide con client briefs" in events
        match_log = next(e for e in captured_logs if e["event"] == "Brief coincidente")
        assert match_log["client_name"] == "Sam"
        assert match_log["match_score"] == 100

    def test_no_match_no_info_logs(self, engine, listing, captured_logs):
        matched = engine.briefs_matching_property(listing, [{"bedrooms": 6}])

        assert matched == []
        assert captured_logs == []

    def test_invalid_briefs_are_skipped(self, engine, listing, captured_logs):
        matched = engine.briefs_matching_property(listing, [42, {"bedrooms": 3}])

        assert len(matched) == 1
        assert captured_logs[0]["event"] == "Brief inválido, se omite"
