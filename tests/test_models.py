"""
Tests for document models and listing metric derivation.
"""

import pytest

from propmatch.matching.listing_metrics import derive_listing_metrics, enrich_listing
from propmatch.models import ClientBrief, Property


class TestProperty:

    def test_accepts_camel_and_snake_case(self):
        camel = Property.model_validate({"askingPrice": "$1", "councilRate": "$2"})
        snake = Property(asking_price="$1", council_rate="$2")

        assert camel.asking_price == snake.asking_price == "$1"
        assert camel.council_rate == snake.council_rate == "$2"

    def test_lenient_counts(self):
        listing = Property.model_validate(
            {"bedrooms": "3", "bathrooms": "two", "subdivisionPotential": None}
        )

        assert listing.bedrooms == 3
        assert listing.bathrooms is None
        assert listing.subdivision_potential is False

    def test_ignores_unknown_fields(self):
        listing = Property.model_validate({"floodZone": "No", "tags": ["x"]})

        assert listing.to_json_dict()["address"] is None

    def test_numbers_stay_numbers(self):
        listing = Property.model_validate({"askingPrice": 520000, "rentalYield": 5.2})

        assert listing.asking_price == 520000
        assert listing.rental_yield == 5.2


class TestClientBrief:

    def test_defaults(self):
        brief = ClientBrief()

        assert brief.preferred_locations == []
        assert brief.weightage == {}
        assert brief.budget is None
        assert brief.is_offmarket_preferred is None

    def test_cleans_locations(self):
        brief = ClientBrief.model_validate({"preferredLocations": ["Logan", "", None, 4]})

        assert brief.preferred_locations == ["Logan"]

    def test_single_location_string(self):
        brief = ClientBrief.model_validate({"preferredLocations": "Logan"})

        assert brief.preferred_locations == ["Logan"]

    def test_malformed_numbers_are_absent(self):
        brief = ClientBrief.model_validate(
            {"minYield": "high", "budget": 500000, "lvr": "80"}
        )

        assert brief.min_yield is None
        assert brief.budget is None
        assert brief.lvr == 80.0


class TestListingMetrics:

    def test_derives_numeric_fields(self, property_doc):
        property_doc["askingPrice"] = "Over $500,000"

        metrics = derive_listing_metrics(property_doc)

        assert metrics.asking_price_min == 500000.0
        assert metrics.asking_price_max is None
        assert metrics.rent_per_week == 500.0
        assert metrics.rental_yield_percent == 5.2
        assert metrics.land_size_numeric == 650.0
        assert metrics.year_built_numeric == 2005.0

    def test_numeric_inputs(self):
        metrics = derive_listing_metrics(
            {"askingPrice": 520000, "rentalYield": 4.8, "yearBuilt": 1999}
        )

        assert metrics.asking_price_min == metrics.asking_price_max == 520000.0
        assert metrics.rental_yield_percent == pytest.approx(4.8)
        assert metrics.year_built_numeric == 1999.0

    def test_missing_text_is_none(self):
        metrics = derive_listing_metrics({})

        assert metrics.model_dump() == {
            "asking_price_min": None,
            "asking_price_max": None,
            "rent_per_week": None,
            "rental_yield_percent": None,
            "land_size_numeric": None,
            "year_built_numeric": None,
        }

    def test_enrich_listing_keeps_original_text(self, property_doc):
        listing = enrich_listing(property_doc)

        assert listing.asking_price == "$500,000"
        assert listing.asking_price_min == listing.asking_price_max == 500000.0
        assert listing.to_json_dict()["rentPerWeek"] == 500.0


class TestLenientIdentityAndFlags:

    def test_numeric_ids_become_text(self):
        listing = Property.model_validate({"id": 42})
        brief = ClientBrief.model_validate({"id": 7.0, "clientName": 7})

        assert listing.id == "42"
        assert brief.id == "7"
        assert brief.client_name == "7"

    def test_unreadable_text_is_none(self):
        brief = ClientBrief.model_validate({"id": ["x"], "propertyType": {"a": 1}})

        assert brief.id is None
        assert brief.property_type is None

    @pytest.mark.parametrize(
        "raw, expected", [("maybe", True), (1, True), (0, False), ("", False), (None, False)]
    )
    def test_listing_flags_use_truthiness(self, raw, expected):
        listing = Property.model_validate({"subdivisionPotential": raw, "isOffmarket": raw})

        assert listing.subdivision_potential is expected
        assert listing.is_offmarket is expected

    @pytest.mark.parametrize("raw", ["sometimes", 1, None, "true"])
    def test_unreadable_offmarket_preference_is_indifferent(self, raw):
        brief = ClientBrief.model_validate({"isOffmarketPreferred": raw})

        assert brief.is_offmarket_preferred is None
