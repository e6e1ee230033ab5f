"""
Shared fixtures: a fully specified property and the brief it matches perfectly.
"""

import pytest
from structlog.testing import capture_logs


@pytest.fixture
def property_doc():
    """Logan house with every scoring field populated (camelCase, as stored)."""
    return {
        "id": "prop-1",
        "address": "12 Main St, Logan QLD 4114",
        "askingPrice": "$500,000",
        "rental": "$500 per week",
        "rentalYield": "5.2%",
        "bedrooms": 4,
        "bathrooms": 2,
        "yearBuilt": "2005",
        "subdivisionPotential": True,
        "insurance": "$1,200",
        "councilRate": "$2,400",
        "landTax": "$1,800",
        "propertyType": "House",
        "landSize": "650 m2",
        "isOffmarket": False,
    }


@pytest.fixture
def brief_doc():
    """Brief that the property_doc fixture satisfies on every criterion."""
    return {
        "id": "brief-1",
        "clientName": "Jordan Lee",
        "budget": {"min": 400000, "max": 550000},
        "preferredLocations": ["Logan"],
        "bedrooms": 4,
        "bathrooms": 2,
        "minYield": 5,
        "minBuildYear": 2000,
        "maxMonthlyHoldingCost": 400,
    }


@pytest.fixture
def captured_logs():
    """Capture structlog events instead of printing them."""
    with capture_logs() as logs:
        yield logs
