"""
Pesos por criterio y tiers de match.
"""

from typing import Mapping, Optional

from propmatch.config import LOW_MATCH_TIER, MATCH_TIERS

# Claves de weightage del brief
BUDGET = "budget"
LOCATION = "location"
BEDROOMS = "bedrooms"
BATHROOMS = "bathrooms"
MIN_YIELD = "minYield"
AGE_OF_PROPERTY = "ageOfProperty"
SUBDIVISION_POTENTIAL = "subdivisionPotential"
MAX_MONTHLY_HOLDING_COST = "maxMonthlyHoldingCost"

# Puntos base por criterio (antes de aplicar el peso)
BASE_POINTS = {
    BUDGET: 10,
    LOCATION: 15,
    BEDROOMS: 10,
    BATHROOMS: 10,
    MIN_YIELD: 10,
    AGE_OF_PROPERTY: 10,
    SUBDIVISION_POTENTIAL: 5,
    MAX_MONTHLY_HOLDING_COST: 10,
}


def get_weight(weights: Optional[Mapping[str, float]], key: str) -> float:
    """Peso del criterio; 1 si no está definido (o es 0)."""
    if not weights:
        return 1
    return weights.get(key) or 1


def match_tier(score: int) -> str:
    """Etiqueta de tier para un score 0-100."""
    for floor, label in MATCH_TIERS:
        if score >= floor:
            return label
    return LOW_MATCH_TIER
