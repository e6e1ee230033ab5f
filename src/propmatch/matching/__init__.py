"""
Motor de matching.

Combina el scoring ponderado (con costo de tenencia) y el matcher
booleano de briefs para encontrar las propiedades relevantes para
cada cliente.
"""

from propmatch.matching.brief_matcher import brief_matches
from propmatch.matching.engine import MatchedBrief, MatchingEngine
from propmatch.matching.holding_cost import HoldingCostEstimate, estimate_holding_cost
from propmatch.matching.inputs import MatchInputError
from propmatch.matching.listing_metrics import derive_listing_metrics, enrich_listing
from propmatch.matching.normalization import normalize_price, normalize_yield
from propmatch.matching.scorer import score_property
from propmatch.matching.weights import get_weight, match_tier

__all__ = [
    # Motor
    "MatchingEngine",
    "MatchedBrief",
    "MatchInputError",
    # Scoring
    "score_property",
    "brief_matches",
    "estimate_holding_cost",
    "HoldingCostEstimate",
    # Utilidades
    "normalize_price",
    "normalize_yield",
    "get_weight",
    "match_tier",
    "derive_listing_metrics",
    "enrich_listing",
]
