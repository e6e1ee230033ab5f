"""
Modelos de datos del sistema.

- Entrada: Property, ClientBrief (documentos del CRM)
- Salida: MatchResult, BriefMatch, RankedMatch
"""

from propmatch.models.property import Property, ListingMetrics
from propmatch.models.client_brief import ClientBrief, NumericRange
from propmatch.models.match_result import (
    MatchResult,
    ScoreEntry,
    UnmatchedCriterion,
    CalculationInputs,
    BriefMatch,
    RankedMatch,
)

__all__ = [
    # Entrada
    "Property",
    "ListingMetrics",
    "ClientBrief",
    "NumericRange",
    # Salida
    "MatchResult",
    "ScoreEntry",
    "UnmatchedCriterion",
    "CalculationInputs",
    "BriefMatch",
    "RankedMatch",
]
