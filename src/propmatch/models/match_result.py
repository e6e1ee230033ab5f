"""
Resultados de matching.

MatchResult es efímero: se calcula por request para cada par
(propiedad, brief) y se serializa en camelCase para la API.
"""

from typing import Optional

from pydantic import Field

from propmatch.models.fields import CamelModel
from propmatch.models.property import Property


class ScoreEntry(CamelModel):
    """Línea de auditoría: motivo y puntos sumados (o restados)."""

    reason: str
    points: float


class UnmatchedCriterion(CamelModel):
    """Criterio que no se cumplió por completo."""

    field: str
    message: str


class CalculationInputs(CamelModel):
    """Parámetros financieros efectivamente usados (con defaults aplicados)."""

    interest_rate_used: float
    lvr_used: float
    purchase_price_used: Optional[float] = None


class MatchResult(CamelModel):
    """Resultado del scoring ponderado de una propiedad contra un brief."""

    score: int = Field(..., ge=0, le=100, description="Match normalizado 0-100")
    raw_score: float = Field(..., description="Puntos acumulados")
    max_score: float = Field(..., description="Máximo alcanzable con los criterios evaluados")
    score_details: list[ScoreEntry] = Field(default_factory=list)
    penalties: list[ScoreEntry] = Field(default_factory=list)
    unmatched_criteria: list[UnmatchedCriterion] = Field(default_factory=list)
    matched_tags: list[str] = Field(default_factory=list)
    match_tier: str

    # Costos de tenencia
    estimated_holding_cost: float = 0.0
    net_monthly_holding_cost: float = 0.0
    holding_cost_breakdown: dict[str, str] = Field(default_factory=dict)

    warnings: list[str] = Field(default_factory=list)
    calculation_inputs: CalculationInputs


class BriefMatch(CamelModel):
    """Resultado del matcher booleano usado al crear una propiedad."""

    is_match: bool
    match_score: int = Field(..., ge=0, le=100)
    matched_criteria: int
    total_criteria: int


class RankedMatch(CamelModel):
    """Fila de ranking: propiedad + su resultado contra un brief."""

    property_id: Optional[str] = None
    listing: Property = Field(..., alias="property")
    result: MatchResult
