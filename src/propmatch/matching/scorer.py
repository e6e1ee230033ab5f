"""
Scoring ponderado de una propiedad contra un client brief.

Cada criterio tiene un puntaje base (ver weights.BASE_POINTS) multiplicado
por su peso en el brief. Un criterio:
- suma al máximo posible solo si el brief lo pide y la propiedad tiene el dato,
- suma sus puntos completos si se cumple (con tag),
- suma una fracción proporcional si se cumple parcialmente (sin tag,
  y queda registrado en unmatched_criteria).

El score final es raw / max normalizado a 0-100.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import structlog

from propmatch.matching.holding_cost import (
    HOLDING_COST_WARNING,
    HoldingCostEstimate,
    estimate_holding_cost,
)
from propmatch.matching.inputs import coerce_brief, coerce_property
from propmatch.matching.normalization import (
    normalize_price,
    normalize_yield,
    parse_int_prefix,
    round_half_up,
)
from propmatch.matching.weights import (
    AGE_OF_PROPERTY,
    BASE_POINTS,
    BATHROOMS,
    BEDROOMS,
    BUDGET,
    LOCATION,
    MAX_MONTHLY_HOLDING_COST,
    MIN_YIELD,
    SUBDIVISION_POTENTIAL,
    get_weight,
    match_tier,
)
from propmatch.models import (
    CalculationInputs,
    ClientBrief,
    MatchResult,
    Property,
    ScoreEntry,
    UnmatchedCriterion,
)

logger = structlog.get_logger()


def _num(value: float) -> str:
    """Formatea 450000.0 como '450000' y 5.5 como '5.5'."""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def _partial(base: float, ratio: float, weight: float) -> int:
    return max(0, round_half_up(base * ratio * weight))


@dataclass
class ScoringContext:
    """Datos de solo lectura compartidos por los evaluadores."""

    listing: Property
    brief: ClientBrief
    holding: HoldingCostEstimate

    def weight(self, key: str) -> float:
        return get_weight(self.brief.weightage, key)

    def full_points(self, key: str) -> float:
        return BASE_POINTS[key] * self.weight(key)


@dataclass
class ScoreAccumulator:
    """Estado acumulado del scoring; cada evaluador lo recibe explícitamente."""

    raw_score: float = 0
    max_score: float = 0
    brief_criteria: int = 0
    score_details: list[ScoreEntry] = field(default_factory=list)
    penalties: list[ScoreEntry] = field(default_factory=list)
    unmatched_criteria: list[UnmatchedCriterion] = field(default_factory=list)
    matched_tags: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def expect(self, points: float, from_brief: bool = True) -> None:
        """Registra un criterio aplicable y su máximo."""
        self.max_score += points
        if from_brief:
            self.brief_criteria += 1

    def add_score(self, reason: str, points: float, tag: Optional[str] = None) -> None:
        self.raw_score += points
        self.score_details.append(ScoreEntry(reason=reason, points=points))
        if tag and tag not in self.matched_tags:
            self.matched_tags.append(tag)

    def add_penalty(self, reason: str, points: float) -> None:
        self.raw_score -= points
        self.penalties.append(ScoreEntry(reason=reason, points=-points))

    def unmatched(self, field_name: str, message: str) -> None:
        self.unmatched_criteria.append(
            UnmatchedCriterion(field=field_name, message=message)
        )

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def final_score(self) -> int:
        """
        Score 0-100.

        Sin máximo (o si solo aplicó el criterio incondicional de
        subdivisión) el brief no pidió nada evaluable: score 0.
        """
        if self.max_score <= 0 or self.brief_criteria == 0:
            return 0
        percentage = round_half_up((self.raw_score / self.max_score) * 100)
        return max(0, min(100, percentage))


Evaluator = Callable[[ScoringContext, ScoreAccumulator], None]


def score_budget(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    budget_max = ctx.brief.budget.max if ctx.brief.budget else None
    price = normalize_price(ctx.listing.asking_price)
    if not budget_max or not price:
        return

    weight = ctx.weight(BUDGET)
    acc.expect(ctx.full_points(BUDGET))

    if price <= budget_max:
        acc.add_score(
            f"✅ Price within budget (<= ${_num(budget_max)})",
            ctx.full_points(BUDGET),
            "✅ Budget Match",
        )
    else:
        # El redondeo va antes del peso
        points = max(0, round_half_up(BASE_POINTS[BUDGET] * (budget_max / price))) * weight
        acc.add_score("⚠ Price exceeds budget, partial match", points)
        acc.unmatched(BUDGET, f"Price exceeds max budget (${_num(budget_max)})")


def score_location(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    """
    Substring case-insensitive de cada zona preferida en la dirección.

    Solo es match completo (con tag) si aparecen todas las zonas; con
    algunas el crédito es proporcional y se listan las faltantes.
    """
    locations = ctx.brief.preferred_locations
    address = ctx.listing.address
    if not locations or not address:
        return

    acc.expect(ctx.full_points(LOCATION))

    haystack = address.lower()
    found = [loc for loc in locations if loc.lower() in haystack]
    missing = [loc for loc in locations if loc not in found]

    if not missing:
        acc.add_score(
            f"📍 Location matched ({', '.join(found)})",
            ctx.full_points(LOCATION),
            "📍 Location Match",
        )
    elif found:
        points = _partial(
            BASE_POINTS[LOCATION], len(found) / len(locations), ctx.weight(LOCATION)
        )
        acc.add_score(f"📍 Location partially matched ({', '.join(found)})", points)
        acc.unmatched(
            LOCATION,
            f"Address does not match preferred locations: {', '.join(missing)}",
        )
    else:
        acc.unmatched(LOCATION, "Address does not match any preferred locations")


def _score_rooms(
    ctx: ScoringContext,
    acc: ScoreAccumulator,
    key: str,
    label: str,
    icon: str,
) -> None:
    wanted = getattr(ctx.brief, key)
    actual = getattr(ctx.listing, key)
    if not wanted or not actual:
        return

    acc.expect(ctx.full_points(key))

    ratio = min(1, actual / wanted)
    points = _partial(BASE_POINTS[key], ratio, ctx.weight(key))
    if ratio >= 1:
        acc.add_score(
            f"{icon} {label} match ratio: {_num(ratio)}", points, f"{icon} {label} Match"
        )
    else:
        acc.add_score(f"{icon} {label} match ratio: {_num(ratio)}", points)
        acc.unmatched(key, f"Only {actual}, brief expects {_num(wanted)}")


def score_bedrooms(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    _score_rooms(ctx, acc, BEDROOMS, "Bedrooms", "🛏")


def score_bathrooms(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    _score_rooms(ctx, acc, BATHROOMS, "Bathrooms", "🛁")


def score_yield(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    min_yield = ctx.brief.min_yield
    rental_yield = normalize_yield(ctx.listing.rental_yield)
    if not min_yield or not rental_yield:
        return

    acc.expect(ctx.full_points(MIN_YIELD))

    if rental_yield >= min_yield:
        acc.add_score(
            f"💸 Yield matched (>= {_num(min_yield)}%)",
            ctx.full_points(MIN_YIELD),
            "💸 Yield Match",
        )
    else:
        points = _partial(
            BASE_POINTS[MIN_YIELD], rental_yield / min_yield, ctx.weight(MIN_YIELD)
        )
        acc.add_score("⚠ Yield below target", points)
        acc.unmatched(
            MIN_YIELD,
            f"Yield {_num(rental_yield)}% is below required {_num(min_yield)}%",
        )


def score_build_year(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    min_year = ctx.brief.min_build_year
    year_built = parse_int_prefix(ctx.listing.year_built)
    if not min_year or year_built is None:
        return

    acc.expect(ctx.full_points(AGE_OF_PROPERTY))

    if year_built >= min_year:
        acc.add_score(
            f"🏗 Build year matched (>= {_num(min_year)})",
            ctx.full_points(AGE_OF_PROPERTY),
            "🏗 Build Year Match",
        )
    else:
        points = _partial(
            BASE_POINTS[AGE_OF_PROPERTY],
            year_built / min_year,
            ctx.weight(AGE_OF_PROPERTY),
        )
        acc.add_score("⚠ Build year below target", points)
        acc.unmatched(
            AGE_OF_PROPERTY, f"Build year {year_built} < required {_num(min_year)}"
        )


def score_subdivision(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    # Siempre aplica, aunque el brief no lo pida
    acc.expect(ctx.full_points(SUBDIVISION_POTENTIAL), from_brief=False)

    if ctx.listing.subdivision_potential:
        acc.add_score(
            "🏘 Subdivision potential matched",
            ctx.full_points(SUBDIVISION_POTENTIAL),
            "🏘 Subdivision Match",
        )
    else:
        acc.unmatched(SUBDIVISION_POTENTIAL, "No subdivision potential")


def score_holding_cost(ctx: ScoringContext, acc: ScoreAccumulator) -> None:
    if not ctx.holding.is_complete:
        acc.warn(HOLDING_COST_WARNING)
        return

    ceiling = ctx.brief.max_monthly_holding_cost
    if not ceiling:
        return

    acc.expect(ctx.full_points(MAX_MONTHLY_HOLDING_COST))

    net = ctx.holding.net_monthly_holding_cost
    if net <= ceiling:
        acc.add_score(
            f"💵 Holding cost matched (est. ${net:.2f} / mo)",
            ctx.full_points(MAX_MONTHLY_HOLDING_COST),
            "💵 Holding Cost Match",
        )
    else:
        # net <= 0 solo puede exceder un techo negativo: sin crédito
        ratio = ceiling / net if net > 0 else 0
        points = _partial(
            BASE_POINTS[MAX_MONTHLY_HOLDING_COST],
            ratio,
            ctx.weight(MAX_MONTHLY_HOLDING_COST),
        )
        acc.add_score(f"⚠ Holding cost exceeded (est. ${net:.2f} / mo)", points)
        acc.unmatched(
            MAX_MONTHLY_HOLDING_COST,
            f"Estimated holding cost ${net:.2f} exceeds brief max ${_num(ceiling)}",
        )


CRITERIA: tuple[Evaluator, ...] = (
    score_budget,
    score_location,
    score_bedrooms,
    score_bathrooms,
    score_yield,
    score_build_year,
    score_subdivision,
    score_holding_cost,
)


def score_property(listing: Any, brief: Any) -> MatchResult:
    """
    Evalúa una propiedad contra un client brief.

    Args:
        listing: Property o dict con el documento de la propiedad
        brief: ClientBrief o dict con el documento del brief

    Returns:
        MatchResult con score 0-100, tier, auditoría y costos de tenencia

    Raises:
        MatchInputError: si alguno de los documentos no es un documento
    """
    listing = coerce_property(listing)
    brief = coerce_brief(brief)

    ctx = ScoringContext(
        listing=listing,
        brief=brief,
        holding=estimate_holding_cost(listing, brief),
    )
    acc = ScoreAccumulator()
    for evaluate in CRITERIA:
        evaluate(ctx, acc)

    score = acc.final_score()
    tier = match_tier(score)

    logger.debug(
        "Propiedad evaluada",
        property_id=listing.id,
        brief_id=brief.id,
        score=score,
        raw_score=acc.raw_score,
        max_score=acc.max_score,
        tier=tier,
    )

    return MatchResult(
        score=score,
        raw_score=acc.raw_score,
        max_score=acc.max_score,
        score_details=acc.score_details,
        penalties=acc.penalties,
        unmatched_criteria=acc.unmatched_criteria,
        matched_tags=acc.matched_tags,
        match_tier=tier,
        estimated_holding_cost=ctx.holding.estimated_holding_cost,
        net_monthly_holding_cost=ctx.holding.net_monthly_holding_cost,
        holding_cost_breakdown=ctx.holding.breakdown,
        warnings=acc.warnings,
        calculation_inputs=CalculationInputs(
            interest_rate_used=ctx.holding.interest_rate,
            lvr_used=ctx.holding.lvr,
            purchase_price_used=ctx.holding.purchase_price,
        ),
    )
