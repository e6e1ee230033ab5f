"""
Matcher booleano de briefs.

Versión gruesa del scoring que se usa al dar de alta una propiedad para
decidir si vale la pena avisar/loguear que coincide con algún brief.

A diferencia de scorer.py no parsea texto libre: los campos numéricos
se comparan tal como vienen y un valor que no es número simplemente no
cumple el criterio.
"""

from typing import Any

from propmatch.config import BRIEF_MATCH_THRESHOLD
from propmatch.matching.inputs import coerce_brief, coerce_property
from propmatch.matching.normalization import round_half_up
from propmatch.models import BriefMatch, ClientBrief, Property


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _at_least(actual: Any, minimum: float) -> bool:
    return _is_number(actual) and actual >= minimum


def _at_most(actual: Any, maximum: float) -> bool:
    return _is_number(actual) and actual <= maximum


def _criteria(listing: Property, brief: ClientBrief) -> list[bool]:
    """Un bool por cada criterio que el brief define."""
    results = []

    if brief.budget and brief.budget.max:
        results.append(_at_most(listing.asking_price, brief.budget.max))

    if brief.rental_yield and brief.rental_yield.min:
        results.append(_at_least(listing.rental_yield, brief.rental_yield.min))

    if brief.land_size and brief.land_size.min:
        results.append(_at_least(listing.land_size, brief.land_size.min))

    if brief.property_type:
        results.append(brief.property_type == listing.property_type)

    if brief.preferred_locations:
        address = (listing.address or "").lower()
        results.append(
            bool(address)
            and any(loc.lower() in address for loc in brief.preferred_locations)
        )

    if brief.bedrooms:
        results.append(_at_least(listing.bedrooms, brief.bedrooms))

    if brief.bathrooms:
        results.append(_at_least(listing.bathrooms, brief.bathrooms))

    if brief.is_offmarket_preferred is not None:
        results.append(brief.is_offmarket_preferred == listing.is_offmarket)

    return results


def brief_matches(listing: Any, brief: Any) -> BriefMatch:
    """
    Porcentaje de criterios del brief que cumple la propiedad.

    Es match si el porcentaje supera el 50%.
    """
    listing = coerce_property(listing)
    brief = coerce_brief(brief)

    results = _criteria(listing, brief)
    total = len(results)
    matched = sum(results)
    match_score = round_half_up((matched / total) * 100) if total else 0

    return BriefMatch(
        is_match=match_score > BRIEF_MATCH_THRESHOLD,
        match_score=match_score,
        matched_criteria=matched,
        total_criteria=total,
    )
