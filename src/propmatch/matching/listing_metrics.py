"""
Campos numéricos derivados al dar de alta una propiedad.
"""

from typing import Any

from propmatch.matching.inputs import coerce_property
from propmatch.matching.normalization import (
    extract_single_number,
    parse_price_range,
    parse_rent,
    parse_yield_percent,
)
from propmatch.models import ListingMetrics, Property


def _text(value: Any) -> str:
    # Los números se interpretan igual que su texto
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def derive_listing_metrics(listing: Any) -> ListingMetrics:
    """
    Calcula askingPriceMin/Max, rentPerWeek, rentalYieldPercent,
    landSizeNumeric y yearBuiltNumeric a partir del texto libre.
    """
    listing = coerce_property(listing)

    price_min, price_max = parse_price_range(_text(listing.asking_price))

    # Un rendimiento numérico ya es el porcentaje
    if isinstance(listing.rental_yield, (int, float)):
        yield_percent = float(listing.rental_yield)
    else:
        yield_percent = parse_yield_percent(listing.rental_yield)

    return ListingMetrics(
        asking_price_min=price_min,
        asking_price_max=price_max,
        rent_per_week=parse_rent(_text(listing.rental)),
        rental_yield_percent=yield_percent,
        land_size_numeric=extract_single_number(_text(listing.land_size)),
        year_built_numeric=extract_single_number(_text(listing.year_built)),
    )


def enrich_listing(listing: Any) -> Property:
    """Propiedad con los campos derivados ya completados."""
    listing = coerce_property(listing)
    return listing.with_metrics(derive_listing_metrics(listing))
