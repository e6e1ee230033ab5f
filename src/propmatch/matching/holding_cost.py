"""
Costo de tenencia mensual de una propiedad.

Estimación rápida para comparar propiedades, no un simulador de hipoteca:
el interés se calcula interest-only sobre el monto financiado (LVR).

Convención de alquiler: el texto libre es semanal ("$480/w").
- El fee de administración (7%) se aplica sobre el valor semanal crudo.
- El ingreso que se descuenta para el costo neto es semanal x 4.33.
Las dos bases distintas se mantienen tal cual porque son las cifras que
ya ven los usuarios.
"""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from propmatch.config import (
    DEFAULT_INTEREST_RATE,
    DEFAULT_LVR,
    PROPERTY_MANAGEMENT_RATE,
    WEEKS_PER_MONTH,
)
from propmatch.matching.normalization import normalize_price
from propmatch.models import ClientBrief, Property

logger = structlog.get_logger()

HOLDING_COST_WARNING = (
    "⚠ Holding cost could not be calculated due to missing inputs "
    "(price, LVR, interest rate, council rate or insurance). "
    "This criterion is excluded from the match score."
)


@dataclass
class HoldingCostEstimate:
    """Costo de tenencia estimado con su desglose para la UI."""

    estimated_holding_cost: float
    net_monthly_holding_cost: float
    breakdown: dict[str, str]
    interest_rate: float
    lvr: float
    purchase_price: Optional[float]
    missing_inputs: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True si todos los inputs financieros se pudieron derivar."""
        return not self.missing_inputs


def _annual_to_monthly(value) -> Optional[float]:
    annual = normalize_price(value)
    return annual / 12 if annual is not None else None


def estimate_holding_cost(listing: Property, brief: ClientBrief) -> HoldingCostEstimate:
    """
    Calcula el costo mensual de tenencia y el neto después del alquiler.

    Args:
        listing: Propiedad con askingPrice, insurance, councilRate, rental, landTax
        brief: Brief con interestRate y lvr (opcionales)

    Returns:
        HoldingCostEstimate; si falta algún input, missing_inputs lo lista
        y el scoring excluye el criterio.
    """
    price = normalize_price(listing.asking_price)
    interest_rate = brief.interest_rate or DEFAULT_INTEREST_RATE
    lvr = brief.lvr or DEFAULT_LVR

    loan_amount = (price or 0.0) * (lvr / 100)
    monthly_interest = (loan_amount * (interest_rate / 100)) / 12

    monthly_insurance = _annual_to_monthly(listing.insurance)
    monthly_council = _annual_to_monthly(listing.council_rate)
    monthly_land_tax = _annual_to_monthly(listing.land_tax) or 0.0

    weekly_rent = normalize_price(listing.rental) or 0.0
    property_mgmt_cost = weekly_rent * PROPERTY_MANAGEMENT_RATE
    rental_amount = weekly_rent * WEEKS_PER_MONTH

    estimated = (
        monthly_interest
        + (monthly_insurance or 0.0)
        + (monthly_council or 0.0)
        + property_mgmt_cost
        + monthly_land_tax
    )
    net = estimated - rental_amount

    breakdown = {
        "loanAmount": loan_amount,
        "monthlyInterest": monthly_interest,
        "monthlyInsurance": monthly_insurance or 0.0,
        "monthlyCouncil": monthly_council or 0.0,
        "propertyMgmtCost": property_mgmt_cost,
        "monthlyLandTax": monthly_land_tax,
        "monthlyRentalIncome": rental_amount,
    }

    missing = []
    if price is None:
        missing.append("price")
    if monthly_insurance is None:
        missing.append("insurance")
    if monthly_council is None:
        missing.append("councilRate")

    if missing:
        logger.debug(
            "Costo de tenencia incompleto",
            property_id=listing.id,
            missing=missing,
        )

    return HoldingCostEstimate(
        estimated_holding_cost=estimated,
        net_monthly_holding_cost=net,
        breakdown={key: f"{value:.2f}" for key, value in breakdown.items()},
        interest_rate=interest_rate,
        lvr=lvr,
        purchase_price=price,
        missing_inputs=missing,
    )
