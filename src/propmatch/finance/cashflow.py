"""
Cash flow anual de una propiedad de inversión.

Compara un préstamo interest-only contra uno de capital + interés (P&I)
a partir del alquiler semanal y los gastos anuales. Los montos se
expresan en dólares enteros; los rendimientos como string con 2 decimales.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from propmatch.config import (
    CASHFLOW_DEFAULT_COUNCIL_RATE,
    CASHFLOW_DEFAULT_INSURANCE,
    CASHFLOW_DEFAULT_LOAN_TERM,
    CASHFLOW_DEFAULT_LVR,
    CASHFLOW_DEFAULT_MAINTENANCE,
    CASHFLOW_DEFAULT_MANAGEMENT_FEE,
    WEEKS_PER_YEAR,
)
from propmatch.matching.normalization import parse_int_prefix, round_half_up
from propmatch.models.fields import CamelModel


class CashFlowInputs(CamelModel):
    """
    Inputs del cálculo. Un valor que no se lee como entero (o que es 0)
    toma el default del campo.
    """

    purchase_price: int = 0
    loan_amount: int = 0
    lvr_percentage: int = CASHFLOW_DEFAULT_LVR  # informativo, no interviene en el cálculo
    council_rate: int = CASHFLOW_DEFAULT_COUNCIL_RATE
    maintenance: int = CASHFLOW_DEFAULT_MAINTENANCE
    insurance: int = CASHFLOW_DEFAULT_INSURANCE
    property_management_fee: int = CASHFLOW_DEFAULT_MANAGEMENT_FEE  # %
    rental_income: int = 0  # semanal
    loan_term: int = CASHFLOW_DEFAULT_LOAN_TERM  # años

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        resolved = dict(data)
        for name, info in cls.model_fields.items():
            for key in (info.alias, name):
                if key in resolved:
                    resolved[key] = parse_int_prefix(resolved[key]) or info.default
        return resolved


class CashFlowReport(CamelModel):
    """Resultado anual (y mensual) del cash flow."""

    rental_income: int
    mortgage_interest_only: int
    mortgage_pi: int = Field(..., alias="mortgagePI")
    insurance: int
    council_rates: int
    maintenance: int
    property_management_fee: int
    total_expenses_interest_only: int
    total_expenses_pi: int = Field(..., alias="totalExpensesPI")
    monthly_cash_flow_interest_only: int
    annual_cash_flow_interest_only: int
    monthly_cash_flow_pi: int = Field(..., alias="monthlyCashFlowPI")
    annual_cash_flow_pi: int = Field(..., alias="annualCashFlowPI")
    gross_yield: str
    net_yield: str


def monthly_principal_and_interest(loan: float, annual_rate: float, years: int) -> float:
    """
    Cuota mensual de un préstamo amortizable.

    Args:
        loan: Monto del préstamo
        annual_rate: Tasa anual como decimal (0.06)
        years: Plazo en años
    """
    payments = years * 12
    if payments <= 0:
        return 0.0
    if annual_rate == 0:
        return loan / payments
    monthly_rate = annual_rate / 12
    growth = (1 + monthly_rate) ** payments
    return loan * (monthly_rate * growth) / (growth - 1)


def calculate_cash_flow(
    inputs: Any,
    interest_rate: Optional[float] = None,
) -> CashFlowReport:
    """
    Calcula el cash flow interest-only y P&I.

    Args:
        inputs: CashFlowInputs o dict con los campos del formulario
        interest_rate: Tasa anual del cliente en % (None -> 0)

    Returns:
        CashFlowReport
    """
    if not isinstance(inputs, CashFlowInputs):
        inputs = CashFlowInputs.model_validate(inputs or {})

    rate = (interest_rate or 0) / 100
    loan = inputs.loan_amount
    annual_rent = inputs.rental_income * WEEKS_PER_YEAR

    mortgage_io = round_half_up(loan * rate)
    mortgage_pi = round_half_up(
        monthly_principal_and_interest(loan, rate, inputs.loan_term) * 12
    )

    management_fee = round_half_up(
        annual_rent * (inputs.property_management_fee / 100)
    )
    expenses = (
        inputs.insurance + inputs.council_rate + inputs.maintenance + management_fee
    )

    total_io = expenses + mortgage_io
    total_pi = expenses + mortgage_pi
    annual_io = round_half_up(annual_rent - total_io)
    annual_pi = round_half_up(annual_rent - total_pi)

    price = inputs.purchase_price
    gross_yield = (annual_rent / price) * 100 if price > 0 else 0
    net_yield = ((annual_rent - expenses) / price) * 100 if price > 0 else 0

    return CashFlowReport(
        rental_income=annual_rent,
        mortgage_interest_only=mortgage_io,
        mortgage_pi=mortgage_pi,
        insurance=inputs.insurance,
        council_rates=inputs.council_rate,
        maintenance=inputs.maintenance,
        property_management_fee=management_fee,
        total_expenses_interest_only=total_io,
        total_expenses_pi=total_pi,
        monthly_cash_flow_interest_only=round_half_up(annual_io / 12),
        annual_cash_flow_interest_only=annual_io,
        monthly_cash_flow_pi=round_half_up(annual_pi / 12),
        annual_cash_flow_pi=annual_pi,
        gross_yield=f"{gross_yield:.2f}",
        net_yield=f"{net_yield:.2f}",
    )
