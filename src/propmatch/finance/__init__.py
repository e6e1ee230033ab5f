"""
Cálculos financieros auxiliares (cash flow de inversión).
"""

from propmatch.finance.cashflow import (
    CashFlowInputs,
    CashFlowReport,
    calculate_cash_flow,
    monthly_principal_and_interest,
)

__all__ = [
    "CashFlowInputs",
    "CashFlowReport",
    "calculate_cash_flow",
    "monthly_principal_and_interest",
]
