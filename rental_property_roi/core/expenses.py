from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import InputSet


def management_fee(monthly_rent: float, rate_pct: float) -> float:
    """Fee billed on gross scheduled rent, not on rent after vacancy."""
    return monthly_rent * rate_pct / 100


def monthly_operating_expenses(inputs: "InputSet") -> float:
    """Sum all non-mortgage monthly carrying costs."""
    return (
        inputs.property_taxes / 12
        + inputs.insurance / 12
        + inputs.condo_fees
        + management_fee(inputs.monthly_rent, inputs.property_management)
        + management_fee(inputs.monthly_rent, inputs.maintenance)
        + inputs.utilities
        + inputs.other_expenses
    )


@dataclass(frozen=True)
class ExpenseItem:
    name: str
    monthly: float
    share_pct: float  # of total monthly expenses, mortgage included


def expense_breakdown(inputs: "InputSet", monthly_payment: float) -> List[ExpenseItem]:
    """Monthly line items for the expense chart; zero items are dropped."""
    items = [
        ("Mortgage", monthly_payment),
        ("Property Tax", inputs.property_taxes / 12),
        ("Insurance", inputs.insurance / 12),
        ("HOA/Condo", inputs.condo_fees),
        ("Property Mgmt", management_fee(inputs.monthly_rent, inputs.property_management)),
        ("Maintenance", management_fee(inputs.monthly_rent, inputs.maintenance)),
        ("Utilities", inputs.utilities),
        ("Other", inputs.other_expenses),
    ]
    items = [(name, value) for name, value in items if value > 0]
    total = sum(value for _, value in items)
    return [
        ExpenseItem(name=name, monthly=value, share_pct=(value / total * 100) if total > 0 else 0.0)
        for name, value in items
    ]


@dataclass(frozen=True)
class IncomeBreakdown:
    gross_rent: float
    vacancy_rate: float
    vacancy_loss: float
    net_rent: float


def income_breakdown(inputs: "InputSet") -> IncomeBreakdown:
    vacancy_loss = inputs.monthly_rent * inputs.vacancy_rate / 100
    return IncomeBreakdown(
        gross_rent=inputs.monthly_rent,
        vacancy_rate=inputs.vacancy_rate,
        vacancy_loss=vacancy_loss,
        net_rent=inputs.monthly_rent * (1 - inputs.vacancy_rate / 100),
    )
