from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .down_payment import MINIMUM_DOWN_PAYMENT_PCT
from .model import ResultSet
from .utils import currency, percent


@dataclass(frozen=True)
class Insight:
    level: str  # error | warning | success
    title: str
    message: str


def investment_insights(
    res: ResultSet,
    low_return: float = 4.0,
    strong_return: float = 8.0,
) -> List[Insight]:
    """Warnings and highlights shown under the summary metrics."""
    out: List[Insight] = []
    if res.stated_down_payment_percent < MINIMUM_DOWN_PAYMENT_PCT:
        out.append(
            Insight(
                "warning",
                "Minimum Down Payment",
                f"Investment properties typically require at least {MINIMUM_DOWN_PAYMENT_PCT:.0f}% down payment. "
                f"Results assume {currency(res.effective_down_payment_amount)} "
                f"({percent(res.effective_down_payment_percent)}).",
            )
        )
    if res.monthly_cash_flow < 0:
        out.append(
            Insight(
                "error",
                "Negative Cash Flow Warning",
                f"This property is projected to lose {currency(abs(res.monthly_cash_flow))} per month. "
                "Consider raising rent if the market allows, cutting operating expenses, "
                "increasing the down payment or finding better financing terms.",
            )
        )
    coc = res.cash_on_cash_return
    if 0 <= coc < low_return:
        out.append(
            Insight(
                "warning",
                "Low Return Warning",
                f"The cash-on-cash return of {percent(coc)} is below the recommended minimum of {low_return:g}%. "
                "Consider options to improve returns or explore alternative investments.",
            )
        )
    if coc >= strong_return:
        out.append(
            Insight(
                "success",
                "Strong Investment Potential",
                f"The cash-on-cash return of {percent(coc)} indicates a strong investment opportunity. "
                "This return exceeds typical market yields for rental properties.",
            )
        )
    return out


def investment_summary(cash_on_cash: float, target_return: float = 5.0, strong_return: float = 8.0) -> str:
    coc = percent(cash_on_cash)
    if cash_on_cash >= strong_return:
        return (
            f"This property shows strong potential with a {coc} cash-on-cash return, "
            "well above the typical 5-7% minimum target for rental properties."
        )
    if cash_on_cash >= target_return:
        return (
            f"This property shows decent potential with a {coc} cash-on-cash return, "
            "meeting the typical 5-7% minimum target for rental properties."
        )
    if cash_on_cash >= 0:
        return (
            f"This property shows below-average returns with a {coc} cash-on-cash return, "
            "under the typical 5-7% minimum target for rental properties."
        )
    return (
        f"This property shows negative returns with a {coc} cash-on-cash return, "
        "indicating it may not be suitable as a rental investment."
    )
