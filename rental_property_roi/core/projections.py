from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Final, Optional, Sequence, Tuple

import pandas as pd

from .utils import grow


PROJECTION_YEARS: Final[int] = 30
EXPENSE_INFLATION_PCT: Final[float] = 2.0

PROJECTION_COLUMNS: Final[list] = [
    "year",
    "rental_income",
    "operating_expenses",
    "mortgage_payment",
    "cash_flow",
    "cumulative_cash_flow",
]


@dataclass(frozen=True)
class CashFlowYear:
    year: int
    rental_income: float
    operating_expenses: float
    mortgage_payment: float
    cash_flow: float


def generate_cash_flow_schedule(
    monthly_rent_after_vacancy: float,
    monthly_operating_expenses: float,
    annual_rent_increase_pct: float,
    monthly_payment: float,
    years: int = PROJECTION_YEARS,
) -> Tuple[CashFlowYear, ...]:
    """Year-by-year projection of income, expenses and cash flow.

    Rent compounds at ``annual_rent_increase_pct`` and operating expenses at
    a fixed 2% inflation. The mortgage payment stays at ``monthly_payment * 12``
    for every year of the horizon, including years past the amortization
    period.
    """
    annual_rent = monthly_rent_after_vacancy * 12
    annual_expenses = monthly_operating_expenses * 12
    annual_mortgage = monthly_payment * 12

    rows = []
    for year in range(1, years + 1):
        rows.append(
            CashFlowYear(
                year=year,
                rental_income=annual_rent,
                operating_expenses=annual_expenses,
                mortgage_payment=annual_mortgage,
                cash_flow=annual_rent - annual_expenses - annual_mortgage,
            )
        )
        annual_rent *= 1 + annual_rent_increase_pct / 100
        annual_expenses *= 1 + EXPENSE_INFLATION_PCT / 100
    return tuple(rows)


def schedule_frame(schedule: Sequence[CashFlowYear], years: Optional[int] = None) -> pd.DataFrame:
    """Projection as a DataFrame with a running cumulative cash flow.

    ``years`` keeps only the first N rows (the UI shows ten).
    """
    if not schedule:
        return pd.DataFrame(columns=PROJECTION_COLUMNS, data=[])
    df = pd.DataFrame([asdict(row) for row in schedule])
    df["cumulative_cash_flow"] = df["cash_flow"].cumsum()
    if years is not None:
        df = df.head(max(0, int(years)))
    return df[PROJECTION_COLUMNS]


@dataclass(frozen=True)
class AppreciationEstimate:
    years: int
    rate_pct: float
    future_value: float
    equity_gain: float


def appreciation_estimate(purchase_price: float, rate_pct: float = 3.0, years: int = 10) -> AppreciationEstimate:
    """Property value after ``years`` of compounding appreciation."""
    future_value = grow(purchase_price, rate_pct / 100, years)
    return AppreciationEstimate(
        years=years,
        rate_pct=rate_pct,
        future_value=future_value,
        equity_gain=future_value - purchase_price,
    )
