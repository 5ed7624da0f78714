from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import pandas as pd


MONTHS_IN_YEAR: Final[int] = 12

SCHEDULE_COLUMNS: Final[list] = ["month", "payment", "interest", "principal", "balance"]
YEARLY_COLUMNS: Final[list] = ["year", "payment", "interest", "principal", "end_balance"]


def monthly_rate(annual_rate_pct: float) -> float:
    """Nominal monthly rate from an annual percentage (5.5 -> 0.0045833...)."""
    return annual_rate_pct / 100 / MONTHS_IN_YEAR


def fixed_monthly_payment(principal: float, annual_rate_pct: float, years: int) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Initial loan amount.
    annual_rate_pct : float
        Nominal annual interest rate as a percentage (e.g., 5.5 for 5.5%).
    years : int
        Amortization period in years.

    Returns
    -------
    float
        The constant monthly payment. A zero rate spreads the principal
        evenly over the payments.

    Raises
    ------
    ValueError
        If the amortization period has no payments.
    """
    n_months = years * MONTHS_IN_YEAR
    if n_months <= 0:
        raise ValueError("amortization period must be at least one year")
    if annual_rate_pct == 0:
        return principal / n_months
    r = monthly_rate(annual_rate_pct)
    try:
        factor = (1 + r) ** n_months
    except OverflowError:
        # Very long periods: the payment converges to interest only
        return principal * r
    return principal * (r * factor) / (factor - 1)


def remaining_balance(principal: float, annual_rate_pct: float, years: int, months_paid: int) -> float:
    """Outstanding balance after ``months_paid`` fixed payments.

    ``months_paid`` is clamped to ``0..years*12``.
    """
    n_months = years * MONTHS_IN_YEAR
    payment = fixed_monthly_payment(principal, annual_rate_pct, years)
    m = max(0, min(int(months_paid), n_months))
    if annual_rate_pct == 0:
        return max(0.0, principal - payment * m)
    r = monthly_rate(annual_rate_pct)
    try:
        growth = (1 + r) ** m
    except OverflowError:
        return max(0.0, float(principal))
    return max(0.0, principal * growth - payment * (growth - 1) / r)


def amort_schedule(principal: float, annual_rate_pct: float, years: int) -> pd.DataFrame:
    """Generate a monthly amortization schedule.

    Columns: month (1..N), payment, interest, principal, balance

    Notes
    -----
    - Handles rounding on the last period to end with zero balance.
    - An empty frame is returned when there is nothing to borrow.
    """
    n_months = int(years * MONTHS_IN_YEAR)
    if n_months <= 0 or principal <= 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS, data=[])

    payment = fixed_monthly_payment(principal, annual_rate_pct, years)
    r = monthly_rate(annual_rate_pct)

    rows = []
    balance = float(principal)
    for m in range(1, n_months + 1):
        interest = balance * r
        principal_component = payment - interest
        new_balance = balance - principal_component

        # Absorb floating point residue on the final payment
        if m == n_months and abs(new_balance) < 1e-6:
            principal_component += new_balance
            new_balance = 0.0

        rows.append(
            {
                "month": m,
                "payment": float(interest + principal_component),
                "interest": float(interest),
                "principal": float(principal_component),
                "balance": float(max(new_balance, 0.0)),
            }
        )
        balance = max(new_balance, 0.0)

    return pd.DataFrame(rows)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly amortization schedule by year.

    Returns a DataFrame with columns: year, payment, interest, principal, end_balance
    """
    if schedule.empty:
        return pd.DataFrame(columns=YEARLY_COLUMNS, data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "interest", "principal"]]
        .sum()
        .sort_values("year")
    )
    end_balances = (
        schedule.groupby("year", as_index=False)["balance"].last().rename(columns={"balance": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")


@dataclass(frozen=True)
class AmortizationSummary:
    payment_monthly: float
    balance_at_term: float
    schedule_monthly: pd.DataFrame
    schedule_yearly: pd.DataFrame


def summarize(principal: float, annual_rate_pct: float, years: int, term_years: int = 0) -> AmortizationSummary:
    """Payment, schedules and the balance left when the mortgage term ends."""
    schedule = amort_schedule(principal, annual_rate_pct, years)
    yearly = aggregate_yearly(schedule)
    payment = fixed_monthly_payment(principal, annual_rate_pct, years)
    balance = remaining_balance(principal, annual_rate_pct, years, term_years * MONTHS_IN_YEAR)
    return AmortizationSummary(
        payment_monthly=payment,
        balance_at_term=balance,
        schedule_monthly=schedule,
        schedule_yearly=yearly,
    )
