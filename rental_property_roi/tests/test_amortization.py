import math

import pytest

from rental_property_roi.core.amortization import (
    aggregate_yearly,
    amort_schedule,
    fixed_monthly_payment,
    remaining_balance,
    summarize,
)


def test_fixed_payment_known_case():
    # 400k @5.5% over 25y ~ 2456.35
    payment = fixed_monthly_payment(400_000, 5.5, 25)
    assert math.isclose(payment, 2456.35, abs_tol=0.01)


def test_zero_rate_spreads_principal_evenly():
    assert fixed_monthly_payment(300_000, 0.0, 25) == 300_000 / 300


def test_empty_amortization_period_rejected():
    with pytest.raises(ValueError):
        fixed_monthly_payment(100_000, 5.0, 0)


def test_amort_schedule_balances_down_to_zero():
    df = amort_schedule(200_000, 4.0, 25)
    assert len(df) == 300
    assert df.iloc[-1]["balance"] == 0.0
    assert math.isclose(df["principal"].sum(), 200_000, rel_tol=1e-9)


def test_amort_schedule_empty_without_principal():
    assert amort_schedule(0.0, 5.0, 25).empty
    assert aggregate_yearly(amort_schedule(0.0, 5.0, 25)).empty


def test_yearly_aggregation_matches_remaining_balance():
    yearly = aggregate_yearly(amort_schedule(400_000, 5.5, 25))
    assert yearly["year"].tolist() == list(range(1, 26))
    end_of_year_5 = float(yearly.loc[yearly["year"] == 5, "end_balance"].values[0])
    assert math.isclose(end_of_year_5, remaining_balance(400_000, 5.5, 25, 60), rel_tol=1e-9)


def test_remaining_balance_bounds():
    assert remaining_balance(100_000, 5.0, 20, 0) == 100_000
    assert remaining_balance(100_000, 5.0, 20, 240) == pytest.approx(0.0, abs=1e-6)
    assert remaining_balance(120_000, 0.0, 10, 60) == pytest.approx(60_000)


def test_summarize_reports_term_balance():
    s = summarize(400_000, 5.5, 25, term_years=5)
    assert math.isclose(s.payment_monthly, 2456.35, abs_tol=0.01)
    assert 0 < s.balance_at_term < 400_000
    assert len(s.schedule_yearly) == 25


def test_very_long_period_converges_to_interest_only():
    # (1 + r) ** n no longer fits in a float here
    payment = fixed_monthly_payment(400_000, 5.5, 20_000)
    assert math.isclose(payment, 400_000 * 5.5 / 100 / 12)
    assert remaining_balance(400_000, 5.5, 20_000, 240_000) == 400_000


def test_fractional_period_schedule():
    df = amort_schedule(120_000, 4.0, 2.5)
    assert len(df) == 30
    assert df.iloc[-1]["balance"] == pytest.approx(0.0, abs=1e-6)
