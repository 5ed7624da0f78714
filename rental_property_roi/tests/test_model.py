import math
from dataclasses import replace

import pytest

from rental_property_roi.core.errors import InvalidInput
from rental_property_roi.core.model import InputSet, RentalPropertyModel, compute


def scenario(**overrides) -> InputSet:
    base = InputSet(
        purchase_price=500_000,
        down_payment=100_000,
        down_payment_type="amount",
        interest_rate=5.5,
        amortization_period=25,
        monthly_rent=2_500,
        vacancy_rate=5,
        property_taxes=5_000,
        insurance=1_500,
        property_management=8,
        maintenance=5,
    )
    return replace(base, **overrides)


def test_negative_cash_flow_scenario():
    res = compute(scenario())
    assert res.effective_down_payment_amount == 100_000
    assert not res.minimum_down_payment_applied
    assert res.mortgage_amount == 400_000
    assert math.isclose(res.monthly_payment, 2456.35, abs_tol=0.01)
    assert math.isclose(res.monthly_rent_after_vacancy, 2375.0)
    assert math.isclose(res.monthly_operating_expenses, 866.67, abs_tol=0.01)
    assert math.isclose(res.monthly_cash_flow, -948.02, abs_tol=0.01)
    assert math.isclose(res.net_operating_income, 18_100.0)
    assert math.isclose(res.cap_rate, 3.62)
    assert math.isclose(res.gross_rent_multiplier, 500_000 / 30_000)
    assert math.isclose(res.expense_ratio, 10_400 / 30_000 * 100)
    assert res.monthly_cash_flow < 0


def test_floor_enforced_results_match_twenty_percent_case():
    at_minimum = compute(scenario())
    floored = compute(scenario(down_payment=50_000))
    assert floored.minimum_down_payment_applied
    assert floored.stated_down_payment_percent == 10.0
    assert floored.effective_down_payment_amount == 100_000
    for name in ("mortgage_amount", "monthly_payment", "monthly_cash_flow", "cash_on_cash_return", "cap_rate"):
        assert getattr(floored, name) == getattr(at_minimum, name)
    assert floored.cash_flow_schedule == at_minimum.cash_flow_schedule


@pytest.mark.parametrize(
    "down_payment,kind",
    [(0, "percent"), (5, "percent"), (20, "percent"), (60, "percent"), (0, "amount"), (250_000, "amount")],
)
def test_effective_down_payment_never_below_twenty_percent(down_payment, kind):
    res = compute(scenario(down_payment=down_payment, down_payment_type=kind))
    assert res.effective_down_payment_percent >= 20


def test_cash_flow_identity():
    res = compute(scenario(condo_fees=150, utilities=80, other_expenses=25, renovation_costs=12_000))
    assert res.monthly_cash_flow == res.monthly_rent_after_vacancy - res.total_monthly_expenses
    assert math.isclose(
        res.monthly_cash_flow,
        res.monthly_rent_after_vacancy - res.monthly_operating_expenses - res.monthly_payment,
        abs_tol=1e-9,
    )
    assert res.annual_cash_flow == res.monthly_cash_flow * 12
    assert res.total_monthly_expenses == res.monthly_operating_expenses + res.monthly_payment


def test_schedule_shape_and_constant_mortgage():
    res = compute(scenario())
    schedule = res.cash_flow_schedule
    assert len(schedule) == 30
    assert [row.year for row in schedule] == list(range(1, 31))
    assert all(row.mortgage_payment == res.monthly_payment * 12 for row in schedule)
    assert schedule[0].rental_income == res.monthly_rent_after_vacancy * 12
    assert schedule[0].operating_expenses == res.monthly_operating_expenses * 12


def test_compute_is_idempotent():
    inputs = scenario(annual_rent_increase=3.5)
    assert compute(inputs) == compute(inputs)


def test_zero_interest_payment():
    res = compute(scenario(interest_rate=0))
    assert res.monthly_payment == res.mortgage_amount / (25 * 12)


def test_zero_initial_investment_gives_zero_cash_on_cash():
    # 20% floor on 500k is 100k; closing credits cancel it out
    res = compute(scenario(down_payment=0, down_payment_type="percent", closing_costs=-100_000))
    assert res.initial_investment == 0
    assert res.cash_on_cash_return == 0


def test_cash_on_cash_and_break_even():
    res = compute(scenario(closing_costs=5_000))
    assert res.initial_investment == 105_000
    assert math.isclose(res.cash_on_cash_return, res.annual_cash_flow / 105_000 * 100)
    assert math.isclose(res.break_even_occupancy, res.total_monthly_expenses / 2_500 * 100)


@pytest.mark.parametrize(
    "field,value",
    [
        ("purchase_price", 0),
        ("purchase_price", -1),
        ("monthly_rent", 0),
        ("amortization_period", 0),
        ("interest_rate", float("nan")),
        ("insurance", float("inf")),
    ],
)
def test_invalid_inputs_raise(field, value):
    with pytest.raises(InvalidInput) as excinfo:
        compute(scenario(**{field: value}))
    assert excinfo.value.field == field


def test_model_breakdowns():
    model = RentalPropertyModel(scenario())
    names = [item.name for item in model.expense_breakdown()]
    assert names == ["Mortgage", "Property Tax", "Insurance", "Property Mgmt", "Maintenance"]
    assert math.isclose(sum(i.share_pct for i in model.expense_breakdown()), 100.0)
    income = model.income_breakdown()
    assert income.vacancy_loss == 125.0
    amort = model.amortization()
    assert math.isclose(amort.payment_monthly, model.monthly_payment)


def test_unknown_down_payment_type_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        compute(scenario(down_payment_type="shares"))
    assert excinfo.value.field == "down_payment_type"


def test_very_long_amortization_period_still_computes():
    res = compute(scenario(amortization_period=20_000))
    assert math.isclose(res.monthly_payment, 400_000 * 5.5 / 100 / 12)
    assert len(res.cash_flow_schedule) == 30
    assert all(math.isfinite(row.cash_flow) for row in res.cash_flow_schedule)


def test_fractional_amortization_period_breakdown():
    amort = RentalPropertyModel(scenario(amortization_period=2.5)).amortization()
    assert len(amort.schedule_monthly) == 30
    assert amort.schedule_yearly["year"].tolist() == [1, 2, 3]
