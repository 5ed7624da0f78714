from dataclasses import replace

from rental_property_roi.core.insights import investment_insights, investment_summary
from rental_property_roi.core.model import InputSet, compute


def titles(res):
    return [i.title for i in investment_insights(res)]


def test_negative_cash_flow_and_low_down_payment():
    res = compute(InputSet(down_payment=50_000))
    found = titles(res)
    assert "Negative Cash Flow Warning" in found
    assert "Minimum Down Payment" in found
    # negative returns are not "low", they are negative
    assert "Low Return Warning" not in found


def test_strong_return():
    res = compute(InputSet(monthly_rent=6_000, down_payment=50, down_payment_type="percent", closing_costs=0))
    assert res.cash_on_cash_return >= 8
    assert titles(res) == ["Strong Investment Potential"]


def test_low_return_threshold_is_configurable():
    res = compute(InputSet(monthly_rent=6_000, down_payment=50, down_payment_type="percent", closing_costs=0))
    found = [i.title for i in investment_insights(res, low_return=100, strong_return=200)]
    assert found == ["Low Return Warning"]


def test_negative_cash_flow_message_uses_absolute_loss():
    res = compute(InputSet())
    insight = next(i for i in investment_insights(res) if i.level == "error")
    assert "-$" not in insight.message
    assert insight.message.startswith("This property is projected to lose $")


def test_summary_tiers():
    assert investment_summary(9).startswith("This property shows strong potential")
    assert investment_summary(6).startswith("This property shows decent potential")
    assert investment_summary(1).startswith("This property shows below-average returns")
    assert investment_summary(-3).startswith("This property shows negative returns")
    assert "5.0%" in investment_summary(5)
