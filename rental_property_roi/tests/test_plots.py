from rental_property_roi.core import plots
from rental_property_roi.core.model import RentalPropertyModel, InputSet
from rental_property_roi.core.projections import schedule_frame


def test_projection_figures():
    res = RentalPropertyModel(InputSet()).results()
    df = schedule_frame(res.cash_flow_schedule, years=10)
    fig = plots.cash_flow_projection(df)
    assert [t.name for t in fig.data] == ["Annual Cash Flow", "Cumulative Cash Flow"]
    assert len(fig.data[0].x) == 10
    bars = plots.cashflow_bars(df)
    assert len(bars.data) == 1


def test_expense_pie_uses_breakdown():
    model = RentalPropertyModel(InputSet())
    items = model.expense_breakdown()
    fig = plots.expense_pie(items)
    assert list(fig.data[0].labels) == [i.name for i in items]


def test_metric_multi_curve():
    fig = plots.metric_multi_curve([1, 2], {"a": [1, 2], "b": [3, 4]}, "x")
    assert len(fig.data) == 2
