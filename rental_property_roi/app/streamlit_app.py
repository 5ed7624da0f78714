from __future__ import annotations

import logging
import os
import sys

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from rental_property_roi.core import plots
from rental_property_roi.core.down_payment import DownPayment, MINIMUM_DOWN_PAYMENT_PCT
from rental_property_roi.core.errors import InvalidInput
from rental_property_roi.core.insights import investment_insights, investment_summary
from rental_property_roi.core.model import InputSet, PROPERTY_TYPES, RentalPropertyModel, ResultSet
from rental_property_roi.core.projections import EXPENSE_INFLATION_PCT, appreciation_estimate, schedule_frame
from rental_property_roi.core.report import build_pdf
from rental_property_roi.core.sensitivity import METRICS, SWEEPABLE, default_range, sweep
from rental_property_roi.core.utils import currency, percent
from config import (
    PURCHASE_PRICE,
    DOWN_PAYMENT,
    DOWN_PAYMENT_TYPE,
    CLOSING_COSTS,
    RENOVATION_COSTS,
    PROPERTY_TYPE,
    INTEREST_RATE,
    AMORTIZATION_PERIOD,
    TERM,
    MONTHLY_RENT,
    VACANCY_RATE,
    ANNUAL_RENT_INCREASE,
    PROPERTY_TAXES,
    INSURANCE,
    CONDO_FEES,
    PROPERTY_MANAGEMENT,
    MAINTENANCE,
    UTILITIES,
    OTHER_EXPENSES,
    PROJECTION_DISPLAY_YEARS,
    APPRECIATION_RATE,
    APPRECIATION_YEARS,
    LOW_RETURN_THRESHOLD,
    TARGET_RETURN_THRESHOLD,
    STRONG_RETURN_THRESHOLD,
    LOG_LEVEL,
)

logging.basicConfig(level=LOG_LEVEL)

st.set_page_config(page_title="Rental Property Calculator", layout="wide")

DOWN_PAYMENT_UNITS = {"$": "amount", "%": "percent"}
METRIC_LABELS = {
    "monthly_cash_flow": "Monthly Cash Flow ($)",
    "cash_on_cash_return": "Cash-on-Cash Return (%)",
    "cap_rate": "Cap Rate (%)",
}
SWEEP_LABELS = {
    "interest_rate": "Interest Rate (%)",
    "monthly_rent": "Monthly Rent ($)",
    "vacancy_rate": "Vacancy Rate (%)",
    "purchase_price": "Purchase Price ($)",
}


def _down_payment_input(purchase_price: float) -> tuple:
    """Down payment value and unit; switching units converts the stored value."""
    default_kind = DOWN_PAYMENT_TYPE if DOWN_PAYMENT_TYPE in ("amount", "percent") else "amount"
    if "dp_kind" not in st.session_state:
        st.session_state["dp_kind"] = default_kind
        st.session_state["dp_value"] = float(DOWN_PAYMENT)

    unit = st.sidebar.radio(
        "Down payment unit",
        list(DOWN_PAYMENT_UNITS),
        index=0 if st.session_state["dp_kind"] == "amount" else 1,
        horizontal=True,
    )
    kind = DOWN_PAYMENT_UNITS[unit]
    if kind != st.session_state["dp_kind"] and purchase_price > 0:
        converted = DownPayment(st.session_state["dp_kind"], st.session_state["dp_value"]).convert(kind, purchase_price)
        if kind == "amount":
            st.session_state["dp_value"] = float(round(converted.value / 100) * 100)
        else:
            st.session_state["dp_value"] = float(round(converted.value))
        st.session_state["dp_kind"] = kind

    max_value = 100.0 if kind == "percent" else max(float(purchase_price), 0.0)
    st.session_state["dp_value"] = min(float(st.session_state["dp_value"]), max_value)
    value = st.sidebar.number_input(
        "Down payment (%)" if kind == "percent" else "Down payment ($)",
        min_value=0.0,
        max_value=max_value,
        step=1.0 if kind == "percent" else 1_000.0,
        key="dp_value",
    )

    if purchase_price > 0:
        other = DownPayment(kind, value).convert("percent" if kind == "amount" else "amount", purchase_price)
        st.sidebar.caption(f"({percent(other.value)})" if kind == "amount" else f"({currency(other.value)})")
    return value, kind


def sidebar_inputs() -> InputSet:
    st.sidebar.header("Property Details")
    purchase_price = st.sidebar.number_input("Purchase price ($)", min_value=0.0, value=PURCHASE_PRICE, step=5_000.0)
    down_payment, down_payment_type = _down_payment_input(purchase_price)
    type_keys = list(PROPERTY_TYPES)
    property_type = st.sidebar.selectbox(
        "Property type",
        type_keys,
        index=type_keys.index(PROPERTY_TYPE) if PROPERTY_TYPE in type_keys else 0,
        format_func=lambda k: PROPERTY_TYPES[k],
    )
    closing_costs = st.sidebar.number_input("Closing costs ($)", min_value=0.0, value=CLOSING_COSTS, step=500.0)
    renovation_costs = st.sidebar.number_input("Renovation costs ($)", min_value=0.0, value=RENOVATION_COSTS, step=1_000.0)

    st.sidebar.subheader("Mortgage")
    interest_rate = st.sidebar.number_input("Interest rate (%)", min_value=0.0, max_value=100.0, value=INTEREST_RATE, step=0.01, format="%0.2f")
    amortization_period = int(st.sidebar.number_input("Amortization period (years)", min_value=5, max_value=30, value=AMORTIZATION_PERIOD, step=1))
    term = int(st.sidebar.number_input("Mortgage term (years)", min_value=1, max_value=10, value=TERM, step=1))

    st.sidebar.subheader("Rental Income")
    monthly_rent = st.sidebar.number_input("Monthly rent ($)", min_value=0.0, value=MONTHLY_RENT, step=50.0)
    vacancy_rate = st.sidebar.number_input("Vacancy rate (%)", min_value=0.0, max_value=100.0, value=VACANCY_RATE, step=0.5, format="%0.1f")
    annual_rent_increase = st.sidebar.number_input("Annual rent increase (%)", min_value=-100.0, max_value=100.0, value=ANNUAL_RENT_INCREASE, step=0.5, format="%0.1f")

    st.sidebar.subheader("Operating Expenses")
    property_taxes = st.sidebar.number_input("Property taxes ($/year)", min_value=0.0, value=PROPERTY_TAXES, step=100.0)
    insurance = st.sidebar.number_input("Insurance ($/year)", min_value=0.0, value=INSURANCE, step=100.0)
    condo_fees = st.sidebar.number_input("HOA/Condo fees ($/month)", min_value=0.0, value=CONDO_FEES, step=25.0)
    property_management = st.sidebar.number_input("Property management (% of rent)", min_value=0.0, max_value=100.0, value=PROPERTY_MANAGEMENT, step=0.5, format="%0.1f")
    maintenance = st.sidebar.number_input("Maintenance (% of rent)", min_value=0.0, max_value=100.0, value=MAINTENANCE, step=0.5, format="%0.1f")
    utilities = st.sidebar.number_input("Utilities ($/month)", min_value=0.0, value=UTILITIES, step=25.0)
    other_expenses = st.sidebar.number_input("Other expenses ($/month)", min_value=0.0, value=OTHER_EXPENSES, step=25.0)

    return InputSet(
        purchase_price=purchase_price,
        down_payment=down_payment,
        down_payment_type=down_payment_type,
        closing_costs=closing_costs,
        renovation_costs=renovation_costs,
        property_type=property_type,
        interest_rate=interest_rate,
        amortization_period=amortization_period,
        term=term,
        monthly_rent=monthly_rent,
        vacancy_rate=vacancy_rate,
        annual_rent_increase=annual_rent_increase,
        property_taxes=property_taxes,
        insurance=insurance,
        condo_fees=condo_fees,
        property_management=property_management,
        maintenance=maintenance,
        utilities=utilities,
        other_expenses=other_expenses,
    )


def kpi_card(label: str, value: str, help_text: str | None = None):
    st.metric(label, value, help=help_text)


def style_currency(df: pd.DataFrame):
    num_cols = [c for c in df.select_dtypes(include=["number"]).columns if c != "year"]
    if len(num_cols) == 0:
        return df
    return df.style.format({col: "${:,.2f}" for col in num_cols})


def render_insights(res: ResultSet):
    for insight in investment_insights(res, low_return=LOW_RETURN_THRESHOLD, strong_return=STRONG_RETURN_THRESHOLD):
        show = {"error": st.error, "warning": st.warning, "success": st.success}[insight.level]
        show(f"**{insight.title}**  \n{insight.message}")


def render_summary(model: RentalPropertyModel, res: ResultSet, projection_df: pd.DataFrame):
    st.subheader("Summary")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        kpi_card("Monthly Cash Flow", currency(res.monthly_cash_flow))
        kpi_card("Annual Cash Flow", currency(res.annual_cash_flow))
    with c2:
        kpi_card("Cash-on-Cash Return", percent(res.cash_on_cash_return), "Annual cash flow / initial investment")
        kpi_card("Cap Rate", percent(res.cap_rate), "Net operating income / purchase price")
    with c3:
        kpi_card("Monthly Payment", currency(res.monthly_payment))
        kpi_card("Mortgage Amount", currency(res.mortgage_amount))
    with c4:
        kpi_card("Down Payment", f"{currency(res.effective_down_payment_amount)} ({percent(res.effective_down_payment_percent)})")
        kpi_card("Initial Investment", currency(res.initial_investment))

    c5, c6 = st.columns(2)
    with c5:
        st.plotly_chart(plots.expense_pie(model.expense_breakdown()), use_container_width=True)
    with c6:
        st.plotly_chart(
            plots.cash_flow_projection(projection_df, title=f"{len(projection_df)}-Year Cash Flow Projection"),
            use_container_width=True,
        )

    render_insights(res)


def render_income(model: RentalPropertyModel, res: ResultSet):
    st.subheader("Rental Income Analysis")
    income = model.income_breakdown()
    st.markdown("**Monthly Income Breakdown**")
    st.table(
        pd.DataFrame(
            [
                ("Gross Monthly Rent", currency(income.gross_rent)),
                ("Vacancy Rate", percent(income.vacancy_rate)),
                ("Vacancy Loss", f"-{currency(income.vacancy_loss)}"),
                ("Net Monthly Rent", currency(income.net_rent)),
            ],
            columns=["Item", "Value"],
        )
    )
    st.markdown("**Income Metrics**")
    c1, c2, c3 = st.columns(3)
    with c1:
        kpi_card("Net Operating Income", currency(res.net_operating_income))
    with c2:
        kpi_card("Gross Rent Multiplier", f"{res.gross_rent_multiplier:.2f}", "Purchase price / annual gross rent")
    with c3:
        kpi_card("Break-even Occupancy", percent(res.break_even_occupancy), "Total expenses / gross potential rent")


def render_expenses(model: RentalPropertyModel, res: ResultSet):
    st.subheader("Expense Analysis")
    items = model.expense_breakdown()
    df = pd.DataFrame(
        [(i.name, currency(i.monthly), currency(i.monthly * 12), percent(i.share_pct)) for i in items],
        columns=["Expense", "Monthly", "Annual", "Share"],
    )
    st.table(df)
    c1, c2, c3 = st.columns(3)
    with c1:
        kpi_card("Operating Expenses", currency(res.monthly_operating_expenses), "Monthly, excluding mortgage")
    with c2:
        kpi_card("Total Monthly Expenses", currency(res.total_monthly_expenses))
    with c3:
        kpi_card("Expense Ratio", percent(res.expense_ratio), "Operating expenses / gross rent")

    st.markdown("**Mortgage Amortization**")
    amort = model.amortization()
    st.caption(
        f"Balance at the end of the {model.inputs.term}-year term: {currency(amort.balance_at_term)}"
    )
    st.dataframe(style_currency(amort.schedule_yearly), use_container_width=True)


def render_projections(model: RentalPropertyModel, res: ResultSet, projection_df: pd.DataFrame):
    st.subheader("Cash Flow Projections")
    st.caption(
        f"Annual rent increase: {percent(model.inputs.annual_rent_increase)} · "
        f"Expense growth rate: {percent(EXPENSE_INFLATION_PCT)}"
    )
    st.dataframe(style_currency(projection_df), use_container_width=True)
    st.download_button(
        "Export CSV",
        data=projection_df.to_csv(index=False).encode("utf-8"),
        file_name="cash_flow_projection.csv",
        mime="text/csv",
    )
    st.plotly_chart(plots.cash_flow_projection(projection_df), use_container_width=True)
    st.plotly_chart(plots.cashflow_bars(schedule_frame(res.cash_flow_schedule)), use_container_width=True)

    st.markdown("**Investment Summary**")
    st.info(investment_summary(res.cash_on_cash_return, TARGET_RETURN_THRESHOLD, STRONG_RETURN_THRESHOLD))
    est = appreciation_estimate(model.inputs.purchase_price, APPRECIATION_RATE, APPRECIATION_YEARS)
    st.markdown(
        f"At a conservative {percent(est.rate_pct)} annual appreciation rate, this property could be worth "
        f"approximately {currency(est.future_value)} in {est.years} years, potentially adding another "
        f"{currency(est.equity_gain)} in equity."
    )


def render_sensitivity(inputs: InputSet):
    st.subheader("Sensitivity")
    field = st.selectbox("Input to vary", list(SWEEPABLE), format_func=lambda k: SWEEP_LABELS[k])
    df = sweep(inputs, field, default_range(inputs, field))
    if df.empty:
        st.info("No valid values in range.")
        return
    c1, c2 = st.columns(2)
    with c1:
        fig = plots.metric_multi_curve(
            df[field].tolist(),
            {METRIC_LABELS["monthly_cash_flow"]: df["monthly_cash_flow"].tolist()},
            SWEEP_LABELS[field],
            title="Monthly cash flow",
            y_label="$",
        )
        st.plotly_chart(fig, use_container_width=True)
    with c2:
        fig = plots.metric_multi_curve(
            df[field].tolist(),
            {METRIC_LABELS[m]: df[m].tolist() for m in METRICS if m != "monthly_cash_flow"},
            SWEEP_LABELS[field],
            title="Returns",
            y_label="%",
        )
        st.plotly_chart(fig, use_container_width=True)


def render_report(inputs: InputSet, res: ResultSet, projection_df: pd.DataFrame):
    st.subheader("Report")
    if st.button("Generate PDF"):
        st.download_button(
            "Download PDF",
            data=build_pdf(inputs, res, projection_df),
            file_name="rental_property_report.pdf",
            mime="application/pdf",
        )


def main():
    st.title("Rental Property Calculator")
    inputs = sidebar_inputs()
    try:
        model = RentalPropertyModel(inputs)
    except InvalidInput as exc:
        st.error(f"Invalid input - {exc}")
        return
    res = model.results()
    if res.stated_down_payment_percent < MINIMUM_DOWN_PAYMENT_PCT:
        st.sidebar.warning(
            f"Investment properties typically require at least {MINIMUM_DOWN_PAYMENT_PCT:.0f}% down payment"
        )
    projection_df = schedule_frame(res.cash_flow_schedule, years=PROJECTION_DISPLAY_YEARS)

    tabs = st.tabs(["Summary", "Rental Income", "Expenses", "Projections", "Sensitivity"])
    with tabs[0]:
        render_summary(model, res, projection_df)
    with tabs[1]:
        render_income(model, res)
    with tabs[2]:
        render_expenses(model, res)
    with tabs[3]:
        render_projections(model, res, projection_df)
    with tabs[4]:
        render_sensitivity(inputs)

    st.divider()
    render_report(inputs, res, projection_df)
    st.caption(
        "This calculator provides estimates only and should not be considered financial advice. "
        "Consult with a real estate professional for personalized investment information."
    )


if __name__ == "__main__":
    main()
