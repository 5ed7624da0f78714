from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd
import plotly.graph_objects as go

from .expenses import ExpenseItem

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8"]


def cash_flow_projection(projection_df: pd.DataFrame, title: str = "Cash Flow Projection") -> go.Figure:
    """Annual and cumulative cash flow lines from ``schedule_frame`` output."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=projection_df["year"],
            y=projection_df["cash_flow"],
            mode="lines+markers",
            name="Annual Cash Flow",
            line=dict(color="#10b981"),
        )
    )
    if "cumulative_cash_flow" in projection_df:
        fig.add_trace(
            go.Scatter(
                x=projection_df["year"],
                y=projection_df["cumulative_cash_flow"],
                mode="lines+markers",
                name="Cumulative Cash Flow",
                line=dict(color="#3b82f6"),
            )
        )
    fig.update_layout(title=title, xaxis_title="Year", yaxis_title="$")
    fig.update_yaxes(tickprefix="$", tickformat="~s")
    return fig


def cashflow_bars(projection_df: pd.DataFrame, title: str = "Annual Cash Flow") -> go.Figure:
    colors = ["#16a34a" if v >= 0 else "#dc2626" for v in projection_df["cash_flow"]]
    fig = go.Figure()
    fig.add_bar(x=projection_df["year"], y=projection_df["cash_flow"], name="Cash Flow", marker_color=colors)
    fig.update_layout(title=title, xaxis_title="Year", yaxis_title="$")
    return fig


def expense_pie(items: Sequence[ExpenseItem], title: str = "Monthly Expense Breakdown") -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=[item.name for item in items],
            values=[item.monthly for item in items],
            marker=dict(colors=[COLORS[i % len(COLORS)] for i in range(len(items))]),
            hovertemplate="%{label}: $%{value:,.2f}<br>%{percent} of expenses<extra></extra>",
        )
    )
    fig.update_layout(title=title)
    return fig


def metric_multi_curve(
    xs: List[float],
    series: Dict[str, List[float]],
    x_label: str,
    title: str = "Sensitivity",
    y_label: str = "",
) -> go.Figure:
    """Plot one line per metric against the swept input.

    series: mapping label -> list of y values aligned with xs.
    """
    fig = go.Figure()
    for name, ys in series.items():
        fig.add_trace(go.Scatter(x=xs, y=ys, mode="lines+markers", name=name))
    fig.update_layout(title=title, xaxis_title=x_label, yaxis_title=y_label)
    return fig
