from __future__ import annotations

import io

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .model import InputSet, PROPERTY_TYPES, ResultSet
from .utils import currency, percent


def build_pdf(inputs: InputSet, res: ResultSet, projection_df: pd.DataFrame) -> bytes:
    """One-page PDF summary: key metrics followed by the projection table."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=LETTER)
    styles = getSampleStyleSheet()
    story = []
    story.append(Paragraph("Rental Property Analysis", styles["Title"]))
    story.append(
        Paragraph(
            f"{PROPERTY_TYPES.get(inputs.property_type, inputs.property_type)} - "
            f"purchase price {currency(inputs.purchase_price)}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 12))

    lines = [
        ("Down payment", f"{currency(res.effective_down_payment_amount)} ({percent(res.effective_down_payment_percent)})"),
        ("Mortgage amount", currency(res.mortgage_amount)),
        ("Monthly payment", currency(res.monthly_payment)),
        ("Monthly cash flow", currency(res.monthly_cash_flow)),
        ("Annual cash flow", currency(res.annual_cash_flow)),
        ("Cash-on-cash return", percent(res.cash_on_cash_return)),
        ("Cap rate", percent(res.cap_rate)),
        ("Net operating income", currency(res.net_operating_income)),
        ("Gross rent multiplier", f"{res.gross_rent_multiplier:.2f}"),
        ("Expense ratio", percent(res.expense_ratio)),
        ("Break-even occupancy", percent(res.break_even_occupancy)),
    ]
    for label, value in lines:
        story.append(Paragraph(f"{label}: {value}", styles["Normal"]))
    story.append(Spacer(1, 12))

    if not projection_df.empty:
        header = ["Year", "Rental Income", "Operating Exp.", "Mortgage", "Cash Flow", "Cumulative"]
        data = [header] + [
            [
                int(row.year),
                currency(row.rental_income),
                currency(row.operating_expenses),
                currency(row.mortgage_payment),
                currency(row.cash_flow),
                currency(row.cumulative_cash_flow),
            ]
            for row in projection_df.itertuples(index=False)
        ]
        table = Table(data, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                ]
            )
        )
        story.append(table)
        story.append(Spacer(1, 12))

    story.append(
        Paragraph(
            "This calculator provides estimates only and should not be considered financial advice.",
            styles["Italic"],
        )
    )
    doc.build(story)
    return buffer.getvalue()
