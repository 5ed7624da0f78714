from __future__ import annotations


def currency(value: float) -> str:
    """US dollar formatting: 1234.5 -> '$1,234.50', -12 -> '-$12.00'."""
    sign = "-" if value < 0 and round(abs(value), 2) != 0 else ""
    return f"{sign}${abs(value):,.2f}"


def percent(value: float) -> str:
    """Percent with one or two decimals: 5 -> '5.0%', 5.256 -> '5.26%'.

    ``value`` is already in percent units.
    """
    text = f"{value:,.2f}"
    if text.endswith("0"):
        text = text[:-1]
    if text in ("-0.0",):
        text = "0.0"
    return f"{text}%"


def grow(value: float, annual_rate: float, years: int) -> float:
    if years <= 0:
        return value
    return value * (1 + annual_rate) ** years
