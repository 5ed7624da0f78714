from __future__ import annotations

from dataclasses import fields, replace
from typing import Iterable, List

import numpy as np
import pandas as pd

from .errors import InvalidInput
from .model import InputSet, compute

METRICS = ["monthly_cash_flow", "cash_on_cash_return", "cap_rate"]

# Inputs that make sense to sweep, with the half-width of the default range
SWEEPABLE = {
    "interest_rate": 2.0,
    "monthly_rent": 500.0,
    "vacancy_rate": 5.0,
    "purchase_price": 100_000.0,
}


def default_range(inputs: InputSet, field: str, points: int = 9) -> List[float]:
    """Evenly spaced values around the current input, never below zero."""
    base = float(getattr(inputs, field))
    half = SWEEPABLE[field]
    low = max(0.0, base - half)
    high = base + half
    return np.linspace(low, high, points).tolist()


def sweep(inputs: InputSet, field: str, values: Iterable[float]) -> pd.DataFrame:
    """Recompute the headline metrics with ``field`` set to each value.

    Columns: the swept field followed by ``METRICS``. Values that make the
    inputs invalid (e.g. zero rent) are skipped.
    """
    if field not in {f.name for f in fields(InputSet)}:
        raise KeyError(field)
    rows = []
    for value in values:
        try:
            res = compute(replace(inputs, **{field: float(value)}))
        except InvalidInput:
            continue
        rows.append({field: float(value), **{m: getattr(res, m) for m in METRICS}})
    return pd.DataFrame(rows, columns=[field, *METRICS])
