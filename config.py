from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent
CONFIG_PATH = BASE_DIR / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "purchase_price": 500_000,
    "down_payment": 100_000,
    "down_payment_type": "amount",
    "closing_costs": 5_000,
    "renovation_costs": 0,
    "property_type": "single",
    "interest_rate": 5.5,
    "amortization_period": 25,
    "term": 5,
    "monthly_rent": 2_500,
    "vacancy_rate": 5,
    "annual_rent_increase": 2,
    "property_taxes": 5_000,
    "insurance": 1_500,
    "condo_fees": 0,
    "property_management": 8,
    "maintenance": 5,
    "utilities": 0,
    "other_expenses": 0,
    "projection_display_years": 10,
    "appreciation_rate": 3,
    "appreciation_years": 10,
    "low_return_threshold": 4,
    "target_return_threshold": 5,
    "strong_return_threshold": 8,
    "log_level": "INFO",
}


def load_config(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    """Read ``config.yaml`` and overlay it on the built-in defaults.

    A missing file or a document that is not a mapping yields the defaults.
    """
    data: Dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                data = loaded
    return {**DEFAULTS, **data}


CFG = load_config()

# Property
PURCHASE_PRICE: float = float(CFG["purchase_price"])
DOWN_PAYMENT: float = float(CFG["down_payment"])
DOWN_PAYMENT_TYPE: str = str(CFG["down_payment_type"])
CLOSING_COSTS: float = float(CFG["closing_costs"])
RENOVATION_COSTS: float = float(CFG["renovation_costs"])
PROPERTY_TYPE: str = str(CFG["property_type"])

# Mortgage
INTEREST_RATE: float = float(CFG["interest_rate"])
AMORTIZATION_PERIOD: int = int(CFG["amortization_period"])
TERM: int = int(CFG["term"])

# Rental income
MONTHLY_RENT: float = float(CFG["monthly_rent"])
VACANCY_RATE: float = float(CFG["vacancy_rate"])
ANNUAL_RENT_INCREASE: float = float(CFG["annual_rent_increase"])

# Operating expenses
PROPERTY_TAXES: float = float(CFG["property_taxes"])
INSURANCE: float = float(CFG["insurance"])
CONDO_FEES: float = float(CFG["condo_fees"])
PROPERTY_MANAGEMENT: float = float(CFG["property_management"])
MAINTENANCE: float = float(CFG["maintenance"])
UTILITIES: float = float(CFG["utilities"])
OTHER_EXPENSES: float = float(CFG["other_expenses"])

# Display
PROJECTION_DISPLAY_YEARS: int = int(CFG["projection_display_years"])
APPRECIATION_RATE: float = float(CFG["appreciation_rate"])  # percent
APPRECIATION_YEARS: int = int(CFG["appreciation_years"])
LOW_RETURN_THRESHOLD: float = float(CFG["low_return_threshold"])
TARGET_RETURN_THRESHOLD: float = float(CFG["target_return_threshold"])
STRONG_RETURN_THRESHOLD: float = float(CFG["strong_return_threshold"])

LOG_LEVEL: str = str(CFG["log_level"]).upper()
