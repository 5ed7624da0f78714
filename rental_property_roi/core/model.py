from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import List, Tuple

from .amortization import AmortizationSummary, fixed_monthly_payment
from .amortization import summarize as amort_summarize
from .down_payment import AMOUNT, PERCENT, DownPayment, NormalizedDownPayment, normalize
from .errors import InvalidInput
from .expenses import ExpenseItem, IncomeBreakdown
from .expenses import expense_breakdown, income_breakdown, monthly_operating_expenses
from .projections import CashFlowYear, generate_cash_flow_schedule

logger = logging.getLogger(__name__)

PROPERTY_TYPES = {
    "single": "Single Family Home",
    "multi": "Multi-Family (2-4 Units)",
    "apartment": "Apartment Building (5+ Units)",
    "condo": "Condominium",
    "townhouse": "Townhouse",
}


@dataclass
class InputSet:
    # Property
    purchase_price: float = 500_000.0
    down_payment: float = 100_000.0
    down_payment_type: str = "amount"  # amount | percent
    closing_costs: float = 5_000.0
    renovation_costs: float = 0.0
    property_type: str = "single"

    # Mortgage (rates in percent)
    interest_rate: float = 5.5
    amortization_period: int = 25
    term: int = 5

    # Rental income
    monthly_rent: float = 2_500.0
    vacancy_rate: float = 5.0
    annual_rent_increase: float = 2.0

    # Operating expenses
    property_taxes: float = 5_000.0  # annual
    insurance: float = 1_500.0  # annual
    condo_fees: float = 0.0  # monthly
    property_management: float = 8.0  # % of gross rent
    maintenance: float = 5.0  # % of gross rent
    utilities: float = 0.0  # monthly
    other_expenses: float = 0.0  # monthly

    @property
    def down_payment_value(self) -> DownPayment:
        return DownPayment(self.down_payment_type, self.down_payment)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ResultSet:
    mortgage_amount: float
    effective_down_payment_percent: float
    monthly_payment: float
    monthly_rent_after_vacancy: float
    monthly_operating_expenses: float
    total_monthly_expenses: float
    monthly_cash_flow: float
    annual_cash_flow: float
    cash_on_cash_return: float
    cap_rate: float
    gross_rent_multiplier: float
    expense_ratio: float
    break_even_occupancy: float
    net_operating_income: float
    cash_flow_schedule: Tuple[CashFlowYear, ...]

    # Down payment detail for the UI
    stated_down_payment_amount: float
    stated_down_payment_percent: float
    effective_down_payment_amount: float
    initial_investment: float
    minimum_down_payment_applied: bool


def validate(inputs: InputSet) -> None:
    """Reject inputs that would turn a ratio into inf or NaN."""
    for f in fields(inputs):
        value = getattr(inputs, f.name)
        if isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isfinite(value):
            raise InvalidInput(f.name, value, "must be a finite number")
    if inputs.purchase_price <= 0:
        raise InvalidInput("purchase_price", inputs.purchase_price, "must be greater than zero")
    if inputs.monthly_rent <= 0:
        raise InvalidInput("monthly_rent", inputs.monthly_rent, "must be greater than zero")
    if inputs.amortization_period < 1:
        raise InvalidInput("amortization_period", inputs.amortization_period, "must be at least one year")
    if inputs.down_payment_type not in (AMOUNT, PERCENT):
        raise InvalidInput("down_payment_type", inputs.down_payment_type, "must be 'amount' or 'percent'")


class RentalPropertyModel:
    def __init__(self, inputs: InputSet):
        try:
            validate(inputs)
        except InvalidInput as exc:
            logger.warning("Rejected inputs: %s", exc)
            raise
        self.inputs = inputs

        self.down: NormalizedDownPayment = normalize(inputs.down_payment_value, inputs.purchase_price)
        if self.down.floor_applied:
            logger.info(
                "Down payment %.2f (%.2f%%) raised to the %.2f minimum",
                self.down.stated_amount,
                self.down.stated_percent,
                self.down.effective_amount,
            )
        self.monthly_payment = fixed_monthly_payment(
            self.down.mortgage_amount, inputs.interest_rate, inputs.amortization_period
        )

    # ------------------------- Core calculators ------------------------- #
    def _rent_after_vacancy(self) -> float:
        return self.inputs.monthly_rent * (1 - self.inputs.vacancy_rate / 100)

    def _initial_investment(self) -> float:
        return self.down.effective_amount + self.inputs.closing_costs + self.inputs.renovation_costs

    def results(self) -> ResultSet:
        inputs = self.inputs
        rent_after_vacancy = self._rent_after_vacancy()
        operating = monthly_operating_expenses(inputs)

        schedule = generate_cash_flow_schedule(
            monthly_rent_after_vacancy=rent_after_vacancy,
            monthly_operating_expenses=operating,
            annual_rent_increase_pct=inputs.annual_rent_increase,
            monthly_payment=self.monthly_payment,
        )

        total_monthly = operating + self.monthly_payment
        monthly_cash_flow = rent_after_vacancy - total_monthly
        annual_cash_flow = monthly_cash_flow * 12

        initial_investment = self._initial_investment()
        cash_on_cash = annual_cash_flow / initial_investment * 100 if initial_investment > 0 else 0.0

        noi = rent_after_vacancy * 12 - operating * 12
        gross_annual_rent = inputs.monthly_rent * 12

        res = ResultSet(
            mortgage_amount=self.down.mortgage_amount,
            effective_down_payment_percent=self.down.effective_percent,
            monthly_payment=self.monthly_payment,
            monthly_rent_after_vacancy=rent_after_vacancy,
            monthly_operating_expenses=operating,
            total_monthly_expenses=total_monthly,
            monthly_cash_flow=monthly_cash_flow,
            annual_cash_flow=annual_cash_flow,
            cash_on_cash_return=cash_on_cash,
            cap_rate=noi / inputs.purchase_price * 100,
            gross_rent_multiplier=inputs.purchase_price / gross_annual_rent,
            expense_ratio=(operating * 12) / gross_annual_rent * 100,
            break_even_occupancy=total_monthly / inputs.monthly_rent * 100,
            net_operating_income=noi,
            cash_flow_schedule=schedule,
            stated_down_payment_amount=self.down.stated_amount,
            stated_down_payment_percent=self.down.stated_percent,
            effective_down_payment_amount=self.down.effective_amount,
            initial_investment=initial_investment,
            minimum_down_payment_applied=self.down.floor_applied,
        )
        logger.debug(
            "payment=%.2f cash_flow=%.2f coc=%.2f%% cap=%.2f%%",
            res.monthly_payment,
            res.monthly_cash_flow,
            res.cash_on_cash_return,
            res.cap_rate,
        )
        return res

    # ------------------------- Breakdowns ------------------------- #
    def amortization(self) -> AmortizationSummary:
        return amort_summarize(
            principal=self.down.mortgage_amount,
            annual_rate_pct=self.inputs.interest_rate,
            years=self.inputs.amortization_period,
            term_years=self.inputs.term,
        )

    def expense_breakdown(self) -> List[ExpenseItem]:
        return expense_breakdown(self.inputs, self.monthly_payment)

    def income_breakdown(self) -> IncomeBreakdown:
        return income_breakdown(self.inputs)


def compute(inputs: InputSet) -> ResultSet:
    """Map an ``InputSet`` to a complete ``ResultSet``.

    Pure and deterministic. Raises ``InvalidInput`` when the purchase price or
    the monthly rent is not positive, or the amortization period is empty.
    """
    return RentalPropertyModel(inputs).results()
