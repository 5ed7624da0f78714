from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from .errors import InvalidInput

DownPaymentKind = Literal["amount", "percent"]

AMOUNT: Final[str] = "amount"
PERCENT: Final[str] = "percent"

# Lenders want at least 20% equity on investment properties
MINIMUM_DOWN_PAYMENT_PCT: Final[float] = 20.0


def _check_price(purchase_price: float) -> None:
    if purchase_price <= 0:
        raise InvalidInput("purchase_price", purchase_price, "must be greater than zero")


@dataclass(frozen=True)
class DownPayment:
    """A down payment expressed either as a currency amount or as a percent of price."""

    kind: DownPaymentKind
    value: float

    def __post_init__(self) -> None:
        if self.kind not in (AMOUNT, PERCENT):
            raise InvalidInput("down_payment_type", self.kind, "must be 'amount' or 'percent'")

    def to_amount(self, purchase_price: float) -> float:
        _check_price(purchase_price)
        if self.kind == AMOUNT:
            return float(self.value)
        return purchase_price * self.value / 100

    def to_percent(self, purchase_price: float) -> float:
        _check_price(purchase_price)
        if self.kind == PERCENT:
            return float(self.value)
        return self.value / purchase_price * 100

    def convert(self, kind: DownPaymentKind, purchase_price: float) -> "DownPayment":
        """Same down payment re-expressed in ``kind`` units."""
        if kind == self.kind:
            return self
        if kind == AMOUNT:
            return DownPayment(AMOUNT, self.to_amount(purchase_price))
        return DownPayment(PERCENT, self.to_percent(purchase_price))


@dataclass(frozen=True)
class NormalizedDownPayment:
    stated_amount: float
    stated_percent: float
    effective_amount: float
    effective_percent: float
    mortgage_amount: float

    @property
    def floor_applied(self) -> bool:
        return self.effective_amount > self.stated_amount


def minimum_down_payment(purchase_price: float) -> float:
    return MINIMUM_DOWN_PAYMENT_PCT / 100 * purchase_price


def normalize(down_payment: DownPayment, purchase_price: float) -> NormalizedDownPayment:
    """Resolve the amount/percent duality and apply the minimum equity floor."""
    stated_amount = down_payment.to_amount(purchase_price)
    stated_percent = down_payment.to_percent(purchase_price)
    effective_amount = max(stated_amount, minimum_down_payment(purchase_price))
    return NormalizedDownPayment(
        stated_amount=stated_amount,
        stated_percent=stated_percent,
        effective_amount=effective_amount,
        effective_percent=effective_amount / purchase_price * 100,
        mortgage_amount=purchase_price - effective_amount,
    )
