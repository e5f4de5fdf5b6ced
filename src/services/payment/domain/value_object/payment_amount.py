from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain import Currency, Money


@dataclass(frozen=True)
class PaymentAmount:
    """決済金額の内訳

    total_amount = max(0, base_amount + taxes + fees - discounts)
    """

    base_amount: Money
    taxes: Money
    fees: Money
    discounts: Money

    def __post_init__(self) -> None:
        currencies = {
            self.base_amount.currency,
            self.taxes.currency,
            self.fees.currency,
            self.discounts.currency,
        }
        if len(currencies) != 1:
            raise ValueError("All amount components must share one currency")

    @classmethod
    def of(
        cls,
        base_amount: Decimal,
        currency: Currency,
        taxes: Decimal = Decimal("0"),
        fees: Decimal = Decimal("0"),
        discounts: Decimal = Decimal("0"),
    ) -> PaymentAmount:
        return cls(
            base_amount=Money(base_amount, currency),
            taxes=Money(taxes, currency),
            fees=Money(fees, currency),
            discounts=Money(discounts, currency),
        )

    @property
    def currency(self) -> Currency:
        return self.base_amount.currency

    @property
    def total_amount(self) -> Money:
        gross = self.base_amount.amount + self.taxes.amount + self.fees.amount
        return Money(max(Decimal("0"), gross - self.discounts.amount), self.currency)
