from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot operate on money with different currencies")

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: int | Decimal) -> Money:
        """金額を factor 倍する"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def percentage(self, percent: Decimal) -> Money:
        """percent% の金額を通貨の補助単位で四捨五入して返す"""
        return Money(
            amount=self.amount * percent / Decimal(100), currency=self.currency
        ).rounded()

    def rounded(self) -> Money:
        """通貨の補助単位で四捨五入する"""
        return Money(
            amount=self.amount.quantize(self.currency.quantum, rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def is_zero(self) -> bool:
        return self.amount == 0

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """0 円（通貨指定）"""
        return cls(Decimal("0"), currency)

    @classmethod
    def inr(cls, amount: Decimal) -> Money:
        """インドルピーで Money を生成"""
        return cls(amount, Currency.inr())

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
