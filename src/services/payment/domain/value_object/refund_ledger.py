from __future__ import annotations

from dataclasses import dataclass

from services.shared.domain import Currency, IsoDateTime, Money


@dataclass(frozen=True)
class RefundEntry:
    """払い戻し 1 回分の記録"""

    amount: Money
    reason: str
    method: str
    refunded_at: IsoDateTime
    transaction_id: str


@dataclass(frozen=True)
class RefundLedger:
    """払い戻し台帳（追記のみ）"""

    entries: tuple[RefundEntry, ...] = ()

    def total(self, currency: Currency) -> Money:
        """払い戻し済みの合計額"""
        refunded = Money.zero(currency)
        for entry in self.entries:
            refunded = refunded.add(entry.amount)
        return refunded

    def append(self, entry: RefundEntry) -> RefundLedger:
        return RefundLedger(entries=(*self.entries, entry))

    @property
    def last(self) -> RefundEntry | None:
        return self.entries[-1] if self.entries else None
