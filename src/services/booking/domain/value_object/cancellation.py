from dataclasses import dataclass

from services.booking.domain.enum import CancelledBy
from services.shared.domain import IsoDateTime, Money


@dataclass(frozen=True)
class CancellationQuote:
    """キャンセル料と返金額の見積もり（fee + refund = 予約総額）"""

    cancellation_fee: Money
    refund_amount: Money


@dataclass(frozen=True)
class Cancellation:
    """キャンセル記録（キャンセル時のみ設定される）"""

    reason: str
    cancelled_by: CancelledBy
    cancellation_fee: Money
    refund_amount: Money
    cancelled_at: IsoDateTime
