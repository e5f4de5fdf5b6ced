from collections.abc import Sequence
from decimal import Decimal

from services.booking.domain.value_object import CancellationQuote
from services.shared.domain import IsoDateTime, Money

FULL_FEE = Decimal("100")


class CancellationPolicy:
    """出発までの残り時間に応じたキャンセル料テーブル

    fee_schedule は [(出発までの時間(h), キャンセル料(%))]。
    時間の大きい段階から評価し、残り時間が段階の時間以上なら
    その段階を適用する。出発後のキャンセルは全額がキャンセル料。
    """

    def __init__(self, fee_schedule: Sequence[tuple[int, Decimal]]) -> None:
        self._fee_schedule = sorted(fee_schedule, key=lambda tier: tier[0], reverse=True)

    def fee_percent(self, hours_before_departure: float) -> Decimal:
        """キャンセル料率（%）"""
        if hours_before_departure < 0:
            return FULL_FEE
        for hours, percent in self._fee_schedule:
            if hours_before_departure >= hours:
                return percent
        return FULL_FEE

    def quote(
        self, total_amount: Money, departure: IsoDateTime, now: IsoDateTime
    ) -> CancellationQuote:
        """キャンセル料と返金額を計算する（通貨の補助単位で四捨五入）"""
        percent = self.fee_percent(now.hours_until(departure))
        fee = total_amount.percentage(percent)
        if total_amount < fee:
            fee = total_amount
        return CancellationQuote(
            cancellation_fee=fee, refund_amount=total_amount.subtract(fee)
        )
