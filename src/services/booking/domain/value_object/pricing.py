from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class Pricing:
    """予約料金（total_amount = base_fare × 乗客数）"""

    base_fare: Money
    total_amount: Money

    @property
    def currency(self) -> str:
        return str(self.total_amount.currency)
