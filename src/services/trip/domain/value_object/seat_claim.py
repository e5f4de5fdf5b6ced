from dataclasses import dataclass

from services.shared.domain import UserId
from services.trip.domain.enum import SeatType


@dataclass(frozen=True)
class SeatClaim:
    """座席の予約要求（座席番号 + 利用者 + 希望座席タイプ）"""

    seat_number: str
    passenger_id: UserId
    seat_type: SeatType | None = None
