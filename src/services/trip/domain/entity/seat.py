from dataclasses import dataclass

from services.shared.domain import UserId
from services.trip.domain.enum import SeatType


@dataclass
class Seat:
    """座席表の 1 席（Trip 集約の内部エンティティ）

    状態の変更は Trip.book_seat / Trip.release_seat からのみ行う。
    """

    seat_number: str
    seat_type: SeatType = SeatType.AISLE
    is_booked: bool = False
    passenger_id: UserId | None = None
