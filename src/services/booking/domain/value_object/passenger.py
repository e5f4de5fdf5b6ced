from dataclasses import dataclass

from services.trip.domain.enum import SeatType


@dataclass(frozen=True)
class Passenger:
    """乗客（座席番号ごとに 1 名）"""

    seat_number: str
    first_name: str
    last_name: str
    age: int
    seat_type: SeatType | None = None

    def __post_init__(self) -> None:
        if not self.seat_number:
            raise ValueError("Seat number is required")
        if not self.first_name or not self.last_name:
            raise ValueError("Passenger name is required")
        if self.age < 0:
            raise ValueError(f"Invalid passenger age: {self.age}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
