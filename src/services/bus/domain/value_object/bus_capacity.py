from __future__ import annotations

from dataclasses import dataclass

from services.shared.domain.exception import InvalidCapacityDeltaException

MAX_TOTAL_SEATS = 100


@dataclass(frozen=True)
class BusCapacity:
    """車両の座席数カウンタ

    - 0 <= available_seats <= total_seats
    - 直接指定された空席数は範囲内に丸める
    - 増減（adjust）は範囲外になる場合に例外とし、丸めない
    """

    total_seats: int
    available_seats: int

    def __post_init__(self) -> None:
        if not 1 <= self.total_seats <= MAX_TOTAL_SEATS:
            raise ValueError(
                f"Total seats must be between 1 and {MAX_TOTAL_SEATS}: "
                f"{self.total_seats}"
            )
        clamped = max(0, min(self.available_seats, self.total_seats))
        object.__setattr__(self, "available_seats", clamped)

    @classmethod
    def full(cls, total_seats: int) -> BusCapacity:
        """全席空きの状態で生成する"""
        return cls(total_seats=total_seats, available_seats=total_seats)

    def adjust(self, delta: int) -> BusCapacity:
        """空席数を delta だけ増減した新しいカウンタを返す"""
        result = self.available_seats + delta
        if not 0 <= result <= self.total_seats:
            raise InvalidCapacityDeltaException(
                f"Cannot adjust available seats by {delta}: "
                f"{self.available_seats}/{self.total_seats} would become {result}"
            )
        return BusCapacity(total_seats=self.total_seats, available_seats=result)

    def resize(self, total_seats: int) -> BusCapacity:
        """総座席数を変更する（予約済み席数は維持し、範囲内に丸める）"""
        booked = self.total_seats - self.available_seats
        return BusCapacity(
            total_seats=total_seats, available_seats=total_seats - booked
        )
