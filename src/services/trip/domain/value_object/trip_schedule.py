from __future__ import annotations

from dataclasses import dataclass, replace

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class TripSchedule:
    """運行スケジュール（出発・到着予定と実績、遅延分数）"""

    departure: IsoDateTime
    arrival: IsoDateTime
    actual_departure: IsoDateTime | None = None
    actual_arrival: IsoDateTime | None = None
    delay_minutes: int = 0

    def __post_init__(self) -> None:
        if not self.arrival.is_after(self.departure):
            raise ValueError("Arrival must be after departure")
        if self.delay_minutes < 0:
            raise ValueError("Delay cannot be negative")

    @property
    def is_delayed(self) -> bool:
        return self.delay_minutes > 0

    @property
    def estimated_arrival(self) -> IsoDateTime:
        """到着見込み（実績があれば実績）"""
        if self.actual_arrival is not None:
            return self.actual_arrival
        return self.arrival.plus_minutes(self.delay_minutes)

    def with_actual_departure(self, at: IsoDateTime) -> TripSchedule:
        return replace(self, actual_departure=at)

    def with_actual_arrival(self, at: IsoDateTime) -> TripSchedule:
        return replace(self, actual_arrival=at)

    def with_delay(self, delay_minutes: int) -> TripSchedule:
        return replace(self, delay_minutes=delay_minutes)
