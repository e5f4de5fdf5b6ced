from __future__ import annotations

from dataclasses import dataclass, replace

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class StopPoint:
    """乗車地・降車地"""

    city: str
    address: str | None = None

    def __post_init__(self) -> None:
        if not self.city:
            raise ValueError("City is required")


@dataclass(frozen=True)
class JourneyDetails:
    """乗車区間と日時（作成時に路線の所要時間から一度だけ計算する）"""

    departure: IsoDateTime
    arrival: IsoDateTime
    pickup_point: StopPoint
    drop_point: StopPoint

    def with_points(
        self, pickup_point: StopPoint | None, drop_point: StopPoint | None
    ) -> JourneyDetails:
        return replace(
            self,
            pickup_point=pickup_point or self.pickup_point,
            drop_point=drop_point or self.drop_point,
        )
