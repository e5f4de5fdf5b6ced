from dataclasses import dataclass

from services.bus.domain.enum import Amenity, BusStatus, BusType
from services.shared.domain import UserId


@dataclass(frozen=True)
class BusUpdate:
    """車両の更新コマンド

    変更可能な項目のみを列挙する。None の項目は変更しない。
    空席数は予約処理のみが変更するため含めない。
    """

    bus_name: str | None = None
    bus_type: BusType | None = None
    total_seats: int | None = None
    amenities: tuple[Amenity, ...] | None = None
    driver_id: UserId | None = None
    status: BusStatus | None = None
