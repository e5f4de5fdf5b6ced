from dataclasses import dataclass

from services.booking.domain.value_object.journey_details import StopPoint
from services.booking.domain.value_object.passenger import Passenger


@dataclass(frozen=True)
class BookingUpdate:
    """予約の更新コマンド

    変更可能な項目のみを列挙する。None の項目は変更しない。
    乗客は座席番号で対応付け、座席の組み合わせは変更できない。
    """

    passengers: tuple[Passenger, ...] | None = None
    pickup_point: StopPoint | None = None
    drop_point: StopPoint | None = None
    special_requests: str | None = None
