from enum import Enum


class TripStatus(str, Enum):
    """運行ステータス"""

    SCHEDULED = "scheduled"
    BOARDING = "boarding"
    DEPARTED = "departed"
    IN_TRANSIT = "in-transit"
    ARRIVED = "arrived"
    CANCELLED = "cancelled"
    DELAYED = "delayed"

    @property
    def is_terminal(self) -> bool:
        return self in (TripStatus.ARRIVED, TripStatus.CANCELLED)

    @property
    def accepts_bookings(self) -> bool:
        """座席の予約を受け付けるステータスか"""
        return self in (TripStatus.SCHEDULED, TripStatus.BOARDING, TripStatus.DELAYED)
