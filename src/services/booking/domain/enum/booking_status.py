from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    pending -> confirmed -> completed
    pending | confirmed -> cancelled
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.CANCELLED, BookingStatus.COMPLETED)

    @property
    def is_modifiable(self) -> bool:
        """乗客情報などを変更できるステータスか"""
        return self in (BookingStatus.PENDING, BookingStatus.CONFIRMED)
