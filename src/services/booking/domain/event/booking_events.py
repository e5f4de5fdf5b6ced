from dataclasses import dataclass
from typing import ClassVar

from services.booking.domain.value_object import BookingId
from services.shared.domain import DomainEvent, TripId


@dataclass(frozen=True)
class BookingCreated(DomainEvent):
    """予約が作成された"""

    name: ClassVar[str] = "booking-created"

    booking_id: BookingId
    trip_id: TripId

    def to_payload(self) -> dict:
        return {
            "bookingId": str(self.booking_id),
            "tripId": str(self.trip_id),
            "timestamp": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class BookingCancelled(DomainEvent):
    """予約がキャンセルされた"""

    name: ClassVar[str] = "booking-cancelled"

    booking_id: BookingId
    trip_id: TripId

    def to_payload(self) -> dict:
        return {
            "bookingId": str(self.booking_id),
            "tripId": str(self.trip_id),
            "timestamp": self.occurred_at.isoformat(),
        }
