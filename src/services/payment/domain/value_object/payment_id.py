from __future__ import annotations

from dataclasses import dataclass

from services.booking.domain.value_object import BookingId
from services.shared.domain.value_object.identifiers import Identifier


@dataclass(frozen=True)
class PaymentId(Identifier):
    """決済ID（Value Object）

    不変で、値が同じなら同一とみなされる。
    """

    @classmethod
    def from_booking_id(cls, booking_id: BookingId) -> PaymentId:
        """BookingId から冪等な PaymentId を生成（予約 1 件につき決済 1 件）"""
        return cls(value=f"payment_for_{booking_id}")
