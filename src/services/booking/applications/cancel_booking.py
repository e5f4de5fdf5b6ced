from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.enum import CancelledBy
from services.booking.domain.service import CancellationPolicy
from services.booking.domain.value_object import BookingId
from services.shared.applications import EventPublisher, UnitOfWork, retry_on_conflict
from services.shared.domain import (
    Caller,
    ForbiddenException,
    IsoDateTime,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース（本人または管理者）

    予約のキャンセル・座席の解放・車両の空席数の加算を 1 トランザクションで確定する。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        policy: CancellationPolicy,
        publisher: EventPublisher,
        max_attempts: int,
    ) -> None:
        self._uow = uow
        self._policy = policy
        self._publisher = publisher
        self._max_attempts = max_attempts

    def cancel(
        self,
        booking_id: BookingId,
        reason: str,
        caller: Caller,
        now: IsoDateTime,
    ) -> Booking:
        """予約をキャンセルする（キャンセル料と返金額は booking.cancellation）"""

        def _attempt() -> Booking:
            with self._uow:
                booking = self._uow.bookings.find_by_id(booking_id)
                if booking is None:
                    raise ResourceNotFoundException(f"Booking not found: {booking_id}")
                if not caller.can_act_for(booking.user_id):
                    raise ForbiddenException("Not authorized to cancel this booking")

                quote = self._policy.quote(
                    booking.pricing.total_amount,
                    booking.journey_details.departure,
                    now,
                )
                cancelled_by = CancelledBy.ADMIN if caller.is_admin else CancelledBy.USER
                booking.cancel(reason, cancelled_by, quote, now)
                self._uow.update(booking)

                trip = self._uow.trips.find_by_id(booking.trip_id)
                if trip is not None:
                    trip.release_seats(booking.seat_numbers)
                    self._uow.update(trip)
                else:
                    logger.warning(
                        "Trip not found while cancelling booking, seats not released",
                        extra={"booking_id": str(booking_id)},
                    )

                bus = self._uow.buses.find_by_id(booking.bus_id)
                if bus is not None:
                    bus.update_available_seats(booking.passenger_count)
                    self._uow.update(bus)

                self._uow.commit()
                return booking

        booking = retry_on_conflict(_attempt, self._max_attempts, "cancel booking")
        logger.info(
            "Cancelled booking",
            extra={
                "booking_id": str(booking_id),
                "cancellation_fee": str(booking.cancellation.cancellation_fee),
                "refund_amount": str(booking.cancellation.refund_amount),
            },
        )
        self._publisher.publish(booking.flush_domain_events())
        return booking
