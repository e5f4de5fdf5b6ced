from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingUpdate
from services.shared.applications import retry_on_conflict
from services.shared.domain import Caller, ForbiddenException, ResourceNotFoundException

logger = Logger(child=True)


class UpdateBookingService:
    """予約更新ユースケース（本人または管理者）"""

    def __init__(self, repository: BookingRepository, max_attempts: int) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def update(
        self, booking_id: BookingId, update: BookingUpdate, caller: Caller
    ) -> Booking:
        def _attempt() -> Booking:
            booking = self._repository.find_by_id(booking_id)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            if not caller.can_act_for(booking.user_id):
                raise ForbiddenException("Not authorized to update this booking")
            booking.apply_update(update)
            self._repository.update(booking)
            return booking

        booking = retry_on_conflict(_attempt, self._max_attempts, "update booking")
        logger.info("Updated booking", extra={"booking_id": str(booking_id)})
        return booking
