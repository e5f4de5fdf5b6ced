from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.applications import retry_on_conflict
from services.shared.domain import (
    Caller,
    ForbiddenException,
    ResourceNotFoundException,
    Role,
)

logger = Logger(child=True)


class CompleteBookingService:
    """乗車完了ユースケース（管理者またはドライバー）"""

    def __init__(self, repository: BookingRepository, max_attempts: int) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def complete(self, booking_id: BookingId, caller: Caller) -> Booking:
        def _attempt() -> Booking:
            booking = self._repository.find_by_id(booking_id)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            if not caller.has_role(Role.ADMIN, Role.DRIVER):
                raise ForbiddenException("Not authorized to complete this booking")
            booking.complete()
            self._repository.update(booking)
            return booking

        booking = retry_on_conflict(_attempt, self._max_attempts, "complete booking")
        logger.info("Completed booking", extra={"booking_id": str(booking_id)})
        return booking
