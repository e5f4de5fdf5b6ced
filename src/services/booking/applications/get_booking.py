from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import Caller, ForbiddenException, ResourceNotFoundException


class GetBookingService:
    """予約取得ユースケース（本人または管理者）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get(self, booking_id: BookingId, caller: Caller) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        if not caller.can_act_for(booking.user_id):
            raise ForbiddenException("Not authorized to view this booking")
        return booking
