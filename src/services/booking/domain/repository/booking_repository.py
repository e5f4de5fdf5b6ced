from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""
