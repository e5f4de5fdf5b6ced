from .seat_type import SeatType as SeatType
from .trip_status import TripStatus as TripStatus
