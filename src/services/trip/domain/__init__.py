from .entity import Seat as Seat
from .entity import Trip as Trip
from .enum import SeatType as SeatType
from .enum import TripStatus as TripStatus
from .factory import TripFactory as TripFactory
from .repository import TripRepository as TripRepository
from .value_object import SeatClaim as SeatClaim
from .value_object import TripSchedule as TripSchedule
