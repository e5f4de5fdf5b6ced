from .seat_claim import SeatClaim as SeatClaim
from .trip_schedule import TripSchedule as TripSchedule
