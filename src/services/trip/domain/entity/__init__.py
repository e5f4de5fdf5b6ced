from .seat import Seat as Seat
from .trip import Trip as Trip
