from .booking_status import BookingStatus as BookingStatus
from .cancelled_by import CancelledBy as CancelledBy
