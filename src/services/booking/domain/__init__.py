from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .enum import CancelledBy as CancelledBy
from .event import BookingCancelled as BookingCancelled
from .event import BookingCreated as BookingCreated
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import CancellationPolicy as CancellationPolicy
from .value_object import BookingId as BookingId
from .value_object import BookingUpdate as BookingUpdate
from .value_object import Cancellation as Cancellation
from .value_object import CancellationQuote as CancellationQuote
from .value_object import JourneyDetails as JourneyDetails
from .value_object import Passenger as Passenger
from .value_object import Pricing as Pricing
from .value_object import StopPoint as StopPoint
