from .booking_id import BookingId as BookingId
from .booking_update import BookingUpdate as BookingUpdate
from .cancellation import Cancellation as Cancellation
from .cancellation import CancellationQuote as CancellationQuote
from .journey_details import JourneyDetails as JourneyDetails
from .journey_details import StopPoint as StopPoint
from .passenger import Passenger as Passenger
from .pricing import Pricing as Pricing
