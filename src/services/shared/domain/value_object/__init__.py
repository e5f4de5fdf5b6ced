from .caller import Caller as Caller
from .caller import Role as Role
from .currency import Currency as Currency
from .identifiers import BusId as BusId
from .identifiers import RouteId as RouteId
from .identifiers import TripId as TripId
from .identifiers import UserId as UserId
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .reference_number import generate_reference_number as generate_reference_number
