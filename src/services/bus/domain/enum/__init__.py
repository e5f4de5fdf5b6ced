from .bus_status import BusStatus as BusStatus
from .bus_type import Amenity as Amenity
from .bus_type import BusType as BusType
