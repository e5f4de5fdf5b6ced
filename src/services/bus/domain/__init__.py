from .entity import Bus as Bus
from .enum import Amenity as Amenity
from .enum import BusStatus as BusStatus
from .enum import BusType as BusType
from .event import BusLocationChanged as BusLocationChanged
from .factory import BusFactory as BusFactory
from .repository import BusRepository as BusRepository
from .value_object import BusCapacity as BusCapacity
from .value_object import BusLocation as BusLocation
from .value_object import BusUpdate as BusUpdate
