from .bus_capacity import BusCapacity as BusCapacity
from .bus_location import BusLocation as BusLocation
from .bus_update import BusUpdate as BusUpdate
