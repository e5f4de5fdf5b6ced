from .bus_location_changed import BusLocationChanged as BusLocationChanged
