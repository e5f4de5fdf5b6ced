from .bus_repository import BusRepository as BusRepository
