from .entity import Route as Route
from .enum import RouteStatus as RouteStatus
from .factory import RouteFactory as RouteFactory
from .repository import RouteRepository as RouteRepository
from .value_object import RouteUpdate as RouteUpdate
