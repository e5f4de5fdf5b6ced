from .route_factory import RouteDetails as RouteDetails
from .route_factory import RouteFactory as RouteFactory
