from .route_status import RouteStatus as RouteStatus
