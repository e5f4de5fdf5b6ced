from .route_update import RouteUpdate as RouteUpdate
