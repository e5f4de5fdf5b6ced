from .route_repository import RouteRepository as RouteRepository
