from aws_lambda_powertools import Logger

from services.route.domain.entity import Route
from services.route.domain.repository import RouteRepository
from services.route.domain.value_object import RouteUpdate
from services.shared.applications import retry_on_conflict
from services.shared.domain import ResourceNotFoundException, RouteId

logger = Logger(child=True)


class UpdateRouteService:
    """路線更新ユースケース（管理者）"""

    def __init__(self, repository: RouteRepository, max_attempts: int) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def update(self, route_id: RouteId, update: RouteUpdate) -> Route:
        """路線を更新する"""

        def _attempt() -> Route:
            route = self._repository.find_by_id(route_id)
            if route is None:
                raise ResourceNotFoundException(f"Route not found: {route_id}")
            route.apply_update(update)
            self._repository.update(route)
            return route

        route = retry_on_conflict(_attempt, self._max_attempts, "update route")
        logger.info("Updated route", extra={"route_id": str(route_id)})
        return route
