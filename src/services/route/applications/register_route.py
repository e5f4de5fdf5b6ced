from aws_lambda_powertools import Logger

from services.route.domain.entity import Route
from services.route.domain.factory import RouteDetails, RouteFactory
from services.route.domain.repository import RouteRepository

logger = Logger(child=True)


class RegisterRouteService:
    """路線登録ユースケース（管理者）"""

    def __init__(self, repository: RouteRepository, factory: RouteFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, route_details: RouteDetails) -> Route:
        """路線を登録する"""
        route = self._factory.create(route_details)
        self._repository.save(route)
        logger.info("Registered route", extra={"route_id": str(route.id)})
        return route
