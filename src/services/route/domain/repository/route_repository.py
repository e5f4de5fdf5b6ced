from services.route.domain.entity import Route
from services.shared.domain import Repository, RouteId


class RouteRepository(Repository[Route, RouteId]):
    """路線リポジトリのインターフェース"""
