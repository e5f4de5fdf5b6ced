from decimal import Decimal

from services.route.domain.entity import Route
from services.route.domain.enum import RouteStatus
from services.route.domain.repository import RouteRepository
from services.shared.domain import Currency, Money, RouteId
from services.shared.infrastructure import DynamoDBRepository
from services.shared.infrastructure.dynamodb_repository import METADATA, as_int


class DynamoDBRouteRepository(DynamoDBRepository[Route, RouteId], RouteRepository):
    """DynamoDBを使用したRouteRepository の具象実装"""

    entity_type = "ROUTE"

    def _key(self, id: RouteId) -> dict:
        return {"PK": f"ROUTE#{id}", "SK": METADATA}

    def _to_item(self, route: Route) -> dict:
        return {
            "route_id": str(route.id),
            "route_number": route.route_number,
            "name": route.name,
            "origin": route.origin,
            "destination": route.destination,
            "duration_minutes": route.duration_minutes,
            "base_fare": str(route.base_fare.amount),
            "currency": str(route.base_fare.currency),
            "status": route.status.value,
            "is_active": route.is_active,
        }

    def _to_entity(self, item: dict) -> Route:
        return Route(
            id=RouteId(value=item["route_id"]),
            route_number=item["route_number"],
            name=item["name"],
            origin=item["origin"],
            destination=item["destination"],
            duration_minutes=as_int(item["duration_minutes"]),
            base_fare=Money(
                amount=Decimal(item["base_fare"]),
                currency=Currency(item["currency"]),
            ),
            status=RouteStatus(item["status"]),
            is_active=item.get("is_active", True),
            version=as_int(item["version"]),
        )
