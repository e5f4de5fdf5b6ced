from decimal import Decimal
from typing import TypedDict

from services.route.domain.entity import Route
from services.route.domain.enum import RouteStatus
from services.shared.domain import Currency, Money, RouteId, ValidationException


class RouteDetails(TypedDict):
    """路線の入力データ構造（TypedDict）"""

    route_number: str
    name: str
    origin: str
    destination: str
    duration_minutes: int
    base_fare: Decimal
    currency_code: str


class RouteFactory:
    """路線ファクトリ"""

    def create(self, route_details: RouteDetails) -> Route:
        """新規路線エンティティを生成する"""
        if route_details["origin"] == route_details["destination"]:
            raise ValidationException("Origin and destination must differ")

        try:
            base_fare = Money(
                amount=route_details["base_fare"],
                currency=Currency(route_details["currency_code"]),
            )
        except ValueError as e:
            raise ValidationException(str(e)) from e

        return Route(
            id=RouteId.generate(),
            route_number=route_details["route_number"],
            name=route_details["name"],
            origin=route_details["origin"],
            destination=route_details["destination"],
            duration_minutes=route_details["duration_minutes"],
            base_fare=base_fare,
            status=RouteStatus.ACTIVE,
        )
