from __future__ import annotations

from pydantic import BaseModel

from services.route.domain.entity import Route


class RouteData(BaseModel):
    """路線データのレスポンスモデル"""

    route_id: str
    route_number: str
    name: str
    origin: str
    destination: str
    duration_minutes: int
    base_fare: str
    currency: str
    status: str
    is_active: bool
    version: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: RouteData


def to_response(route: Route) -> dict:
    """Route エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=RouteData(
            route_id=str(route.id),
            route_number=route.route_number,
            name=route.name,
            origin=route.origin,
            destination=route.destination,
            duration_minutes=route.duration_minutes,
            base_fare=str(route.base_fare.amount),
            currency=str(route.base_fare.currency),
            status=route.status.value,
            is_active=route.is_active,
            version=route.version,
        )
    ).model_dump()
