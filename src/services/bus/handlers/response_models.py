from __future__ import annotations

from pydantic import BaseModel

from services.bus.domain.entity import Bus


class CapacityData(BaseModel):
    total_seats: int
    available_seats: int


class LocationData(BaseModel):
    latitude: float
    longitude: float
    address: str | None
    last_updated: str | None


class BusData(BaseModel):
    """車両データのレスポンスモデル"""

    bus_id: str
    bus_number: str
    bus_name: str
    bus_type: str
    capacity: CapacityData
    occupancy_percentage: float
    amenities: list[str]
    driver_id: str
    current_location: LocationData | None
    status: str
    is_active: bool
    version: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BusData


def to_response(bus: Bus) -> dict:
    """Bus エンティティをレスポンス辞書に変換する"""
    location = bus.current_location
    return SuccessResponse(
        data=BusData(
            bus_id=str(bus.id),
            bus_number=bus.bus_number,
            bus_name=bus.bus_name,
            bus_type=bus.bus_type.value,
            capacity=CapacityData(
                total_seats=bus.capacity.total_seats,
                available_seats=bus.capacity.available_seats,
            ),
            occupancy_percentage=bus.occupancy_percentage,
            amenities=[amenity.value for amenity in bus.amenities],
            driver_id=str(bus.driver_id),
            current_location=(
                LocationData(
                    latitude=location.latitude,
                    longitude=location.longitude,
                    address=location.address,
                    last_updated=(
                        str(location.last_updated) if location.last_updated else None
                    ),
                )
                if location
                else None
            ),
            status=bus.status.value,
            is_active=bus.is_active,
            version=bus.version,
        )
    ).model_dump()
