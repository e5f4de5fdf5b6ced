from typing import TypedDict

from services.bus.domain.entity import Bus
from services.bus.domain.enum import Amenity, BusStatus, BusType
from services.bus.domain.value_object import BusCapacity
from services.shared.domain import BusId, UserId, ValidationException


class BusDetails(TypedDict):
    """車両の入力データ構造（TypedDict）"""

    bus_number: str
    bus_name: str
    bus_type: BusType
    total_seats: int
    amenities: list[Amenity]
    driver_id: str


class BusFactory:
    """車両ファクトリ"""

    def create(self, bus_details: BusDetails) -> Bus:
        """新規車両エンティティを生成する（全席空き）"""
        try:
            capacity = BusCapacity.full(bus_details["total_seats"])
        except ValueError as e:
            raise ValidationException(str(e)) from e

        return Bus(
            id=BusId.generate(),
            bus_number=bus_details["bus_number"],
            bus_name=bus_details["bus_name"],
            capacity=capacity,
            driver_id=UserId(value=bus_details["driver_id"]),
            bus_type=bus_details["bus_type"],
            amenities=tuple(dict.fromkeys(bus_details["amenities"])),
            status=BusStatus.ACTIVE,
        )
