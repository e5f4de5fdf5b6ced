from decimal import Decimal

from services.bus.domain.entity import Bus
from services.bus.domain.enum import Amenity, BusStatus, BusType
from services.bus.domain.repository import BusRepository
from services.bus.domain.value_object import BusCapacity, BusLocation
from services.shared.domain import BusId, IsoDateTime, UserId
from services.shared.infrastructure import DynamoDBRepository
from services.shared.infrastructure.dynamodb_repository import METADATA, as_int


class DynamoDBBusRepository(DynamoDBRepository[Bus, BusId], BusRepository):
    """DynamoDBを使用したBusRepository の具象実装"""

    entity_type = "BUS"

    def _key(self, id: BusId) -> dict:
        return {"PK": f"BUS#{id}", "SK": METADATA}

    def _to_item(self, bus: Bus) -> dict:
        item = {
            "bus_id": str(bus.id),
            "bus_number": bus.bus_number,
            "bus_name": bus.bus_name,
            "bus_type": bus.bus_type.value,
            "total_seats": bus.capacity.total_seats,
            "available_seats": bus.capacity.available_seats,
            "amenities": [amenity.value for amenity in bus.amenities],
            "driver_id": str(bus.driver_id),
            "status": bus.status.value,
            "is_active": bus.is_active,
        }
        location = bus.current_location
        if location is not None:
            # float は DynamoDB に書き込めないため文字列経由で Decimal にする
            item["current_location"] = {
                "latitude": Decimal(str(location.latitude)),
                "longitude": Decimal(str(location.longitude)),
                "address": location.address,
                "last_updated": (
                    str(location.last_updated) if location.last_updated else None
                ),
            }
        return item

    def _to_entity(self, item: dict) -> Bus:
        location = None
        if item.get("current_location"):
            loc = item["current_location"]
            location = BusLocation(
                latitude=float(loc["latitude"]),
                longitude=float(loc["longitude"]),
                address=loc.get("address"),
                last_updated=(
                    IsoDateTime.from_string(loc["last_updated"])
                    if loc.get("last_updated")
                    else None
                ),
            )
        return Bus(
            id=BusId(value=item["bus_id"]),
            bus_number=item["bus_number"],
            bus_name=item["bus_name"],
            capacity=BusCapacity(
                total_seats=as_int(item["total_seats"]),
                available_seats=as_int(item["available_seats"]),
            ),
            driver_id=UserId(value=item["driver_id"]),
            bus_type=BusType(item["bus_type"]),
            amenities=tuple(Amenity(a) for a in item.get("amenities", [])),
            current_location=location,
            status=BusStatus(item["status"]),
            is_active=item.get("is_active", True),
            version=as_int(item["version"]),
        )
