from services.shared.domain import BusId, IsoDateTime, RouteId, TripId, UserId
from services.shared.infrastructure import DynamoDBRepository
from services.shared.infrastructure.dynamodb_repository import METADATA, as_int
from services.trip.domain.entity import Seat, Trip
from services.trip.domain.enum import SeatType, TripStatus
from services.trip.domain.repository import TripRepository
from services.trip.domain.value_object import TripSchedule


def _optional_time(value: str | None) -> IsoDateTime | None:
    return IsoDateTime.from_string(value) if value else None


class DynamoDBTripRepository(DynamoDBRepository[Trip, TripId], TripRepository):
    """DynamoDBを使用したTripRepository の具象実装

    座席表は 1 アイテム内のリストとして保持し、座席の予約は
    運行アイテムの version 条件付き書き込みで直列化する。
    """

    entity_type = "TRIP"

    def _key(self, id: TripId) -> dict:
        return {"PK": f"TRIP#{id}", "SK": METADATA}

    def _to_item(self, trip: Trip) -> dict:
        schedule = trip.schedule
        return {
            "trip_id": str(trip.id),
            "trip_number": trip.trip_number,
            "route_id": str(trip.route_id),
            "bus_id": str(trip.bus_id),
            "driver_id": str(trip.driver_id),
            "departure": str(schedule.departure),
            "arrival": str(schedule.arrival),
            "actual_departure": (
                str(schedule.actual_departure) if schedule.actual_departure else None
            ),
            "actual_arrival": (
                str(schedule.actual_arrival) if schedule.actual_arrival else None
            ),
            "delay_minutes": schedule.delay_minutes,
            "status": trip.status.value,
            "is_active": trip.is_active,
            # 座席表から導出した値のスナップショット（参照用）
            "total_seats": trip.total_seats,
            "booked_seats": trip.booked_seats,
            "available_seats": trip.available_seats,
            "seat_map": [
                {
                    "seat_number": seat.seat_number,
                    "seat_type": seat.seat_type.value,
                    "is_booked": seat.is_booked,
                    "passenger_id": (
                        str(seat.passenger_id) if seat.passenger_id else None
                    ),
                }
                for seat in trip.seat_map
            ],
        }

    def _to_entity(self, item: dict) -> Trip:
        return Trip(
            id=TripId(value=item["trip_id"]),
            trip_number=item["trip_number"],
            route_id=RouteId(value=item["route_id"]),
            bus_id=BusId(value=item["bus_id"]),
            driver_id=UserId(value=item["driver_id"]),
            schedule=TripSchedule(
                departure=IsoDateTime.from_string(item["departure"]),
                arrival=IsoDateTime.from_string(item["arrival"]),
                actual_departure=_optional_time(item.get("actual_departure")),
                actual_arrival=_optional_time(item.get("actual_arrival")),
                delay_minutes=as_int(item.get("delay_minutes", 0)),
            ),
            seat_map=[
                Seat(
                    seat_number=seat["seat_number"],
                    seat_type=SeatType(seat["seat_type"]),
                    is_booked=seat["is_booked"],
                    passenger_id=(
                        UserId(value=seat["passenger_id"])
                        if seat.get("passenger_id")
                        else None
                    ),
                )
                for seat in item["seat_map"]
            ],
            status=TripStatus(item["status"]),
            is_active=item.get("is_active", True),
            version=as_int(item["version"]),
        )
