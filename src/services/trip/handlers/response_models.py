from __future__ import annotations

from pydantic import BaseModel

from services.trip.domain.entity import Trip


class SeatData(BaseModel):
    seat_number: str
    seat_type: str
    is_booked: bool
    passenger_id: str | None


class OccupancyData(BaseModel):
    total_seats: int
    booked_seats: int
    available_seats: int
    occupancy_percentage: int
    is_full: bool
    seat_map: list[SeatData]


class ScheduleData(BaseModel):
    departure: str
    arrival: str
    estimated_arrival: str
    actual_departure: str | None
    actual_arrival: str | None
    delay_minutes: int


class TripData(BaseModel):
    """運行データのレスポンスモデル"""

    trip_id: str
    trip_number: str
    route_id: str
    bus_id: str
    driver_id: str
    schedule: ScheduleData
    occupancy: OccupancyData
    status: str
    version: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: TripData


def to_response(trip: Trip) -> dict:
    """Trip エンティティをレスポンス辞書に変換する"""
    schedule = trip.schedule
    return SuccessResponse(
        data=TripData(
            trip_id=str(trip.id),
            trip_number=trip.trip_number,
            route_id=str(trip.route_id),
            bus_id=str(trip.bus_id),
            driver_id=str(trip.driver_id),
            schedule=ScheduleData(
                departure=str(schedule.departure),
                arrival=str(schedule.arrival),
                estimated_arrival=str(schedule.estimated_arrival),
                actual_departure=(
                    str(schedule.actual_departure)
                    if schedule.actual_departure
                    else None
                ),
                actual_arrival=(
                    str(schedule.actual_arrival) if schedule.actual_arrival else None
                ),
                delay_minutes=schedule.delay_minutes,
            ),
            occupancy=OccupancyData(
                total_seats=trip.total_seats,
                booked_seats=trip.booked_seats,
                available_seats=trip.available_seats,
                occupancy_percentage=trip.occupancy_percentage,
                is_full=trip.is_full,
                seat_map=[
                    SeatData(
                        seat_number=seat.seat_number,
                        seat_type=seat.seat_type.value,
                        is_booked=seat.is_booked,
                        passenger_id=(
                            str(seat.passenger_id) if seat.passenger_id else None
                        ),
                    )
                    for seat in trip.seat_map
                ],
            ),
            status=trip.status.value,
            version=trip.version,
        )
    ).model_dump()
