from string import ascii_uppercase
from typing import NotRequired, TypedDict

from services.bus.domain.entity import Bus
from services.route.domain.entity import Route
from services.shared.domain import (
    IsoDateTime,
    TripId,
    ValidationException,
    generate_reference_number,
)
from services.trip.domain.entity import Seat, Trip
from services.trip.domain.enum import SeatType, TripStatus
from services.trip.domain.value_object import TripSchedule


class SeatLayoutEntry(TypedDict):
    """座席表を明示的に指定する場合の 1 席分"""

    seat_number: str
    seat_type: SeatType


class TripDetails(TypedDict):
    """運行の入力データ構造（TypedDict）"""

    departure: IsoDateTime
    seat_layout: NotRequired[list[SeatLayoutEntry] | None]


def _row_label(index: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA"""
    label = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, len(ascii_uppercase))
        label = ascii_uppercase[remainder] + label
    return label


class TripFactory:
    """運行ファクトリ

    座席表は車両の総座席数から生成する（1 列 seats_per_row 席、A1, A2, ... B1, ...）。
    列の両端の席は窓側、それ以外は通路側。
    """

    def __init__(self, seats_per_row: int) -> None:
        self._seats_per_row = seats_per_row

    def create(self, route: Route, bus: Bus, trip_details: TripDetails) -> Trip:
        """新規運行エンティティを生成する"""
        departure = trip_details["departure"]
        layout = trip_details.get("seat_layout")
        total_seats = bus.capacity.total_seats

        if layout:
            if len(layout) != total_seats:
                raise ValidationException(
                    f"Seat layout has {len(layout)} seats "
                    f"but bus {bus.id} has {total_seats}"
                )
            seat_map = [
                Seat(seat_number=entry["seat_number"], seat_type=entry["seat_type"])
                for entry in layout
            ]
        else:
            seat_map = self.seed_seat_map(total_seats)

        return Trip(
            id=TripId.generate(),
            trip_number=generate_reference_number("TR"),
            route_id=route.id,
            bus_id=bus.id,
            driver_id=bus.driver_id,
            schedule=TripSchedule(
                departure=departure,
                arrival=departure.plus_minutes(route.duration_minutes),
            ),
            seat_map=seat_map,
            status=TripStatus.SCHEDULED,
        )

    def seed_seat_map(self, total_seats: int) -> list[Seat]:
        """総座席数から空の座席表を生成する"""
        seat_map = []
        for index in range(total_seats):
            row, position = divmod(index, self._seats_per_row)
            at_row_end = position in (0, self._seats_per_row - 1)
            seat_map.append(
                Seat(
                    seat_number=f"{_row_label(row)}{position + 1}",
                    seat_type=SeatType.WINDOW if at_row_end else SeatType.AISLE,
                )
            )
        return seat_map
