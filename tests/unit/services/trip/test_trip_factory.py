import pytest

from services.shared.domain import ValidationException
from services.trip.domain.enum import SeatType, TripStatus
from services.trip.domain.factory import TripFactory


class TestTripFactory:
    def test_seed_seat_map(self):
        seats = TripFactory(seats_per_row=4).seed_seat_map(30)

        numbers = [seat.seat_number for seat in seats]
        assert numbers[:5] == ["A1", "A2", "A3", "A4", "B1"]
        assert numbers[-1] == "H2"
        assert [seat.seat_type for seat in seats[:4]] == [
            SeatType.WINDOW,
            SeatType.AISLE,
            SeatType.AISLE,
            SeatType.WINDOW,
        ]
        assert not any(seat.is_booked for seat in seats)

    def test_rows_beyond_z(self):
        seats = TripFactory(seats_per_row=1).seed_seat_map(28)

        assert seats[25].seat_number == "Z1"
        assert seats[26].seat_number == "AA1"

    def test_create_trip_from_route_and_bus(self, create_route, create_bus, now):
        route = create_route(duration_minutes=240)
        bus = create_bus(total_seats=12)

        trip = TripFactory(seats_per_row=4).create(route, bus, {"departure": now})

        assert trip.total_seats == 12
        assert trip.available_seats == 12
        assert trip.status == TripStatus.SCHEDULED
        assert trip.driver_id == bus.driver_id
        assert trip.schedule.arrival == now.plus_minutes(240)
        assert trip.trip_number.startswith("TR")

    def test_explicit_layout_must_match_bus(self, create_route, create_bus, now):
        layout = [{"seat_number": "1", "seat_type": SeatType.WINDOW}]

        with pytest.raises(ValidationException):
            TripFactory(seats_per_row=4).create(
                create_route(), create_bus(total_seats=2), {"departure": now, "seat_layout": layout}
            )

    def test_explicit_layout(self, create_route, create_bus, now):
        layout = [
            {"seat_number": "1", "seat_type": SeatType.FRONT},
            {"seat_number": "2", "seat_type": SeatType.BACK},
        ]

        trip = TripFactory(seats_per_row=4).create(
            create_route(), create_bus(total_seats=2), {"departure": now, "seat_layout": layout}
        )

        assert [seat.seat_number for seat in trip.seat_map] == ["1", "2"]
