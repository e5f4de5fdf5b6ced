from datetime import timedelta

import pytest

from services.shared.domain import (
    BusinessRuleViolationException,
    UserId,
    ValidationException,
)
from services.shared.domain.exception import (
    SeatAlreadyBookedException,
    SeatConflictException,
    SeatNotBookedException,
    SeatNotFoundException,
)
from services.trip.domain.entity import Seat, Trip
from services.trip.domain.enum import SeatType, TripStatus
from services.trip.domain.value_object import SeatClaim, TripSchedule

PASSENGER = UserId(value="user-1")


def _claims(*seat_numbers: str) -> list[SeatClaim]:
    return [SeatClaim(seat_number=n, passenger_id=PASSENGER) for n in seat_numbers]


class TestTripSeatInventory:
    def test_counts_are_derived_from_seat_map(self, create_trip):
        trip = create_trip(total_seats=8)

        trip.book_seats(_claims("A1", "B2"))

        assert trip.total_seats == 8
        assert trip.booked_seats == 2
        assert trip.available_seats == 6
        assert trip.occupancy_percentage == 25
        assert not trip.is_full

    def test_book_seats_records_passenger_and_seat_type(self, create_trip):
        trip = create_trip()

        trip.book_seats(
            [SeatClaim(seat_number="A2", passenger_id=PASSENGER, seat_type=SeatType.FRONT)]
        )

        seat = trip.find_seat("A2")
        assert seat.is_booked
        assert seat.passenger_id == PASSENGER
        assert seat.seat_type == SeatType.FRONT

    def test_conflict_lists_every_taken_seat_and_changes_nothing(self, create_trip):
        trip = create_trip()
        trip.book_seats(_claims("A1", "A3"))

        with pytest.raises(SeatConflictException) as exc_info:
            trip.book_seats(_claims("A1", "A2", "A3"))

        assert exc_info.value.seat_numbers == ("A1", "A3")
        assert not trip.find_seat("A2").is_booked
        assert trip.booked_seats == 2

    def test_unknown_seat_changes_nothing(self, create_trip):
        trip = create_trip(total_seats=4)

        with pytest.raises(SeatNotFoundException):
            trip.book_seats(_claims("A1", "Z9"))

        assert trip.booked_seats == 0

    def test_duplicate_seats_in_one_request(self, create_trip):
        with pytest.raises(ValidationException):
            create_trip().book_seats(_claims("A1", "A1"))

    @pytest.mark.parametrize(
        "status", [TripStatus.DEPARTED, TripStatus.ARRIVED, TripStatus.CANCELLED]
    )
    def test_closed_trip_rejects_bookings(self, create_trip, status):
        trip = create_trip(status=status)

        with pytest.raises(BusinessRuleViolationException):
            trip.book_seats(_claims("A1"))

    def test_inactive_trip_rejects_bookings(self, create_trip):
        trip = create_trip()
        trip.deactivate()

        with pytest.raises(BusinessRuleViolationException):
            trip.book_seats(_claims("A1"))

    def test_single_seat_operations(self, create_trip):
        trip = create_trip()
        trip.book_seat("A1", PASSENGER)

        with pytest.raises(SeatAlreadyBookedException):
            trip.book_seat("A1", PASSENGER)

        trip.release_seat("A1")
        assert not trip.find_seat("A1").is_booked
        assert trip.find_seat("A1").passenger_id is None
        with pytest.raises(SeatNotBookedException):
            trip.release_seat("A1")

    def test_release_seats_is_all_or_nothing(self, create_trip):
        trip = create_trip()
        trip.book_seats(_claims("A1"))

        with pytest.raises(SeatNotBookedException):
            trip.release_seats(["A1", "A2"])

        assert trip.find_seat("A1").is_booked

    def test_release_is_allowed_after_departure(self, create_trip, now):
        trip = create_trip()
        trip.book_seats(_claims("A1"))
        trip.update_status(TripStatus.BOARDING, now)
        trip.update_status(TripStatus.DEPARTED, now)

        trip.release_seats(["A1"])

        assert trip.booked_seats == 0

    def test_seat_numbers_must_be_unique(self, now):
        schedule = TripSchedule(departure=now, arrival=now.plus_minutes(60))
        with pytest.raises(ValidationException):
            Trip(
                id=None,
                trip_number="TR1",
                route_id=None,
                bus_id=None,
                driver_id=None,
                schedule=schedule,
                seat_map=[Seat(seat_number="A1"), Seat(seat_number="A1")],
            )


class TestTripStatus:
    def test_departure_and_arrival_record_actual_times(self, create_trip, now):
        trip = create_trip()
        later = now.plus_minutes(30)

        trip.update_status(TripStatus.BOARDING, now)
        trip.update_status(TripStatus.DEPARTED, now)
        trip.update_status(TripStatus.IN_TRANSIT, now)
        trip.update_status(TripStatus.ARRIVED, later)

        assert trip.schedule.actual_departure == now
        assert trip.schedule.actual_arrival == later
        assert trip.schedule.estimated_arrival == later
        assert trip.status.is_terminal

    def test_delay_shifts_estimated_arrival(self, create_trip, now):
        trip = create_trip()

        trip.update_status(TripStatus.DELAYED, now, delay_minutes=45)

        assert trip.schedule.delay_minutes == 45
        assert trip.schedule.estimated_arrival.value == (
            trip.schedule.arrival.value + timedelta(minutes=45)
        )
        assert trip.is_bookable

    def test_delay_requires_positive_minutes(self, create_trip, now):
        with pytest.raises(ValidationException):
            create_trip().update_status(TripStatus.DELAYED, now)

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (TripStatus.SCHEDULED, TripStatus.ARRIVED),
            (TripStatus.CANCELLED, TripStatus.SCHEDULED),
            (TripStatus.ARRIVED, TripStatus.DEPARTED),
            (TripStatus.DEPARTED, TripStatus.BOARDING),
        ],
    )
    def test_invalid_transitions(self, create_trip, now, current, target):
        trip = create_trip(status=current)

        with pytest.raises(BusinessRuleViolationException):
            trip.update_status(target, now)
