from decimal import Decimal

import pytest

from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import StopPoint
from services.shared.domain import BusId, Money, ValidationException

PICKUP = StopPoint(city="Mumbai")
DROP = StopPoint(city="Pune")


class TestBookingFactory:
    def test_create_pending_booking(
        self, create_route, create_bus, create_trip, create_passengers, user_caller, now
    ):
        route = create_route(base_fare=Decimal("499.99"), duration_minutes=150)
        trip = create_trip()

        booking = BookingFactory().create(
            user_id=user_caller.user_id,
            route=route,
            bus=create_bus(),
            trip=trip,
            passengers=create_passengers("A1", "A2", "A3"),
            pickup_point=PICKUP,
            drop_point=DROP,
            now=now,
        )

        assert booking.status == BookingStatus.PENDING
        assert booking.payment_status == "pending"
        assert booking.pricing.total_amount == Money.inr(Decimal("1499.97"))
        assert booking.journey_details.departure == trip.schedule.departure
        assert booking.journey_details.arrival == trip.schedule.departure.plus_minutes(150)
        assert booking.booking_number.startswith("BK")
        assert [e.name for e in booking.flush_domain_events()] == ["booking-created"]

    def test_trip_must_match_route_and_bus(
        self, create_route, create_bus, create_trip, create_passengers, user_caller, now
    ):
        trip = create_trip(bus_id=BusId(value="bus-other"))

        with pytest.raises(ValidationException):
            BookingFactory().create(
                user_id=user_caller.user_id,
                route=create_route(),
                bus=create_bus(),
                trip=trip,
                passengers=create_passengers("A1"),
                pickup_point=PICKUP,
                drop_point=DROP,
                now=now,
            )
