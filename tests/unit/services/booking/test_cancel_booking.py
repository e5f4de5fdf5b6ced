from decimal import Decimal

import pytest

from services.booking.domain.enum import BookingStatus, CancelledBy
from services.booking.domain.value_object import BookingId
from services.shared.domain import (
    BusinessRuleViolationException,
    ForbiddenException,
    Money,
    ResourceNotFoundException,
)


@pytest.fixture
def booked(create_service, make_command, publisher, now):
    """A1, A2 を予約済みにする"""
    booking = create_service.create(make_command("A1", "A2"), now)
    publisher.emitted.clear()
    return booking


class TestCancelBookingService:
    def test_cancel_releases_seats_and_restores_bus_counter(
        self, uow, seeded, booked, cancel_service, user_caller, publisher, now
    ):
        _, bus, trip = seeded

        booking = cancel_service.cancel(booked.id, "plans changed", user_caller, now)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation.cancelled_by == CancelledBy.USER
        stored_trip = uow.trips.find_by_id(trip.id)
        assert not stored_trip.find_seat("A1").is_booked
        assert not stored_trip.find_seat("A2").is_booked
        assert uow.buses.find_by_id(bus.id).capacity.available_seats == 40
        assert uow.bookings.find_by_id(booked.id).status == BookingStatus.CANCELLED
        assert publisher.names == ["booking-cancelled"]

    def test_fee_follows_time_to_departure(
        self, booked, cancel_service, user_caller, now
    ):
        # 出発 40 日前は無料、出発 100 時間前は 60%
        departure = booked.journey_details.departure
        booking = cancel_service.cancel(
            booked.id, "plans changed", user_caller, departure.plus_minutes(-100 * 60)
        )

        assert booking.cancellation.cancellation_fee == Money.inr(Decimal("600.00"))
        assert booking.cancellation.refund_amount == Money.inr(Decimal("400.00"))

    def test_free_cancellation_well_before_departure(
        self, booked, cancel_service, user_caller, now
    ):
        booking = cancel_service.cancel(booked.id, "plans changed", user_caller, now)

        assert booking.cancellation.cancellation_fee.is_zero()
        assert booking.cancellation.refund_amount == booked.pricing.total_amount

    def test_admin_can_cancel_for_user(self, booked, cancel_service, admin_caller, now):
        booking = cancel_service.cancel(booked.id, "bus breakdown", admin_caller, now)

        assert booking.cancellation.cancelled_by == CancelledBy.ADMIN

    def test_other_user_is_forbidden(
        self, uow, booked, cancel_service, other_caller, now
    ):
        with pytest.raises(ForbiddenException):
            cancel_service.cancel(booked.id, "not mine", other_caller, now)

        assert uow.bookings.find_by_id(booked.id).status == BookingStatus.PENDING

    def test_cancel_twice_is_invalid_state(
        self, uow, seeded, booked, cancel_service, user_caller, now
    ):
        _, bus, _ = seeded
        cancel_service.cancel(booked.id, "plans changed", user_caller, now)

        with pytest.raises(BusinessRuleViolationException):
            cancel_service.cancel(booked.id, "again", user_caller, now)

        assert uow.buses.find_by_id(bus.id).capacity.available_seats == 40

    def test_missing_booking(self, seeded, cancel_service, user_caller, now):
        with pytest.raises(ResourceNotFoundException):
            cancel_service.cancel(BookingId(value="nope"), "x", user_caller, now)

    def test_missing_trip_still_cancels(
        self, uow, seeded, booked, cancel_service, user_caller, now
    ):
        _, bus, trip = seeded
        stored = uow.trips.find_by_id(trip.id)
        stored.deactivate()
        uow.trips.update(stored)

        booking = cancel_service.cancel(booked.id, "plans changed", user_caller, now)

        assert booking.status == BookingStatus.CANCELLED
        assert uow.buses.find_by_id(bus.id).capacity.available_seats == 40
