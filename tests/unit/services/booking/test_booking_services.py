from dataclasses import replace

import pytest

from services.booking.applications.complete_booking import CompleteBookingService
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.update_booking import UpdateBookingService
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingUpdate
from services.shared.domain import (
    BusinessRuleViolationException,
    ForbiddenException,
    ValidationException,
)
from services.trip.domain.enum import SeatType


class TestGetBookingService:
    def test_owner_and_admin_can_read(
        self, store, uow, create_booking, user_caller, admin_caller, other_caller
    ):
        booking = create_booking()
        store.seed(booking)
        service = GetBookingService(repository=uow.bookings)

        assert service.get(booking.id, user_caller).id == booking.id
        assert service.get(booking.id, admin_caller).id == booking.id
        with pytest.raises(ForbiddenException):
            service.get(booking.id, other_caller)


class TestUpdateBookingService:
    def test_owner_updates_special_requests(self, store, uow, create_booking, user_caller):
        booking = create_booking()
        store.seed(booking)
        service = UpdateBookingService(repository=uow.bookings, max_attempts=3)

        service.update(booking.id, BookingUpdate(special_requests="wheelchair"), user_caller)

        assert uow.bookings.find_by_id(booking.id).special_requests == "wheelchair"

    def test_other_user_is_forbidden(self, store, uow, create_booking, other_caller):
        booking = create_booking()
        store.seed(booking)
        service = UpdateBookingService(repository=uow.bookings, max_attempts=3)

        with pytest.raises(ForbiddenException):
            service.update(booking.id, BookingUpdate(special_requests="x"), other_caller)

    def test_seat_type_stays_in_step_with_the_seat_map(
        self, uow, seeded, create_service, make_command, user_caller, now
    ):
        _, _, trip = seeded
        command = make_command("A1")
        window_passenger = replace(command.passengers[0], seat_type=SeatType.WINDOW)
        booking = create_service.create(
            replace(command, passengers=[window_passenger]), now
        )
        service = UpdateBookingService(repository=uow.bookings, max_attempts=3)

        with pytest.raises(ValidationException):
            service.update(
                booking.id,
                BookingUpdate(
                    passengers=(replace(window_passenger, seat_type=SeatType.AISLE),)
                ),
                user_caller,
            )
        service.update(
            booking.id,
            BookingUpdate(
                passengers=(
                    replace(window_passenger, first_name="Meera", seat_type=None),
                )
            ),
            user_caller,
        )

        stored = uow.bookings.find_by_id(booking.id).passengers[0]
        seat = uow.trips.find_by_id(trip.id).find_seat("A1")
        assert stored.first_name == "Meera"
        assert stored.seat_type == seat.seat_type == SeatType.WINDOW


class TestCompleteBookingService:
    def test_driver_completes_confirmed_booking(
        self, store, uow, create_booking, driver_caller
    ):
        booking = create_booking(status=BookingStatus.CONFIRMED)
        store.seed(booking)
        service = CompleteBookingService(repository=uow.bookings, max_attempts=3)

        service.complete(booking.id, driver_caller)

        assert uow.bookings.find_by_id(booking.id).status == BookingStatus.COMPLETED

    def test_pending_booking_cannot_be_completed(
        self, store, uow, create_booking, admin_caller
    ):
        booking = create_booking()
        store.seed(booking)
        service = CompleteBookingService(repository=uow.bookings, max_attempts=3)

        with pytest.raises(BusinessRuleViolationException):
            service.complete(booking.id, admin_caller)

    def test_user_is_forbidden(self, store, uow, create_booking, user_caller):
        booking = create_booking(status=BookingStatus.CONFIRMED)
        store.seed(booking)
        service = CompleteBookingService(repository=uow.bookings, max_attempts=3)

        with pytest.raises(ForbiddenException):
            service.complete(booking.id, user_caller)
