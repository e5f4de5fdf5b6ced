from decimal import Decimal

import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import (
    CreateBookingCommand,
    CreateBookingService,
)
from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service import CancellationPolicy
from services.booking.domain.value_object import StopPoint
from services.payment.applications.confirm_payment import ConfirmPaymentService
from services.payment.applications.create_payment_intent import (
    CreatePaymentIntentService,
)
from services.payment.domain.enum import PaymentMethodType
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.value_object import PaymentMethod
from services.shared.config.settings import Settings
from services.shared.domain import UserId
from services.shared.domain.exception import SeatConflictException


@pytest.fixture
def two_seat_trip(store, create_route, create_bus, create_trip):
    route, bus, trip = create_route(), create_bus(total_seats=2), create_trip(total_seats=2)
    store.seed(route, bus, trip)
    return route, bus, trip


@pytest.fixture
def command_for(two_seat_trip, create_passengers):
    route, bus, trip = two_seat_trip

    def _factory(user_id: str, *seat_numbers: str) -> CreateBookingCommand:
        return CreateBookingCommand(
            user_id=UserId(value=user_id),
            route_id=route.id,
            bus_id=bus.id,
            trip_id=trip.id,
            passengers=create_passengers(*seat_numbers),
            pickup_point=StopPoint(city="Mumbai"),
            drop_point=StopPoint(city="Pune"),
        )

    return _factory


class TestReservationFlow:
    def test_book_conflict_cancel_on_two_seat_trip(
        self, uow, two_seat_trip, command_for, publisher, make_caller, now
    ):
        _, bus, trip = two_seat_trip
        create = CreateBookingService(
            uow=uow, factory=BookingFactory(), publisher=publisher, max_attempts=5
        )
        cancel = CancelBookingService(
            uow=uow,
            policy=CancellationPolicy(Settings().CANCELLATION_FEE_SCHEDULE),
            publisher=publisher,
            max_attempts=5,
        )

        booking = create.create(command_for("user-1", "A1"), now)
        stored_trip = uow.trips.find_by_id(trip.id)
        assert (stored_trip.booked_seats, stored_trip.available_seats) == (1, 1)
        assert uow.buses.find_by_id(bus.id).capacity.available_seats == 1

        with pytest.raises(SeatConflictException) as exc_info:
            create.create(command_for("user-2", "A1"), now)
        assert "A1" in str(exc_info.value)

        cancel.cancel(booking.id, "changed plans", make_caller(UserId(value="user-1")), now)
        stored_trip = uow.trips.find_by_id(trip.id)
        assert (stored_trip.booked_seats, stored_trip.available_seats) == (0, 2)
        assert uow.buses.find_by_id(bus.id).capacity.available_seats == 2
        assert publisher.names == ["booking-created", "booking-cancelled"]

    def test_book_pay_and_confirm(
        self, uow, two_seat_trip, command_for, publisher, user_caller, now
    ):
        create = CreateBookingService(
            uow=uow, factory=BookingFactory(), publisher=publisher, max_attempts=5
        )
        booking = create.create(command_for("user-1", "A1", "A2"), now)

        payment = CreatePaymentIntentService(uow=uow, factory=PaymentFactory()).create(
            booking.id,
            {
                "amount": booking.pricing.total_amount.amount,
                "taxes": Decimal("0"),
                "fees": Decimal("0"),
                "discounts": Decimal("0"),
                "method": PaymentMethod(type=PaymentMethodType.UPI),
            },
            user_caller,
            now,
        )
        ConfirmPaymentService(uow=uow, max_attempts=5).confirm(
            payment.id, "txn-42", user_caller, now
        )

        stored = uow.bookings.find_by_id(booking.id)
        assert stored.status == BookingStatus.CONFIRMED
        assert stored.payment_status == "completed"
