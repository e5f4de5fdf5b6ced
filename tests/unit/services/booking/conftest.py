import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import (
    CreateBookingCommand,
    CreateBookingService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service import CancellationPolicy
from services.booking.domain.value_object import StopPoint
from services.shared.config.settings import Settings
from services.shared.domain import UserId


@pytest.fixture
def seeded(store, create_route, create_bus, create_trip):
    """路線・車両・運行（40 席）を登録済みにする"""
    route, bus, trip = create_route(), create_bus(), create_trip()
    store.seed(route, bus, trip)
    return route, bus, trip


@pytest.fixture
def make_command(seeded, create_passengers):
    """予約作成コマンドを生成する Factory fixture"""
    route, bus, trip = seeded

    def _factory(*seat_numbers: str, user_id: str = "user-1") -> CreateBookingCommand:
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


@pytest.fixture
def make_create_service(make_uow, publisher):
    def _factory(max_attempts: int = 5, before_commit=None) -> CreateBookingService:
        return CreateBookingService(
            uow=make_uow(before_commit=before_commit),
            factory=BookingFactory(),
            publisher=publisher,
            max_attempts=max_attempts,
        )

    return _factory


@pytest.fixture
def create_service(make_create_service):
    return make_create_service()


@pytest.fixture
def cancel_service(uow, publisher):
    return CancelBookingService(
        uow=uow,
        policy=CancellationPolicy(Settings().CANCELLATION_FEE_SCHEDULE),
        publisher=publisher,
        max_attempts=5,
    )
