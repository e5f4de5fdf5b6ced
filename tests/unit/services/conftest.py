import copy
import threading
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    JourneyDetails,
    Passenger,
    Pricing,
    StopPoint,
)
from services.bus.domain.entity import Bus
from services.bus.domain.enum import BusStatus
from services.bus.domain.value_object import BusCapacity
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethodType, PaymentStatus
from services.payment.domain.value_object import (
    PaymentAmount,
    PaymentId,
    PaymentMethod,
)
from services.route.domain.entity import Route
from services.route.domain.enum import RouteStatus
from services.shared.applications import EventPublisher, UnitOfWork
from services.shared.domain import (
    BusId,
    Caller,
    Currency,
    DuplicateResourceException,
    IsoDateTime,
    Money,
    OptimisticLockException,
    Role,
    RouteId,
    SoftDeletable,
    TripId,
    UserId,
)
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripStatus
from services.trip.domain.factory import TripFactory
from services.trip.domain.value_object import TripSchedule

NOW = IsoDateTime(datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc))
ROUTE_ID = RouteId(value="route-1")
BUS_ID = BusId(value="bus-1")
TRIP_ID = TripId(value="trip-1")
USER_ID = UserId(value="user-1")
DRIVER_ID = UserId(value="driver-1")


class InMemoryStore:
    """集約のスナップショットを保持するテスト用ストア

    書き込みは lock の中で version を比較してから反映する（DynamoDB の条件付き書き込み相当）。
    """

    def __init__(self) -> None:
        self._items: dict[tuple[type, object], object] = {}
        self._lock = threading.Lock()
        self.commit_count = 0

    def get(self, entity_type: type, id: object):
        with self._lock:
            aggregate = self._items.get((entity_type, id))
            return copy.deepcopy(aggregate) if aggregate is not None else None

    def write(self, writes) -> None:
        with self._lock:
            for aggregate, is_new in writes:
                current = self._items.get((type(aggregate), aggregate.id))
                if is_new and current is not None:
                    raise DuplicateResourceException(f"already exists: {aggregate.id}")
                if not is_new and (
                    current is None or current.version != aggregate.version
                ):
                    raise OptimisticLockException(
                        f"modified concurrently: {aggregate.id}"
                    )
            for aggregate, _ in writes:
                snapshot = copy.deepcopy(aggregate)
                snapshot.flush_domain_events()
                snapshot.mark_persisted()
                self._items[(type(aggregate), aggregate.id)] = snapshot
            self.commit_count += 1

    def seed(self, *aggregates) -> None:
        self.write([(aggregate, True) for aggregate in aggregates])
        for aggregate in aggregates:
            aggregate.mark_persisted()


class InMemoryRepository:
    def __init__(self, store: InMemoryStore, entity_type: type) -> None:
        self._store = store
        self._entity_type = entity_type

    def find_by_id(self, id):
        aggregate = self._store.get(self._entity_type, id)
        if aggregate is None:
            return None
        if isinstance(aggregate, SoftDeletable) and not aggregate.is_active:
            return None
        return aggregate

    def save(self, aggregate) -> None:
        self._store.write([(aggregate, True)])
        aggregate.mark_persisted()

    def update(self, aggregate) -> None:
        self._store.write([(aggregate, False)])
        aggregate.mark_persisted()


class InMemoryUnitOfWork(UnitOfWork):
    """テスト用の UnitOfWork

    before_commit は確定直前に呼ばれ、競合する書き込みを割り込ませるのに使う。
    """

    def __init__(self, store: InMemoryStore, before_commit=None) -> None:
        super().__init__()
        self.routes = InMemoryRepository(store, Route)
        self.buses = InMemoryRepository(store, Bus)
        self.trips = InMemoryRepository(store, Trip)
        self.bookings = InMemoryRepository(store, Booking)
        self.payments = InMemoryRepository(store, Payment)
        self._store = store
        self._before_commit = before_commit

    def _commit(self, writes) -> None:
        if self._before_commit is not None:
            self._before_commit(writes)
        self._store.write(writes)


class RecordingEventPublisher(EventPublisher):
    def __init__(self) -> None:
        self.emitted: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.emitted.append((event_name, payload))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.emitted]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def make_uow(store):
    """UnitOfWork を生成する Factory fixture（同じストアを共有する）"""

    def _factory(before_commit=None) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(store, before_commit=before_commit)

    return _factory


@pytest.fixture
def uow(make_uow):
    return make_uow()


@pytest.fixture
def publisher():
    return RecordingEventPublisher()


@pytest.fixture
def make_caller():
    def _factory(user_id: UserId = USER_ID, role: Role = Role.USER) -> Caller:
        return Caller(user_id=user_id, role=role)

    return _factory


@pytest.fixture
def user_caller(make_caller):
    return make_caller()


@pytest.fixture
def other_caller(make_caller):
    return make_caller(UserId(value="user-2"))


@pytest.fixture
def admin_caller(make_caller):
    return make_caller(UserId(value="admin-1"), Role.ADMIN)


@pytest.fixture
def driver_caller(make_caller):
    return make_caller(DRIVER_ID, Role.DRIVER)


@pytest.fixture
def create_route():
    """Route を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        route_id: RouteId = ROUTE_ID,
        status: RouteStatus = RouteStatus.ACTIVE,
        base_fare: Decimal = Decimal("500"),
        duration_minutes: int = 360,
    ) -> Route:
        return Route(
            id=route_id,
            route_number="RT-101",
            name="Mumbai - Pune Express",
            origin="Mumbai",
            destination="Pune",
            duration_minutes=duration_minutes,
            base_fare=Money.inr(base_fare),
            status=status,
        )

    return _factory


@pytest.fixture
def create_bus():
    """Bus を生成する Factory fixture"""

    def _factory(
        bus_id: BusId = BUS_ID,
        total_seats: int = 40,
        available_seats: int | None = None,
        status: BusStatus = BusStatus.ACTIVE,
    ) -> Bus:
        return Bus(
            id=bus_id,
            bus_number="MH-12-AB-1234",
            bus_name="Shivneri",
            capacity=BusCapacity(
                total_seats=total_seats,
                available_seats=(
                    total_seats if available_seats is None else available_seats
                ),
            ),
            driver_id=DRIVER_ID,
            status=status,
        )

    return _factory


@pytest.fixture
def create_trip(now):
    """Trip を生成する Factory fixture（座席表は A1, A2, ... の自動生成）"""

    def _factory(
        trip_id: TripId = TRIP_ID,
        total_seats: int = 40,
        status: TripStatus = TripStatus.SCHEDULED,
        departure: IsoDateTime | None = None,
        route_id: RouteId = ROUTE_ID,
        bus_id: BusId = BUS_ID,
    ) -> Trip:
        departure = departure or now.plus_minutes(60 * 24 * 40)
        return Trip(
            id=trip_id,
            trip_number="TR123456001",
            route_id=route_id,
            bus_id=bus_id,
            driver_id=DRIVER_ID,
            schedule=TripSchedule(
                departure=departure, arrival=departure.plus_minutes(360)
            ),
            seat_map=TripFactory(seats_per_row=4).seed_seat_map(total_seats),
            status=status,
        )

    return _factory


@pytest.fixture
def create_passengers():
    def _factory(*seat_numbers: str) -> list[Passenger]:
        return [
            Passenger(
                seat_number=seat_number,
                first_name="Asha",
                last_name=f"Rao{index}",
                age=30 + index,
            )
            for index, seat_number in enumerate(seat_numbers)
        ]

    return _factory


@pytest.fixture
def create_booking(now, create_passengers):
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        status: BookingStatus = BookingStatus.PENDING,
        seat_numbers: tuple[str, ...] = ("A1", "A2"),
        user_id: UserId = USER_ID,
        departure: IsoDateTime | None = None,
        total_amount: Decimal | None = None,
    ) -> Booking:
        departure = departure or now.plus_minutes(60 * 24 * 40)
        base_fare = Money.inr(Decimal("500"))
        return Booking(
            id=BookingId(value=booking_id),
            booking_number="BK123456001",
            user_id=user_id,
            route_id=ROUTE_ID,
            bus_id=BUS_ID,
            trip_id=TRIP_ID,
            passengers=create_passengers(*seat_numbers),
            journey_details=JourneyDetails(
                departure=departure,
                arrival=departure.plus_minutes(360),
                pickup_point=StopPoint(city="Mumbai", address="Dadar"),
                drop_point=StopPoint(city="Pune", address="Swargate"),
            ),
            pricing=Pricing(
                base_fare=base_fare,
                total_amount=(
                    Money.inr(total_amount)
                    if total_amount is not None
                    else base_fare.multiply(len(seat_numbers))
                ),
            ),
            created_at=now,
            status=status,
        )

    return _factory


@pytest.fixture
def create_payment(now):
    """Payment を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        status: PaymentStatus = PaymentStatus.PENDING,
        amount: Decimal = Decimal("1000"),
        user_id: UserId = USER_ID,
    ) -> Payment:
        booking_id = BookingId(value=booking_id)
        return Payment(
            id=PaymentId.from_booking_id(booking_id),
            payment_number="PAY123456001",
            booking_id=booking_id,
            user_id=user_id,
            amount=PaymentAmount.of(base_amount=amount, currency=Currency.inr()),
            method=PaymentMethod(type=PaymentMethodType.UPI),
            created_at=now,
            status=status,
        )

    return _factory
