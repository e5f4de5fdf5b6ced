import pytest

from services.bus.applications.update_bus_location import UpdateBusLocationService
from services.bus.domain.value_object import BusLocation
from services.shared.domain import ForbiddenException, IsoDateTime, Role, UserId


@pytest.fixture
def service(uow, publisher):
    return UpdateBusLocationService(
        repository=uow.buses, publisher=publisher, max_attempts=3
    )


@pytest.fixture
def location(now):
    return BusLocation(latitude=19.07, longitude=72.87, last_updated=now)


class TestUpdateBusLocationService:
    def test_assigned_driver_updates_location(
        self, store, uow, service, publisher, create_bus, driver_caller, location
    ):
        bus = create_bus()
        store.seed(bus)

        service.update_location(bus.id, location, driver_caller)

        assert uow.buses.find_by_id(bus.id).current_location == location
        assert publisher.names == ["bus-location-changed"]

    def test_other_driver_is_forbidden(
        self, store, service, publisher, create_bus, make_caller, location
    ):
        bus = create_bus()
        store.seed(bus)

        with pytest.raises(ForbiddenException):
            service.update_location(
                bus.id, location, make_caller(UserId(value="driver-2"), Role.DRIVER)
            )
        assert publisher.emitted == []

    def test_admin_updates_location(
        self, store, service, create_bus, admin_caller, location
    ):
        bus = create_bus()
        store.seed(bus)

        updated = service.update_location(bus.id, location, admin_caller)

        assert isinstance(updated.current_location.last_updated, IsoDateTime)
