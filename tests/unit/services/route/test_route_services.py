from decimal import Decimal

import pytest

from services.route.applications.register_route import RegisterRouteService
from services.route.applications.update_route import UpdateRouteService
from services.route.domain.factory import RouteFactory
from services.route.domain.value_object import RouteUpdate
from services.shared.domain import ResourceNotFoundException, RouteId


class TestRegisterRouteService:
    def test_register_saves_route(self, uow):
        service = RegisterRouteService(repository=uow.routes, factory=RouteFactory())

        route = service.register(
            {
                "route_number": "RT-7",
                "name": "Coastal",
                "origin": "Goa",
                "destination": "Mangalore",
                "duration_minutes": 420,
                "base_fare": Decimal("800"),
                "currency_code": "INR",
            }
        )

        assert route.version == 1
        assert uow.routes.find_by_id(route.id) is not None


class TestUpdateRouteService:
    def test_update_route(self, store, uow, create_route):
        route = create_route()
        store.seed(route)
        service = UpdateRouteService(repository=uow.routes, max_attempts=3)

        updated = service.update(route.id, RouteUpdate(name="Renamed"))

        assert updated.name == "Renamed"
        assert uow.routes.find_by_id(route.id).name == "Renamed"
        assert uow.routes.find_by_id(route.id).version == 2

    def test_missing_route(self, uow):
        service = UpdateRouteService(repository=uow.routes, max_attempts=3)

        with pytest.raises(ResourceNotFoundException):
            service.update(RouteId(value="nope"), RouteUpdate(name="x"))
