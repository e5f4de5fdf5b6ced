from decimal import Decimal

import pytest

from services.route.domain.enum import RouteStatus
from services.route.domain.factory import RouteDetails, RouteFactory
from services.route.domain.value_object import RouteUpdate
from services.shared.domain import Currency, Money, ValidationException


@pytest.fixture
def route_details() -> RouteDetails:
    return {
        "route_number": "RT-101",
        "name": "Mumbai - Pune Express",
        "origin": "Mumbai",
        "destination": "Pune",
        "duration_minutes": 180,
        "base_fare": Decimal("450"),
        "currency_code": "INR",
    }


class TestRouteFactory:
    def test_create_active_route(self, route_details):
        route = RouteFactory().create(route_details)

        assert route.status == RouteStatus.ACTIVE
        assert route.is_bookable
        assert route.base_fare == Money(Decimal("450"), Currency.inr())
        assert route.version == 0

    def test_origin_and_destination_must_differ(self, route_details):
        route_details["destination"] = "Mumbai"

        with pytest.raises(ValidationException):
            RouteFactory().create(route_details)

    def test_unsupported_currency_is_rejected(self, route_details):
        route_details["currency_code"] = "ABC"

        with pytest.raises(ValidationException):
            RouteFactory().create(route_details)

    def test_duration_must_be_positive(self, route_details):
        route_details["duration_minutes"] = 0

        with pytest.raises(ValidationException):
            RouteFactory().create(route_details)


class TestRoute:
    def test_inactive_status_is_not_bookable(self, create_route):
        assert not create_route(status=RouteStatus.MAINTENANCE).is_bookable

    def test_apply_update_keeps_currency(self, create_route):
        route = create_route()

        route.apply_update(
            RouteUpdate(name="Night Express", base_fare=Decimal("600"), duration_minutes=200)
        )

        assert route.name == "Night Express"
        assert route.base_fare == Money.inr(Decimal("600"))
        assert route.duration_minutes == 200

    def test_apply_update_rejects_invalid_values(self, create_route):
        route = create_route()

        with pytest.raises(ValidationException):
            route.apply_update(RouteUpdate(duration_minutes=-5))
        with pytest.raises(ValidationException):
            route.apply_update(RouteUpdate(base_fare=Decimal("-1")))

    def test_deactivate(self, create_route):
        route = create_route()

        route.deactivate()

        assert not route.is_active
        assert not route.is_bookable
