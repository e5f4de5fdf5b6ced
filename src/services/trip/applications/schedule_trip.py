from aws_lambda_powertools import Logger

from services.shared.applications import UnitOfWork
from services.shared.domain import BusId, ResourceNotFoundException, RouteId
from services.trip.domain.entity import Trip
from services.trip.domain.factory import TripDetails, TripFactory

logger = Logger(child=True)


class ScheduleTripService:
    """運行登録ユースケース（管理者）

    座席表は車両の総座席数から生成する。
    """

    def __init__(self, uow: UnitOfWork, factory: TripFactory) -> None:
        self._uow = uow
        self._factory = factory

    def schedule(
        self, route_id: RouteId, bus_id: BusId, trip_details: TripDetails
    ) -> Trip:
        """運行を登録する"""
        with self._uow:
            route = self._uow.routes.find_by_id(route_id)
            if route is None or not route.is_bookable:
                raise ResourceNotFoundException(
                    f"Route not found or inactive: {route_id}"
                )
            bus = self._uow.buses.find_by_id(bus_id)
            if bus is None or not bus.is_bookable:
                raise ResourceNotFoundException(f"Bus not found or inactive: {bus_id}")

            trip = self._factory.create(route, bus, trip_details)
            self._uow.add(trip)
            self._uow.commit()

        logger.info(
            "Scheduled trip",
            extra={"trip_id": str(trip.id), "trip_number": trip.trip_number},
        )
        return trip
