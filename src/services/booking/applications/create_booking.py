from collections.abc import Sequence
from dataclasses import dataclass

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import Passenger, StopPoint
from services.shared.applications import EventPublisher, UnitOfWork, retry_on_conflict
from services.shared.domain import (
    BusId,
    IsoDateTime,
    ResourceNotFoundException,
    RouteId,
    TripId,
    UserId,
    ValidationException,
)
from services.trip.domain.value_object import SeatClaim

logger = Logger(child=True)


@dataclass(frozen=True)
class CreateBookingCommand:
    """予約作成の入力"""

    user_id: UserId
    route_id: RouteId
    bus_id: BusId
    trip_id: TripId
    passengers: Sequence[Passenger]
    pickup_point: StopPoint
    drop_point: StopPoint
    special_requests: str | None = None


class CreateBookingService:
    """予約作成ユースケース

    予約の登録・座席の確保・車両の空席数の減算を 1 トランザクションで確定する。
    運行・車両の version が読み取り時から変わっていれば最新の状態で検証からやり直す。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        factory: BookingFactory,
        publisher: EventPublisher,
        max_attempts: int,
    ) -> None:
        self._uow = uow
        self._factory = factory
        self._publisher = publisher
        self._max_attempts = max_attempts

    def create(self, command: CreateBookingCommand, now: IsoDateTime) -> Booking:
        """予約を作成する"""
        if not command.passengers:
            raise ValidationException("At least one passenger is required")

        def _attempt() -> Booking:
            with self._uow:
                route = self._uow.routes.find_by_id(command.route_id)
                if route is None or not route.is_bookable:
                    raise ResourceNotFoundException(
                        f"Route not found or inactive: {command.route_id}"
                    )
                bus = self._uow.buses.find_by_id(command.bus_id)
                if bus is None or not bus.is_bookable:
                    raise ResourceNotFoundException(
                        f"Bus not found or unavailable: {command.bus_id}"
                    )
                trip = self._uow.trips.find_by_id(command.trip_id)
                if trip is None:
                    raise ResourceNotFoundException(
                        f"Trip not found or inactive: {command.trip_id}"
                    )

                booking = self._factory.create(
                    user_id=command.user_id,
                    route=route,
                    bus=bus,
                    trip=trip,
                    passengers=command.passengers,
                    pickup_point=command.pickup_point,
                    drop_point=command.drop_point,
                    now=now,
                    special_requests=command.special_requests,
                )
                trip.book_seats(
                    [
                        SeatClaim(
                            seat_number=p.seat_number,
                            passenger_id=command.user_id,
                            seat_type=p.seat_type,
                        )
                        for p in booking.passengers
                    ]
                )
                bus.update_available_seats(-booking.passenger_count)

                self._uow.add(booking)
                self._uow.update(trip)
                self._uow.update(bus)
                self._uow.commit()
                return booking

        booking = retry_on_conflict(_attempt, self._max_attempts, "create booking")
        logger.info(
            "Created booking",
            extra={
                "booking_id": str(booking.id),
                "trip_id": str(booking.trip_id),
                "seats": booking.seat_numbers,
            },
        )
        self._publisher.publish(booking.flush_domain_events())
        return booking
