from collections.abc import Sequence

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingCreated
from services.booking.domain.value_object import (
    BookingId,
    JourneyDetails,
    Passenger,
    Pricing,
    StopPoint,
)
from services.bus.domain.entity import Bus
from services.route.domain.entity import Route
from services.shared.domain import (
    IsoDateTime,
    UserId,
    ValidationException,
    generate_reference_number,
)
from services.trip.domain.entity import Trip


class BookingFactory:
    """予約ファクトリ"""

    def create(
        self,
        user_id: UserId,
        route: Route,
        bus: Bus,
        trip: Trip,
        passengers: Sequence[Passenger],
        pickup_point: StopPoint,
        drop_point: StopPoint,
        now: IsoDateTime,
        special_requests: str | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        到着日時 = 出発日時 + 路線の所要時間、総額 = 基本運賃 × 乗客数。
        """
        if trip.route_id != route.id or trip.bus_id != bus.id:
            raise ValidationException(
                f"Trip {trip.id} does not run on route {route.id} with bus {bus.id}"
            )

        departure = trip.schedule.departure
        base_fare = route.base_fare
        booking = Booking(
            id=BookingId.generate(),
            booking_number=generate_reference_number("BK", now.value),
            user_id=user_id,
            route_id=route.id,
            bus_id=bus.id,
            trip_id=trip.id,
            passengers=passengers,
            journey_details=JourneyDetails(
                departure=departure,
                arrival=departure.plus_minutes(route.duration_minutes),
                pickup_point=pickup_point,
                drop_point=drop_point,
            ),
            pricing=Pricing(
                base_fare=base_fare,
                total_amount=base_fare.multiply(len(passengers)).rounded(),
            ),
            created_at=now,
            status=BookingStatus.PENDING,
            special_requests=special_requests,
        )
        booking.add_domain_event(BookingCreated(booking_id=booking.id, trip_id=trip.id))
        return booking
