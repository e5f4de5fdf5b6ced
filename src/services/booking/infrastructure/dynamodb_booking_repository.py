from decimal import Decimal

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, CancelledBy
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    Cancellation,
    JourneyDetails,
    Passenger,
    Pricing,
    StopPoint,
)
from services.shared.domain import (
    BusId,
    Currency,
    IsoDateTime,
    Money,
    RouteId,
    TripId,
    UserId,
)
from services.shared.infrastructure import DynamoDBRepository
from services.shared.infrastructure.dynamodb_repository import METADATA, as_int
from services.trip.domain.enum import SeatType


def _stop_to_item(stop: StopPoint) -> dict:
    return {"city": stop.city, "address": stop.address}


def _stop_from_item(item: dict) -> StopPoint:
    return StopPoint(city=item["city"], address=item.get("address"))


class DynamoDBBookingRepository(
    DynamoDBRepository[Booking, BookingId], BookingRepository
):
    """DynamoDBを使用したBookingRepository の具象実装

    利用者別の予約一覧用に GSI1 (USER#<user_id> / BOOKING#<created_at>) のキーを書き込む
    （一覧 API 自体は持たない）。
    """

    entity_type = "BOOKING"

    def _key(self, id: BookingId) -> dict:
        return {"PK": f"BOOKING#{id}", "SK": METADATA}

    def _to_item(self, booking: Booking) -> dict:
        currency = booking.pricing.currency
        item = {
            "booking_id": str(booking.id),
            "booking_number": booking.booking_number,
            "user_id": str(booking.user_id),
            "route_id": str(booking.route_id),
            "bus_id": str(booking.bus_id),
            "trip_id": str(booking.trip_id),
            "passengers": [
                {
                    "seat_number": p.seat_number,
                    "first_name": p.first_name,
                    "last_name": p.last_name,
                    "age": p.age,
                    "seat_type": p.seat_type.value if p.seat_type else None,
                }
                for p in booking.passengers
            ],
            "departure": str(booking.journey_details.departure),
            "arrival": str(booking.journey_details.arrival),
            "pickup_point": _stop_to_item(booking.journey_details.pickup_point),
            "drop_point": _stop_to_item(booking.journey_details.drop_point),
            "base_fare": str(booking.pricing.base_fare.amount),
            "total_amount": str(booking.pricing.total_amount.amount),
            "currency": currency,
            "status": booking.status.value,
            "payment_status": booking.payment_status,
            "special_requests": booking.special_requests,
            "created_at": str(booking.created_at),
            "is_active": True,
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": f"BOOKING#{booking.created_at}",
        }
        cancellation = booking.cancellation
        if cancellation is not None:
            item["cancellation"] = {
                "reason": cancellation.reason,
                "cancelled_by": cancellation.cancelled_by.value,
                "cancellation_fee": str(cancellation.cancellation_fee.amount),
                "refund_amount": str(cancellation.refund_amount.amount),
                "cancelled_at": str(cancellation.cancelled_at),
            }
        return item

    def _to_entity(self, item: dict) -> Booking:
        currency = Currency(item["currency"])
        cancellation = None
        if item.get("cancellation"):
            c = item["cancellation"]
            cancellation = Cancellation(
                reason=c["reason"],
                cancelled_by=CancelledBy(c["cancelled_by"]),
                cancellation_fee=Money(Decimal(c["cancellation_fee"]), currency),
                refund_amount=Money(Decimal(c["refund_amount"]), currency),
                cancelled_at=IsoDateTime.from_string(c["cancelled_at"]),
            )
        return Booking(
            id=BookingId(value=item["booking_id"]),
            booking_number=item["booking_number"],
            user_id=UserId(value=item["user_id"]),
            route_id=RouteId(value=item["route_id"]),
            bus_id=BusId(value=item["bus_id"]),
            trip_id=TripId(value=item["trip_id"]),
            passengers=[
                Passenger(
                    seat_number=p["seat_number"],
                    first_name=p["first_name"],
                    last_name=p["last_name"],
                    age=as_int(p["age"]),
                    seat_type=SeatType(p["seat_type"]) if p.get("seat_type") else None,
                )
                for p in item["passengers"]
            ],
            journey_details=JourneyDetails(
                departure=IsoDateTime.from_string(item["departure"]),
                arrival=IsoDateTime.from_string(item["arrival"]),
                pickup_point=_stop_from_item(item["pickup_point"]),
                drop_point=_stop_from_item(item["drop_point"]),
            ),
            pricing=Pricing(
                base_fare=Money(Decimal(item["base_fare"]), currency),
                total_amount=Money(Decimal(item["total_amount"]), currency),
            ),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=BookingStatus(item["status"]),
            payment_status=item.get("payment_status", "pending"),
            special_requests=item.get("special_requests"),
            cancellation=cancellation,
            version=as_int(item["version"]),
        )
