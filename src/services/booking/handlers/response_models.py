from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking


class PassengerData(BaseModel):
    seat_number: str
    first_name: str
    last_name: str
    age: int
    seat_type: str | None


class StopPointData(BaseModel):
    city: str
    address: str | None


class JourneyData(BaseModel):
    departure: str
    arrival: str
    pickup_point: StopPointData
    drop_point: StopPointData


class PricingData(BaseModel):
    base_fare: str
    total_amount: str
    currency: str


class CancellationData(BaseModel):
    reason: str
    cancelled_by: str
    cancellation_fee: str
    refund_amount: str
    cancelled_at: str


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    booking_number: str
    user_id: str
    route_id: str
    bus_id: str
    trip_id: str
    passengers: list[PassengerData]
    journey_details: JourneyData
    pricing: PricingData
    status: str
    payment_status: str
    special_requests: str | None
    cancellation: CancellationData | None
    created_at: str
    version: int


class CancellationResultData(BaseModel):
    """キャンセル結果のレスポンスモデル"""

    booking_id: str
    cancellation_fee: str
    refund_amount: str
    currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class CancellationResponse(BaseModel):
    status: str = "success"
    data: CancellationResultData


def _stop(stop) -> StopPointData:
    return StopPointData(city=stop.city, address=stop.address)


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    journey = booking.journey_details
    cancellation = booking.cancellation
    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking.id),
            booking_number=booking.booking_number,
            user_id=str(booking.user_id),
            route_id=str(booking.route_id),
            bus_id=str(booking.bus_id),
            trip_id=str(booking.trip_id),
            passengers=[
                PassengerData(
                    seat_number=p.seat_number,
                    first_name=p.first_name,
                    last_name=p.last_name,
                    age=p.age,
                    seat_type=p.seat_type.value if p.seat_type else None,
                )
                for p in booking.passengers
            ],
            journey_details=JourneyData(
                departure=str(journey.departure),
                arrival=str(journey.arrival),
                pickup_point=_stop(journey.pickup_point),
                drop_point=_stop(journey.drop_point),
            ),
            pricing=PricingData(
                base_fare=str(booking.pricing.base_fare.amount),
                total_amount=str(booking.pricing.total_amount.amount),
                currency=booking.pricing.currency,
            ),
            status=booking.status.value,
            payment_status=booking.payment_status,
            special_requests=booking.special_requests,
            cancellation=(
                CancellationData(
                    reason=cancellation.reason,
                    cancelled_by=cancellation.cancelled_by.value,
                    cancellation_fee=str(cancellation.cancellation_fee.amount),
                    refund_amount=str(cancellation.refund_amount.amount),
                    cancelled_at=str(cancellation.cancelled_at),
                )
                if cancellation
                else None
            ),
            created_at=str(booking.created_at),
            version=booking.version,
        )
    ).model_dump()


def to_cancellation_response(booking: Booking) -> dict:
    """キャンセル結果（キャンセル料・返金額）をレスポンス辞書に変換する"""
    cancellation = booking.cancellation
    return CancellationResponse(
        data=CancellationResultData(
            booking_id=str(booking.id),
            cancellation_fee=str(cancellation.cancellation_fee.amount),
            refund_amount=str(cancellation.refund_amount.amount),
            currency=booking.pricing.currency,
        )
    ).model_dump()
