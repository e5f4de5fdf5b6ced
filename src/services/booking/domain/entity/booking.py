from collections.abc import Sequence
from dataclasses import replace

from services.booking.domain.enum import BookingStatus, CancelledBy
from services.booking.domain.event import BookingCancelled
from services.booking.domain.value_object import (
    BookingId,
    BookingUpdate,
    Cancellation,
    CancellationQuote,
    JourneyDetails,
    Passenger,
    Pricing,
)
from services.shared.domain import (
    AggregateRoot,
    BusId,
    BusinessRuleViolationException,
    IsoDateTime,
    RouteId,
    TripId,
    UserId,
    ValidationException,
)

PAYMENT_STATUS_PENDING = "pending"


class Booking(AggregateRoot[BookingId]):
    """予約エンティティ

    - pending で作成され、決済の完了によってのみ confirmed になる
    - cancelled / completed は終端状態
    - 物理削除はせず、キャンセルはステータスで表す
    - payment_status は紐づく決済ステータスの写し
    """

    def __init__(
        self,
        id: BookingId,
        booking_number: str,
        user_id: UserId,
        route_id: RouteId,
        bus_id: BusId,
        trip_id: TripId,
        passengers: Sequence[Passenger],
        journey_details: JourneyDetails,
        pricing: Pricing,
        created_at: IsoDateTime,
        status: BookingStatus = BookingStatus.PENDING,
        payment_status: str = PAYMENT_STATUS_PENDING,
        special_requests: str | None = None,
        cancellation: Cancellation | None = None,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        if not passengers:
            raise ValidationException("At least one passenger is required")
        seat_numbers = [p.seat_number for p in passengers]
        if len(set(seat_numbers)) != len(seat_numbers):
            raise ValidationException("Each passenger must have a distinct seat")
        self._booking_number = booking_number
        self._user_id = user_id
        self._route_id = route_id
        self._bus_id = bus_id
        self._trip_id = trip_id
        self._passengers = tuple(passengers)
        self._journey_details = journey_details
        self._pricing = pricing
        self._created_at = created_at
        self._status = status
        self._payment_status = payment_status
        self._special_requests = special_requests
        self._cancellation = cancellation

    @property
    def booking_number(self) -> str:
        return self._booking_number

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def route_id(self) -> RouteId:
        return self._route_id

    @property
    def bus_id(self) -> BusId:
        return self._bus_id

    @property
    def trip_id(self) -> TripId:
        return self._trip_id

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def passenger_count(self) -> int:
        return len(self._passengers)

    @property
    def seat_numbers(self) -> list[str]:
        return [p.seat_number for p in self._passengers]

    @property
    def journey_details(self) -> JourneyDetails:
        return self._journey_details

    @property
    def pricing(self) -> Pricing:
        return self._pricing

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> str:
        return self._payment_status

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    @property
    def cancellation(self) -> Cancellation | None:
        return self._cancellation

    def confirm(self) -> None:
        """予約を確定する（決済完了時のみ呼ばれる）

        すでに confirmed の場合は何もしない。
        """
        if self._status == BookingStatus.CONFIRMED:
            return
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot confirm booking in {self._status.value} status"
            )
        self._status = BookingStatus.CONFIRMED

    def cancel(
        self,
        reason: str,
        cancelled_by: CancelledBy,
        quote: CancellationQuote,
        now: IsoDateTime,
    ) -> None:
        """予約をキャンセルし、キャンセル料と返金額を記録する"""
        if self._status.is_terminal:
            raise BusinessRuleViolationException(
                f"Cannot cancel booking in {self._status.value} status"
            )
        if not reason:
            raise ValidationException("Cancellation reason is required")
        self._cancellation = Cancellation(
            reason=reason,
            cancelled_by=cancelled_by,
            cancellation_fee=quote.cancellation_fee,
            refund_amount=quote.refund_amount,
            cancelled_at=now,
        )
        self._status = BookingStatus.CANCELLED
        self.add_domain_event(BookingCancelled(booking_id=self.id, trip_id=self._trip_id))

    def complete(self) -> None:
        """乗車済みにする（confirmed からのみ）"""
        if self._status != BookingStatus.CONFIRMED:
            raise BusinessRuleViolationException(
                f"Cannot complete booking in {self._status.value} status"
            )
        self._status = BookingStatus.COMPLETED

    def apply_update(self, update: BookingUpdate) -> None:
        """更新コマンドを適用する（pending / confirmed のみ）"""
        if not self._status.is_modifiable:
            raise BusinessRuleViolationException(
                f"Cannot update booking in {self._status.value} status"
            )
        if update.passengers is not None:
            current = {p.seat_number: p for p in self._passengers}
            updated = {p.seat_number: p for p in update.passengers}
            if len(updated) != len(update.passengers) or updated.keys() != current.keys():
                raise ValidationException(
                    "Passenger updates must cover exactly the booked seats"
                )
            self._passengers = tuple(
                self._keep_seat_type(p, updated[p.seat_number])
                for p in self._passengers
            )
        if update.pickup_point is not None or update.drop_point is not None:
            self._journey_details = self._journey_details.with_points(
                update.pickup_point, update.drop_point
            )
        if update.special_requests is not None:
            self._special_requests = update.special_requests

    @staticmethod
    def _keep_seat_type(current: Passenger, updated: Passenger) -> Passenger:
        """座席種別は変更不可（未指定なら現在の値を引き継ぐ）"""
        if updated.seat_type is None or updated.seat_type == current.seat_type:
            return replace(updated, seat_type=current.seat_type)
        raise ValidationException(
            f"Seat type of seat {current.seat_number} cannot be changed"
        )

    def mirror_payment_status(self, payment_status: str) -> None:
        """決済ステータスの写しを更新する"""
        self._payment_status = payment_status
