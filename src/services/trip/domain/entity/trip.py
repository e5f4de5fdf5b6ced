from collections.abc import Iterable, Sequence

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
from services.shared.domain.exception import (
    SeatAlreadyBookedException,
    SeatConflictException,
    SeatNotBookedException,
    SeatNotFoundException,
)
from services.trip.domain.entity.seat import Seat
from services.trip.domain.enum import SeatType, TripStatus
from services.trip.domain.value_object import SeatClaim, TripSchedule

# 運行ステータスの遷移表（DELAYED -> DELAYED は遅延分数の更新）
_TRANSITIONS: dict[TripStatus, frozenset[TripStatus]] = {
    TripStatus.SCHEDULED: frozenset(
        {TripStatus.BOARDING, TripStatus.DELAYED, TripStatus.CANCELLED}
    ),
    TripStatus.DELAYED: frozenset(
        {
            TripStatus.DELAYED,
            TripStatus.BOARDING,
            TripStatus.DEPARTED,
            TripStatus.CANCELLED,
        }
    ),
    TripStatus.BOARDING: frozenset(
        {TripStatus.DEPARTED, TripStatus.DELAYED, TripStatus.CANCELLED}
    ),
    TripStatus.DEPARTED: frozenset({TripStatus.IN_TRANSIT, TripStatus.ARRIVED}),
    TripStatus.IN_TRANSIT: frozenset({TripStatus.ARRIVED}),
    TripStatus.ARRIVED: frozenset(),
    TripStatus.CANCELLED: frozenset(),
}


class Trip(AggregateRoot[TripId]):
    """運行エンティティ（座席在庫の集約ルート）

    - 座席表が唯一の正であり、予約済み席数・空席数は座席表から導出する
    - booked_seats == 予約済みの座席数 は常に成り立つ
    - 座席の状態を変更できるのは book_seat / release_seat のみ
    """

    def __init__(
        self,
        id: TripId,
        trip_number: str,
        route_id: RouteId,
        bus_id: BusId,
        driver_id: UserId,
        schedule: TripSchedule,
        seat_map: Sequence[Seat],
        status: TripStatus = TripStatus.SCHEDULED,
        is_active: bool = True,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        seat_numbers = [seat.seat_number for seat in seat_map]
        if not seat_numbers:
            raise ValidationException("Seat map cannot be empty")
        if len(set(seat_numbers)) != len(seat_numbers):
            raise ValidationException("Seat numbers must be unique within a trip")
        self._trip_number = trip_number
        self._route_id = route_id
        self._bus_id = bus_id
        self._driver_id = driver_id
        self._schedule = schedule
        self._seat_map = list(seat_map)
        self._seats_by_number = {seat.seat_number: seat for seat in self._seat_map}
        self._status = status
        self._is_active = is_active

    @property
    def trip_number(self) -> str:
        return self._trip_number

    @property
    def route_id(self) -> RouteId:
        return self._route_id

    @property
    def bus_id(self) -> BusId:
        return self._bus_id

    @property
    def driver_id(self) -> UserId:
        return self._driver_id

    @property
    def schedule(self) -> TripSchedule:
        return self._schedule

    @property
    def status(self) -> TripStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def seat_map(self) -> tuple[Seat, ...]:
        return tuple(self._seat_map)

    @property
    def total_seats(self) -> int:
        return len(self._seat_map)

    @property
    def booked_seats(self) -> int:
        return sum(1 for seat in self._seat_map if seat.is_booked)

    @property
    def available_seats(self) -> int:
        return self.total_seats - self.booked_seats

    @property
    def occupancy_percentage(self) -> int:
        return round(self.booked_seats / self.total_seats * 100)

    @property
    def is_full(self) -> bool:
        return self.booked_seats >= self.total_seats

    @property
    def is_bookable(self) -> bool:
        """座席の予約を受け付けられるか"""
        return self._is_active and self._status.accepts_bookings

    def find_seat(self, seat_number: str) -> Seat | None:
        return self._seats_by_number.get(seat_number)

    def book_seat(
        self,
        seat_number: str,
        passenger_id: UserId,
        seat_type: SeatType | None = None,
    ) -> None:
        """座席を予約済みにする"""
        seat = self.find_seat(seat_number)
        if seat is None:
            raise SeatNotFoundException([seat_number])
        if seat.is_booked:
            raise SeatAlreadyBookedException(seat_number)
        seat.is_booked = True
        seat.passenger_id = passenger_id
        if seat_type is not None:
            seat.seat_type = seat_type

    def release_seat(self, seat_number: str) -> None:
        """座席の予約を解除する"""
        seat = self.find_seat(seat_number)
        if seat is None:
            raise SeatNotFoundException([seat_number])
        if not seat.is_booked:
            raise SeatNotBookedException(seat_number)
        seat.is_booked = False
        seat.passenger_id = None

    def book_seats(self, claims: Sequence[SeatClaim]) -> None:
        """複数の座席をまとめて予約する（全席成功か、何も変更しない）

        存在しない座席があれば SeatNotFoundException、
        予約済みの座席があれば該当座席をすべて含む SeatConflictException。
        """
        if not self.is_bookable:
            raise BusinessRuleViolationException(
                f"Trip {self.id} is not accepting bookings (status: {self._status.value})"
            )
        requested = [claim.seat_number for claim in claims]
        if len(set(requested)) != len(requested):
            raise ValidationException("Seat numbers must be unique within a booking")

        missing = [n for n in requested if self.find_seat(n) is None]
        if missing:
            raise SeatNotFoundException(missing)
        taken = [n for n in requested if self._seats_by_number[n].is_booked]
        if taken:
            raise SeatConflictException(taken)

        for claim in claims:
            self.book_seat(claim.seat_number, claim.passenger_id, claim.seat_type)

    def release_seats(self, seat_numbers: Iterable[str]) -> None:
        """複数の座席の予約を解除する（全席成功か、何も変更しない）"""
        seat_numbers = list(seat_numbers)
        missing = [n for n in seat_numbers if self.find_seat(n) is None]
        if missing:
            raise SeatNotFoundException(missing)
        for seat_number in seat_numbers:
            if not self._seats_by_number[seat_number].is_booked:
                raise SeatNotBookedException(seat_number)
        for seat_number in seat_numbers:
            self.release_seat(seat_number)

    def update_status(
        self,
        new_status: TripStatus,
        now: IsoDateTime,
        delay_minutes: int | None = None,
    ) -> None:
        """運行ステータスを更新する

        出発・到着時は実績時刻を、遅延時は遅延分数を記録する。
        """
        if new_status not in _TRANSITIONS[self._status]:
            raise BusinessRuleViolationException(
                f"Cannot change trip status from {self._status.value} "
                f"to {new_status.value}"
            )
        if new_status == TripStatus.DEPARTED:
            self._schedule = self._schedule.with_actual_departure(now)
        elif new_status == TripStatus.ARRIVED:
            self._schedule = self._schedule.with_actual_arrival(now)
        elif new_status == TripStatus.DELAYED:
            if delay_minutes is None or delay_minutes <= 0:
                raise ValidationException("A positive delay is required")
            self._schedule = self._schedule.with_delay(delay_minutes)
        self._status = new_status

    def deactivate(self) -> None:
        """論理削除する"""
        self._is_active = False
