from services.bus.domain.enum import Amenity, BusStatus, BusType
from services.bus.domain.event import BusLocationChanged
from services.bus.domain.value_object import BusCapacity, BusLocation, BusUpdate
from services.shared.domain import AggregateRoot, BusId, UserId, ValidationException


class Bus(AggregateRoot[BusId]):
    """車両エンティティ

    空席数は車両単位の概算カウンタで、特定の運行の座席表とは連動しない。
    予約時に乗客数だけ減り、キャンセル時に同数だけ戻る。
    """

    def __init__(
        self,
        id: BusId,
        bus_number: str,
        bus_name: str,
        capacity: BusCapacity,
        driver_id: UserId,
        bus_type: BusType = BusType.STANDARD,
        amenities: tuple[Amenity, ...] = (),
        current_location: BusLocation | None = None,
        status: BusStatus = BusStatus.ACTIVE,
        is_active: bool = True,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        self._bus_number = bus_number
        self._bus_name = bus_name
        self._capacity = capacity
        self._driver_id = driver_id
        self._bus_type = bus_type
        self._amenities = amenities
        self._current_location = current_location
        self._status = status
        self._is_active = is_active

    @property
    def bus_number(self) -> str:
        return self._bus_number

    @property
    def bus_name(self) -> str:
        return self._bus_name

    @property
    def capacity(self) -> BusCapacity:
        return self._capacity

    @property
    def driver_id(self) -> UserId:
        return self._driver_id

    @property
    def bus_type(self) -> BusType:
        return self._bus_type

    @property
    def amenities(self) -> tuple[Amenity, ...]:
        return self._amenities

    @property
    def current_location(self) -> BusLocation | None:
        return self._current_location

    @property
    def status(self) -> BusStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_bookable(self) -> bool:
        """予約を受け付けられるか"""
        return self._is_active and self._status == BusStatus.ACTIVE

    @property
    def occupancy_percentage(self) -> float:
        booked = self._capacity.total_seats - self._capacity.available_seats
        return round(booked / self._capacity.total_seats * 100, 2)

    def update_available_seats(self, delta: int) -> None:
        """空席数を増減する

        結果が [0, 総座席数] を外れる場合は InvalidCapacityDeltaException。
        """
        self._capacity = self._capacity.adjust(delta)

    def update_location(self, location: BusLocation) -> None:
        """現在位置を更新し、位置変更イベントを記録する"""
        self._current_location = location
        self.add_domain_event(BusLocationChanged(bus_id=self.id, location=location))

    def apply_update(self, update: BusUpdate) -> None:
        """更新コマンドを適用する"""
        if update.total_seats is not None:
            try:
                self._capacity = self._capacity.resize(update.total_seats)
            except ValueError as e:
                raise ValidationException(str(e)) from e
        if update.bus_name is not None:
            self._bus_name = update.bus_name
        if update.bus_type is not None:
            self._bus_type = update.bus_type
        if update.amenities is not None:
            self._amenities = update.amenities
        if update.driver_id is not None:
            self._driver_id = update.driver_id
        if update.status is not None:
            self._status = update.status

    def deactivate(self) -> None:
        """論理削除する"""
        self._is_active = False
        self._status = BusStatus.RETIRED
