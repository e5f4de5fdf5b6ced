from services.route.domain.enum import RouteStatus
from services.route.domain.value_object import RouteUpdate
from services.shared.domain import AggregateRoot, Money, RouteId, ValidationException


class Route(AggregateRoot[RouteId]):
    """路線エンティティ

    所要時間（分）と基本運賃を持ち、予約時の到着時刻と料金の計算元になる。
    """

    def __init__(
        self,
        id: RouteId,
        route_number: str,
        name: str,
        origin: str,
        destination: str,
        duration_minutes: int,
        base_fare: Money,
        status: RouteStatus = RouteStatus.ACTIVE,
        is_active: bool = True,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        if duration_minutes <= 0:
            raise ValidationException("Route duration must be positive")
        self._route_number = route_number
        self._name = name
        self._origin = origin
        self._destination = destination
        self._duration_minutes = duration_minutes
        self._base_fare = base_fare
        self._status = status
        self._is_active = is_active

    @property
    def route_number(self) -> str:
        return self._route_number

    @property
    def name(self) -> str:
        return self._name

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def duration_minutes(self) -> int:
        return self._duration_minutes

    @property
    def base_fare(self) -> Money:
        return self._base_fare

    @property
    def status(self) -> RouteStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_bookable(self) -> bool:
        """予約を受け付けられるか"""
        return self._is_active and self._status == RouteStatus.ACTIVE

    def apply_update(self, update: RouteUpdate) -> None:
        """更新コマンドを適用する"""
        if update.duration_minutes is not None:
            if update.duration_minutes <= 0:
                raise ValidationException("Route duration must be positive")
            self._duration_minutes = update.duration_minutes
        if update.name is not None:
            self._name = update.name
        if update.base_fare is not None:
            try:
                self._base_fare = Money(update.base_fare, self._base_fare.currency)
            except ValueError as e:
                raise ValidationException(str(e)) from e
        if update.status is not None:
            self._status = update.status

    def deactivate(self) -> None:
        """論理削除する"""
        self._is_active = False
        self._status = RouteStatus.INACTIVE
