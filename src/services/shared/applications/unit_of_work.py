from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from services.shared.domain import AggregateRoot

if TYPE_CHECKING:
    from services.booking.domain.repository import BookingRepository
    from services.bus.domain.repository import BusRepository
    from services.payment.domain.repository import PaymentRepository
    from services.route.domain.repository import RouteRepository
    from services.trip.domain.repository import TripRepository


class UnitOfWork(ABC):
    """Unit of Work

    - 読み取りは各 Repository 経由
    - 書き込みは add / update で登録し、commit で 1 トランザクションとして確定する
    - 確定時は集約ごとに version 条件を付け、競合時は OptimisticLockException
    - with ブロックを抜けると未確定の書き込みは破棄される

    Usage:
        with uow:
            trip = uow.trips.find_by_id(trip_id)
            trip.book_seat(...)
            uow.update(trip)
            uow.commit()
    """

    routes: RouteRepository
    buses: BusRepository
    trips: TripRepository
    bookings: BookingRepository
    payments: PaymentRepository

    def __init__(self) -> None:
        self._pending: list[tuple[AggregateRoot, bool]] = []

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, *args) -> None:
        self.rollback()

    def add(self, aggregate: AggregateRoot) -> None:
        """新規の集約を登録する"""
        self._pending.append((aggregate, True))

    def update(self, aggregate: AggregateRoot) -> None:
        """既存の集約の更新を登録する"""
        self._pending.append((aggregate, False))

    def commit(self) -> None:
        """登録済みの書き込みを 1 トランザクションで確定する"""
        if not self._pending:
            return
        pending = self._pending
        self._pending = []
        self._commit(pending)
        for aggregate, _ in pending:
            aggregate.mark_persisted()

    def rollback(self) -> None:
        """未確定の書き込みを破棄する"""
        self._pending = []

    @abstractmethod
    def _commit(self, writes: list[tuple[AggregateRoot, bool]]) -> None:
        raise NotImplementedError
