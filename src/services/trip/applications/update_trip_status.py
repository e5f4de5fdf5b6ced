from aws_lambda_powertools import Logger

from services.shared.applications import retry_on_conflict
from services.shared.domain import (
    Caller,
    ForbiddenException,
    IsoDateTime,
    ResourceNotFoundException,
    Role,
    TripId,
)
from services.trip.domain.entity import Trip
from services.trip.domain.enum import TripStatus
from services.trip.domain.repository import TripRepository

logger = Logger(child=True)


class UpdateTripStatusService:
    """運行ステータス更新ユースケース（管理者または担当ドライバー）"""

    def __init__(self, repository: TripRepository, max_attempts: int) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def update_status(
        self,
        trip_id: TripId,
        new_status: TripStatus,
        caller: Caller,
        now: IsoDateTime,
        delay_minutes: int | None = None,
    ) -> Trip:
        """運行ステータスを更新する"""

        def _attempt() -> Trip:
            trip = self._repository.find_by_id(trip_id)
            if trip is None:
                raise ResourceNotFoundException(f"Trip not found: {trip_id}")
            if not caller.is_admin and not (
                caller.role == Role.DRIVER and caller.user_id == trip.driver_id
            ):
                raise ForbiddenException(
                    "Only the assigned driver or an admin can update trip status"
                )
            trip.update_status(new_status, now, delay_minutes)
            self._repository.update(trip)
            return trip

        trip = retry_on_conflict(_attempt, self._max_attempts, "update trip status")
        logger.info(
            "Updated trip status",
            extra={"trip_id": str(trip_id), "status": new_status.value},
        )
        return trip
