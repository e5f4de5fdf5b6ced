from aws_lambda_powertools import Logger

from services.bus.domain.entity import Bus
from services.bus.domain.repository import BusRepository
from services.bus.domain.value_object import BusLocation
from services.shared.applications import EventPublisher, retry_on_conflict
from services.shared.domain import (
    BusId,
    Caller,
    ForbiddenException,
    ResourceNotFoundException,
    Role,
)

logger = Logger(child=True)


class UpdateBusLocationService:
    """車両位置更新ユースケース（担当ドライバーまたは管理者）"""

    def __init__(
        self,
        repository: BusRepository,
        publisher: EventPublisher,
        max_attempts: int,
    ) -> None:
        self._repository = repository
        self._publisher = publisher
        self._max_attempts = max_attempts

    def update_location(
        self, bus_id: BusId, location: BusLocation, caller: Caller
    ) -> Bus:
        """車両の現在位置を更新し、bus-location-changed を発行する"""

        def _attempt() -> Bus:
            bus = self._repository.find_by_id(bus_id)
            if bus is None:
                raise ResourceNotFoundException(f"Bus not found: {bus_id}")
            if not caller.is_admin and not (
                caller.role == Role.DRIVER and caller.user_id == bus.driver_id
            ):
                raise ForbiddenException(
                    "Only the assigned driver or an admin can update bus location"
                )
            bus.update_location(location)
            self._repository.update(bus)
            return bus

        bus = retry_on_conflict(_attempt, self._max_attempts, "update bus location")
        self._publisher.publish(bus.flush_domain_events())
        logger.info("Updated bus location", extra={"bus_id": str(bus_id)})
        return bus
