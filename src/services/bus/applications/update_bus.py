from aws_lambda_powertools import Logger

from services.bus.domain.entity import Bus
from services.bus.domain.repository import BusRepository
from services.bus.domain.value_object import BusUpdate
from services.shared.applications import retry_on_conflict
from services.shared.domain import BusId, ResourceNotFoundException

logger = Logger(child=True)


class UpdateBusService:
    """車両更新ユースケース（管理者）"""

    def __init__(self, repository: BusRepository, max_attempts: int) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def update(self, bus_id: BusId, update: BusUpdate) -> Bus:
        """車両を更新する"""

        def _attempt() -> Bus:
            bus = self._repository.find_by_id(bus_id)
            if bus is None:
                raise ResourceNotFoundException(f"Bus not found: {bus_id}")
            bus.apply_update(update)
            self._repository.update(bus)
            return bus

        bus = retry_on_conflict(_attempt, self._max_attempts, "update bus")
        logger.info("Updated bus", extra={"bus_id": str(bus_id)})
        return bus
