from aws_lambda_powertools import Logger

from services.bus.domain.entity import Bus
from services.bus.domain.factory import BusDetails, BusFactory
from services.bus.domain.repository import BusRepository

logger = Logger(child=True)


class RegisterBusService:
    """車両登録ユースケース（管理者）"""

    def __init__(self, repository: BusRepository, factory: BusFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, bus_details: BusDetails) -> Bus:
        """車両を登録する"""
        bus = self._factory.create(bus_details)
        self._repository.save(bus)
        logger.info("Registered bus", extra={"bus_id": str(bus.id)})
        return bus
