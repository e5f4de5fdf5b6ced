from services.bus.domain.entity import Bus
from services.shared.domain import BusId, Repository


class BusRepository(Repository[Bus, BusId]):
    """車両リポジトリのインターフェース"""
